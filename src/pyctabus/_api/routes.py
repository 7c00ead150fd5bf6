"""Route catalog and direction endpoints.

Endpoints:
  - /cta/bus/routes
  - /cta/bus/directions?rt=
"""

from __future__ import annotations

from pyctabus._api._common import get_envelope_list
from pyctabus._constants import DIRECTIONS_ENDPOINT, ROUTES_ENDPOINT
from pyctabus._transport import Transport
from pyctabus.models.route import Direction, Route


async def fetch_routes(transport: Transport) -> list[Route]:
    """Fetch every route served by Bus Tracker."""
    return await get_envelope_list(
        transport=transport,
        endpoint=ROUTES_ENDPOINT,
        field="routes",
        model=Route,
    )


async def fetch_directions(transport: Transport, route_id: str) -> list[Direction]:
    """Fetch the directions of travel for *route_id*."""
    return await get_envelope_list(
        transport=transport,
        endpoint=DIRECTIONS_ENDPOINT,
        field="directions",
        model=Direction,
        params={"rt": route_id},
    )
