"""Vehicle location endpoint (``/cta/bus/vehicles?rt=``).

The envelope field is the singular ``vehicle``.
"""

from __future__ import annotations

from pyctabus._api._common import get_envelope_list
from pyctabus._constants import VEHICLES_ENDPOINT
from pyctabus._transport import Transport
from pyctabus.models.vehicle import VehiclePosition


async def fetch_vehicles(transport: Transport, route_id: str) -> list[VehiclePosition]:
    return await get_envelope_list(
        transport=transport,
        endpoint=VEHICLES_ENDPOINT,
        field="vehicle",
        model=VehiclePosition,
        params={"rt": route_id},
    )
