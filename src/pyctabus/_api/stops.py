"""Stop list endpoint (``/cta/bus/stops?rt=&direction=``)."""

from __future__ import annotations

from pyctabus._api._common import get_envelope_list
from pyctabus._constants import STOPS_ENDPOINT
from pyctabus._transport import Transport
from pyctabus.models.route import Stop


async def fetch_stops(transport: Transport, route_id: str, direction: str) -> list[Stop]:
    return await get_envelope_list(
        transport=transport,
        endpoint=STOPS_ENDPOINT,
        field="stops",
        model=Stop,
        params={"rt": route_id, "direction": direction},
    )
