"""Arrival prediction endpoint (``/cta/bus/predictions?stop_id=&rt=``)."""

from __future__ import annotations

from pyctabus._api._common import get_envelope_list
from pyctabus._constants import PREDICTIONS_ENDPOINT
from pyctabus._transport import Transport
from pyctabus.models.prediction import Prediction


async def fetch_predictions(transport: Transport, stop_id: str, route_id: str) -> list[Prediction]:
    return await get_envelope_list(
        transport=transport,
        endpoint=PREDICTIONS_ENDPOINT,
        field="prd",
        model=Prediction,
        params={"stop_id": stop_id, "rt": route_id},
    )
