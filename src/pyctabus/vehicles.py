"""Live vehicle positions for the selected route."""

from __future__ import annotations

import logging

from pyctabus._api.vehicles import fetch_vehicles
from pyctabus._transport import Transport
from pyctabus.exceptions import CtaBusError
from pyctabus.models.route import Route
from pyctabus.models.vehicle import VehiclePosition
from pyctabus.state.events import Collection, Transition
from pyctabus.state.policy import FetchSequencer
from pyctabus.state.store import StateStore

_logger = logging.getLogger(__name__)


class VehicleTracker:
    """Fetches vehicle positions for a route and publishes them to the store.

    Refreshes are started by :meth:`QueryCascade.set_direction` only; there
    is no polling. A failed fetch publishes an empty collection.
    """

    def __init__(self, store: StateStore, transport: Transport, sequencer: FetchSequencer) -> None:
        self._store = store
        self._transport = transport
        self._sequencer = sequencer

    @property
    def vehicles(self) -> tuple[VehiclePosition, ...]:
        return self._store.state.vehicles

    def begin(self) -> int:
        """Reserve a sequence token for a refresh about to be scheduled."""
        return self._sequencer.issue(Collection.VEHICLES)

    async def refresh(self, route: Route, token: int | None = None) -> None:
        if token is None:
            token = self.begin()
        try:
            vehicles: tuple[VehiclePosition, ...] = tuple(await fetch_vehicles(self._transport, route.id))
        except CtaBusError as exc:
            _logger.warning("Fetching vehicles for route %s failed: %s", route.id, exc)
            vehicles = ()

        if not self._sequencer.is_current(Collection.VEHICLES, token):
            _logger.debug("Discarding superseded vehicles for route %s", route.id)
            return
        self._store.transition(Transition.VEHICLES_LOADED, vehicles=vehicles)
