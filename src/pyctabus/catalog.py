"""Route catalog, loaded once per session."""

from __future__ import annotations

import logging

from pyctabus._api.routes import fetch_routes
from pyctabus._transport import Transport
from pyctabus.exceptions import CtaBusError
from pyctabus.models.route import Route
from pyctabus.state.events import Collection, Transition
from pyctabus.state.policy import FetchSequencer
from pyctabus.state.store import StateStore

_logger = logging.getLogger(__name__)


class RouteCatalog:
    def __init__(self, store: StateStore, transport: Transport, sequencer: FetchSequencer) -> None:
        self._store = store
        self._transport = transport
        self._sequencer = sequencer

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._store.state.routes

    def find(self, route_id: str) -> Route | None:
        for route in self.routes:
            if route.id == route_id:
                return route
        return None

    async def load(self) -> None:
        token = self._sequencer.issue(Collection.ROUTES)
        try:
            routes = tuple(await fetch_routes(self._transport))
        except CtaBusError as exc:
            _logger.warning("Error fetching routes: %s", exc)
            routes = ()

        if not self._sequencer.is_current(Collection.ROUTES, token):
            return
        self._store.transition(Transition.ROUTES_LOADED, routes=routes)
