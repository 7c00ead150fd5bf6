"""Route → direction → stop selection cascade.

Each setter applies its clearing synchronously, in one store transition,
before any dependent fetch is scheduled. Fetches carry sequence tokens and
drop their result if a later selection has superseded them.
"""

from __future__ import annotations

import logging

from pyctabus._api.routes import fetch_directions
from pyctabus._api.stops import fetch_stops
from pyctabus._tasks import BackgroundTasks
from pyctabus._transport import Transport
from pyctabus.exceptions import CtaBusError, CtaBusSelectionError
from pyctabus.models.route import Direction, Route, Stop
from pyctabus.models.vehicle import VehiclePosition
from pyctabus.state.events import Collection, Transition
from pyctabus.state.policy import (
    DIRECTION_DEPENDENTS,
    ROUTE_DEPENDENTS,
    STOP_DEPENDENTS,
    FetchSequencer,
)
from pyctabus.state.store import StateStore
from pyctabus.vehicles import VehicleTracker

_logger = logging.getLogger(__name__)


class QueryCascade:
    """Owns the selection state and the fetches that depend on it."""

    def __init__(
        self,
        store: StateStore,
        transport: Transport,
        sequencer: FetchSequencer,
        tracker: VehicleTracker,
        tasks: BackgroundTasks,
    ) -> None:
        self._store = store
        self._transport = transport
        self._sequencer = sequencer
        self._tracker = tracker
        self._tasks = tasks

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def directions(self) -> tuple[Direction, ...]:
        return self._store.state.directions

    @property
    def stops(self) -> tuple[Stop, ...]:
        return self._store.state.stops

    @property
    def vehicles(self) -> tuple[VehiclePosition, ...]:
        return self._tracker.vehicles

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def set_route(self, route: Route | None) -> None:
        """Select *route*, clearing everything downstream of it.

        A directions fetch is scheduled unless *route* is ``None``.
        """
        self._sequencer.invalidate(ROUTE_DEPENDENTS)
        self._store.transition(
            Transition.SET_ROUTE,
            route=route,
            directions=(),
            direction=None,
            stops=(),
            stop=None,
            stops_loaded=False,
            predictions=(),
            prediction_attempted=False,
            vehicles=(),
        )
        if route is None:
            return

        token = self._sequencer.issue(Collection.DIRECTIONS)
        self._tasks.spawn(self._load_directions(route, token), name=f"directions:{route.id}")

    def set_direction(self, direction: Direction | None) -> None:
        """Select *direction* for the current route.

        Schedules independent stops and vehicles fetches.

        Raises
        ------
        CtaBusSelectionError
            No route is selected.
        """
        route = self._store.state.route
        if route is None:
            raise CtaBusSelectionError("select a route before a direction")

        self._sequencer.invalidate(DIRECTION_DEPENDENTS)
        self._store.transition(
            Transition.SET_DIRECTION,
            direction=direction,
            stops=(),
            stop=None,
            stops_loaded=False,
            predictions=(),
            prediction_attempted=False,
            vehicles=(),
        )
        if direction is None:
            return

        stops_token = self._sequencer.issue(Collection.STOPS)
        vehicles_token = self._tracker.begin()
        self._tasks.spawn(
            self._load_stops(route, direction, stops_token),
            name=f"stops:{route.id}:{direction.value}",
        )
        self._tasks.spawn(self._tracker.refresh(route, vehicles_token), name=f"vehicles:{route.id}")

    def set_stop(self, stop: Stop | None) -> None:
        """Select *stop*. Predictions are not fetched automatically.

        Predictions shown for the previous stop are cleared and any pending
        prediction fetch is superseded, so what is shown always belongs to
        the selected stop. They are not carried over to the new stop
        while waiting for the next "Get Predictions".

        Raises
        ------
        CtaBusSelectionError
            No direction is selected.
        """
        if stop is not None and self._store.state.direction is None:
            raise CtaBusSelectionError("select a direction before a stop")

        self._sequencer.invalidate(STOP_DEPENDENTS)
        self._store.transition(
            Transition.SET_STOP,
            stop=stop,
            predictions=(),
            prediction_attempted=False,
        )

    # ------------------------------------------------------------------
    # Fetches
    # ------------------------------------------------------------------

    async def _load_directions(self, route: Route, token: int) -> None:
        try:
            directions = tuple(await fetch_directions(self._transport, route.id))
        except CtaBusError as exc:
            _logger.warning("Fetching directions for route %s failed: %s", route.id, exc)
            directions = ()

        if not self._sequencer.is_current(Collection.DIRECTIONS, token):
            _logger.debug("Discarding superseded directions for route %s", route.id)
            return
        self._store.transition(Transition.DIRECTIONS_LOADED, directions=directions)

    async def _load_stops(self, route: Route, direction: Direction, token: int) -> None:
        try:
            stops = tuple(await fetch_stops(self._transport, route.id, direction.value))
        except CtaBusError as exc:
            _logger.warning("Fetching stops for route %s %s failed: %s", route.id, direction.value, exc)
            stops = ()

        if not self._sequencer.is_current(Collection.STOPS, token):
            _logger.debug("Discarding superseded stops for route %s %s", route.id, direction.value)
            return
        self._store.transition(Transition.STOPS_LOADED, stops=stops, stops_loaded=True)
