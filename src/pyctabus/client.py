"""High-level async client tying the bus tracker components together."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import aiohttp

from pyctabus._tasks import BackgroundTasks
from pyctabus._transport import HttpTransport, Transport
from pyctabus.cascade import QueryCascade
from pyctabus.catalog import RouteCatalog
from pyctabus.config import BusTrackerConfig
from pyctabus.exceptions import CtaBusError, CtaBusSelectionError
from pyctabus.geolocation import GeolocationResolver, LocationProvider, UnavailableLocationProvider
from pyctabus.models.location import UserLocation
from pyctabus.models.route import Direction, Route
from pyctabus.predictions import PredictionFetcher
from pyctabus.reset import ResetController
from pyctabus.state.events import Collection, StateChange, Transition
from pyctabus.state.policy import FetchSequencer
from pyctabus.state.snapshot import BusViewState
from pyctabus.state.store import StateStore
from pyctabus.vehicles import VehicleTracker
from pyctabus.view import BusView, render_view
from pyctabus.viewport import MapRenderer, ViewportFitter

_logger = logging.getLogger(__name__)


class BusTracker:
    """Async client for picking a route, direction and stop and tracking buses.

    Usage::

        async with BusTracker(config) as tracker:
            await tracker.start()
            tracker.select_route("22")
            await tracker.wait_idle()
            print(tracker.view().direction_options)
    """

    def __init__(
        self,
        config: BusTrackerConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        location_provider: LocationProvider | None = None,
        map_renderer: MapRenderer | None = None,
        on_change: Callable[[StateChange], None] | None = None,
    ) -> None:
        self._config = config or BusTrackerConfig()
        self._external_session = session is not None
        self._http_session = session
        self._injected_transport = transport
        self._transport: Transport | None = transport

        self.store = StateStore()
        self._sequencer = FetchSequencer()
        self._tasks = BackgroundTasks()
        self._resolver = GeolocationResolver(
            location_provider or UnavailableLocationProvider(),
            UserLocation(lat=self._config.fallback_latitude, lon=self._config.fallback_longitude),
        )
        self._cascade: QueryCascade | None = None
        self._catalog: RouteCatalog | None = None
        self._tracker: VehicleTracker | None = None
        self._predictions: PredictionFetcher | None = None
        self._reset = ResetController(self.store, self._sequencer)

        if map_renderer is not None:
            self.store.subscribe(ViewportFitter(map_renderer, padding=self._config.viewport_padding))
        if on_change is not None:
            self.store.subscribe(on_change)

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> BusTracker:
        if self._injected_transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        self._build_components(self._require_transport())
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self._tasks.cancel_all()
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if self._injected_transport is None:
            self._transport = None
        self._cascade = None

    def _build_components(self, transport: Transport) -> None:
        self._tracker = VehicleTracker(self.store, transport, self._sequencer)
        self._cascade = QueryCascade(self.store, transport, self._sequencer, self._tracker, self._tasks)
        self._catalog = RouteCatalog(self.store, transport, self._sequencer)
        self._predictions = PredictionFetcher(self.store, transport, self._sequencer)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise CtaBusError("Client not initialized. Use 'async with BusTracker(...) as tracker:'")
        return self._transport

    def _require_cascade(self) -> QueryCascade:
        if self._cascade is None:
            raise CtaBusError("Client not initialized. Use 'async with BusTracker(...) as tracker:'")
        return self._cascade

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    @property
    def state(self) -> BusViewState:
        return self.store.state

    @property
    def cascade(self) -> QueryCascade:
        return self._require_cascade()

    async def start(self) -> None:
        """Load the route catalog and resolve the rider's location."""
        self._require_cascade()
        assert self._catalog is not None  # noqa: S101
        await asyncio.gather(self._catalog.load(), self.locate())

    async def locate(self) -> UserLocation | None:
        """Resolve the rider's location and publish it.

        Returns ``None`` if a reset superseded the resolution meanwhile.
        """
        token = self._sequencer.issue(Collection.LOCATION)
        location = await self._resolver.resolve()
        if not self._sequencer.is_current(Collection.LOCATION, token):
            _logger.debug("Discarding superseded location %s", location)
            return None
        self.store.transition(Transition.LOCATION_RESOLVED, user_location=location)
        return location

    def subscribe(self, listener: Callable[[StateChange], None]) -> Callable[[], None]:
        return self.store.subscribe(listener)

    def view(self) -> BusView:
        return render_view(
            self.store.state,
            fallback=self._resolver.fallback,
            padding=self._config.viewport_padding,
        )

    async def wait_idle(self) -> None:
        """Wait for every scheduled fetch to settle."""
        await self._tasks.drain()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_route(self, route_id: str | None) -> None:
        """Select a route by id; ``None`` or ``""`` clears the selection."""
        cascade = self._require_cascade()
        if not route_id:
            cascade.set_route(None)
            return
        assert self._catalog is not None  # noqa: S101
        # Routes outside the loaded catalog are still valid Bus Tracker ids.
        route = self._catalog.find(route_id) or Route(id=route_id)
        cascade.set_route(route)

    def select_direction(self, value: str | None) -> None:
        cascade = self._require_cascade()
        cascade.set_direction(Direction(value=value) if value else None)

    def select_stop(self, stop_id: str | None) -> None:
        cascade = self._require_cascade()
        if not stop_id:
            cascade.set_stop(None)
            return
        for stop in cascade.stops:
            if stop.id == stop_id:
                cascade.set_stop(stop)
                return
        raise CtaBusSelectionError(f"stop {stop_id!r} is not served by the selected route and direction")

    async def get_predictions(self) -> None:
        """Fetch predictions for the selected stop (the "Get Predictions" action)."""
        self._require_cascade()
        assert self._predictions is not None  # noqa: S101
        await self._predictions.fetch_current()

    def reset(self) -> StateChange:
        return self._reset.reset()
