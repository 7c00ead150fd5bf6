"""Map viewport derived from vehicle positions and the rider's location."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from pyctabus._constants import VIEWPORT_PADDING_DEG
from pyctabus.markers import MapMarker, build_markers
from pyctabus.models.location import BoundingBox, UserLocation
from pyctabus.models.vehicle import VehiclePosition
from pyctabus.state.events import StateChange

_logger = logging.getLogger(__name__)


class MapRenderer(Protocol):
    """Whatever draws the map: markers at coordinates plus a viewport."""

    def render_markers(self, markers: Sequence[MapMarker]) -> None:
        ...

    def fit_bounds(self, bounds: BoundingBox) -> None:
        ...


def fit_viewport(
    vehicles: Sequence[VehiclePosition],
    user_location: UserLocation | None,
    *,
    padding: float = VIEWPORT_PADDING_DEG,
) -> BoundingBox | None:
    """Smallest box covering every vehicle and the rider, plus *padding*.

    Returns ``None`` when there are no vehicles or no user location, in
    which case the map keeps its previous framing.
    """
    if not vehicles or user_location is None:
        return None

    lats = [v.lat for v in vehicles]
    lons = [v.lon for v in vehicles]
    lats.append(user_location.lat)
    lons.append(user_location.lon)

    return BoundingBox(
        south=min(lats) - padding,
        west=min(lons) - padding,
        north=max(lats) + padding,
        east=max(lons) + padding,
    )


class ViewportFitter:
    """Store listener that keeps a :class:`MapRenderer` in sync.

    Markers are re-rendered and the viewport refitted whenever the vehicle
    collection or the user location changes; other transitions are ignored.
    """

    def __init__(self, renderer: MapRenderer, *, padding: float = VIEWPORT_PADDING_DEG) -> None:
        self._renderer = renderer
        self._padding = padding

    def __call__(self, change: StateChange) -> None:
        if not (change.changed("vehicles") or change.changed("user_location")):
            return
        state = change.current
        self._renderer.render_markers(build_markers(state.vehicles, state.user_location))
        bounds = fit_viewport(state.vehicles, state.user_location, padding=self._padding)
        if bounds is not None:
            _logger.debug("Fitting map to %s", bounds)
            self._renderer.fit_bounds(bounds)
