"""Pure rendering of :class:`BusViewState` into a display model.

Nothing here holds state: the same snapshot always renders the same view.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from pyctabus._constants import (
    FALLBACK_LATITUDE,
    FALLBACK_LONGITUDE,
    NO_ACTIVE_BUSES_MESSAGE,
    NO_STOP_DATA_MESSAGE,
    VIEWPORT_PADDING_DEG,
)
from pyctabus.formatting import prediction_line
from pyctabus.markers import MapMarker, build_markers
from pyctabus.models.location import BoundingBox, UserLocation
from pyctabus.state.snapshot import BusViewState
from pyctabus.viewport import fit_viewport


class StopPanel(StrEnum):
    HIDDEN = "hidden"
    """No direction selected."""
    LOADING = "loading"
    """Stops fetch still pending: neither a list nor a message is shown."""
    LIST = "list"
    NO_DATA = "no_data"


class Option(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class MapView(BaseModel):
    model_config = ConfigDict(frozen=True)

    center: UserLocation
    markers: tuple[MapMarker, ...]
    bounds: BoundingBox | None = None


class BusView(BaseModel):
    """Everything the screen shows for one state snapshot."""

    model_config = ConfigDict(frozen=True)

    route_options: tuple[Option, ...] = ()
    selected_route: str | None = None
    show_directions: bool = False
    direction_options: tuple[Option, ...] = ()
    selected_direction: str | None = None
    stop_panel: StopPanel = StopPanel.HIDDEN
    stop_options: tuple[Option, ...] = ()
    selected_stop: str | None = None
    stop_message: str | None = None
    prediction_lines: tuple[str, ...] = ()
    prediction_message: str | None = None
    map: MapView | None = None


def _stop_panel(state: BusViewState) -> StopPanel:
    if state.direction is None:
        return StopPanel.HIDDEN
    if state.stops:
        return StopPanel.LIST
    if state.stops_loaded:
        return StopPanel.NO_DATA
    return StopPanel.LOADING


def render_view(
    state: BusViewState,
    *,
    fallback: UserLocation | None = None,
    padding: float = VIEWPORT_PADDING_DEG,
) -> BusView:
    """Build the display model for *state*.

    *fallback* centers the map when the rider has no resolved location.
    """
    panel = _stop_panel(state)

    prediction_message = None
    if not state.predictions and state.prediction_attempted and state.stop is not None:
        prediction_message = NO_ACTIVE_BUSES_MESSAGE

    map_view = None
    if state.vehicles:
        center = state.user_location or fallback or UserLocation(lat=FALLBACK_LATITUDE, lon=FALLBACK_LONGITUDE)
        map_view = MapView(
            center=center,
            markers=build_markers(state.vehicles, state.user_location),
            bounds=fit_viewport(state.vehicles, state.user_location, padding=padding),
        )

    return BusView(
        route_options=tuple(Option(value=r.id, label=r.label) for r in state.routes),
        selected_route=state.route.id if state.route else None,
        show_directions=bool(state.directions),
        direction_options=tuple(Option(value=d.value, label=d.value) for d in state.directions),
        selected_direction=state.direction.value if state.direction else None,
        stop_panel=panel,
        stop_options=tuple(Option(value=s.id, label=s.name or s.id) for s in state.stops),
        selected_stop=state.stop.id if state.stop else None,
        stop_message=NO_STOP_DATA_MESSAGE if panel is StopPanel.NO_DATA else None,
        prediction_lines=tuple(prediction_line(p) for p in state.predictions),
        prediction_message=prediction_message,
        map=map_view,
    )
