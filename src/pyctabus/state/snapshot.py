"""Immutable snapshot of the bus view state."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from pyctabus.models.location import UserLocation
from pyctabus.models.prediction import Prediction
from pyctabus.models.route import Direction, Route, Stop
from pyctabus.models.vehicle import VehiclePosition


class BusViewState(BaseModel):
    """Selection plus every collection derived from it.

    Collections are tuples and are replaced wholesale by transitions,
    never patched in place.

    Parameters
    ----------
    routes : tuple[Route, ...]
        Route catalog, loaded once per session.
    route, direction, stop
        The selection cascade. ``direction`` requires ``route`` and
        ``stop`` requires ``direction``.
    directions, stops, predictions, vehicles
        Fetched collections for the current selection.
    user_location : UserLocation or None
        Resolved rider location.
    stops_loaded : bool
        The stops fetch for the current direction has completed.
    prediction_attempted : bool
        A prediction fetch succeeded for the current stop.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    routes: tuple[Route, ...] = ()
    route: Route | None = None
    directions: tuple[Direction, ...] = ()
    direction: Direction | None = None
    stops: tuple[Stop, ...] = ()
    stop: Stop | None = None
    predictions: tuple[Prediction, ...] = ()
    vehicles: tuple[VehiclePosition, ...] = ()
    user_location: UserLocation | None = None
    stops_loaded: bool = False
    prediction_attempted: bool = False

    @model_validator(mode="after")
    def _check_cascade(self) -> BusViewState:
        if self.direction is not None and self.route is None:
            raise ValueError("direction selected without a route")
        if self.stop is not None and self.direction is None:
            raise ValueError("stop selected without a direction")
        return self


INITIAL_STATE = BusViewState()
