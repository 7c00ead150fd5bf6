"""State transition events.

Every accepted change to the store is described by one
:class:`StateChange`, which subscribers receive after it is applied.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from pyctabus.state.snapshot import BusViewState


class Collection(StrEnum):
    """Independently fetched pieces of state, each with its own sequence."""

    ROUTES = "routes"
    DIRECTIONS = "directions"
    STOPS = "stops"
    VEHICLES = "vehicles"
    PREDICTIONS = "predictions"
    LOCATION = "location"


class Transition(StrEnum):
    SET_ROUTE = "set_route"
    SET_DIRECTION = "set_direction"
    SET_STOP = "set_stop"
    ROUTES_LOADED = "routes_loaded"
    DIRECTIONS_LOADED = "directions_loaded"
    STOPS_LOADED = "stops_loaded"
    VEHICLES_LOADED = "vehicles_loaded"
    PREDICTIONS_LOADED = "predictions_loaded"
    LOCATION_RESOLVED = "location_resolved"
    RESET = "reset"


class StateChange(BaseModel):
    """An applied transition together with the states on either side of it."""

    model_config = ConfigDict(frozen=True)

    transition: Transition
    previous: BusViewState
    current: BusViewState
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def changed(self, field: str) -> bool:
        """Whether *field* differs between the two snapshots."""
        return bool(getattr(self.previous, field) != getattr(self.current, field))
