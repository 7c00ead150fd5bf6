"""One-step reset of the selection cascade."""

from __future__ import annotations

from pyctabus.state.events import Collection, StateChange, Transition
from pyctabus.state.policy import FetchSequencer
from pyctabus.state.store import StateStore

#: Everything a reset invalidates. The route catalog is session data and stays.
_RESET_COLLECTIONS: tuple[Collection, ...] = (
    Collection.DIRECTIONS,
    Collection.STOPS,
    Collection.VEHICLES,
    Collection.PREDICTIONS,
    Collection.LOCATION,
)


class ResetController:
    """Returns selection, collections and user location to their mount values.

    The user location is cleared and not re-resolved; callers that want a
    fresh location must ask for one explicitly.
    """

    def __init__(self, store: StateStore, sequencer: FetchSequencer) -> None:
        self._store = store
        self._sequencer = sequencer

    def reset(self) -> StateChange:
        self._sequencer.invalidate(_RESET_COLLECTIONS)
        return self._store.transition(
            Transition.RESET,
            route=None,
            directions=(),
            direction=None,
            stops=(),
            stop=None,
            predictions=(),
            vehicles=(),
            user_location=None,
            stops_loaded=False,
            prediction_attempted=False,
        )
