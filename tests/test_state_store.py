from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from pyctabus.models.route import Direction, Route, Stop
from pyctabus.state.events import Collection, StateChange, Transition
from pyctabus.state.policy import FetchSequencer
from pyctabus.state.store import StateStore


def _dt() -> datetime:
    return datetime(2026, 1, 1, tzinfo=UTC)


def test_transition_notifies_once_with_both_snapshots() -> None:
    store = StateStore(clock=_dt)
    seen: list[StateChange] = []
    store.subscribe(seen.append)

    store.transition(Transition.SET_ROUTE, route=Route(id="22"))

    assert len(seen) == 1
    change = seen[0]
    assert change.previous.route is None
    assert change.current.route is not None and change.current.route.id == "22"
    assert change.observed_at == _dt()
    assert change.changed("route")
    assert not change.changed("vehicles")


def test_invalid_cascade_rejected_and_state_unchanged() -> None:
    store = StateStore()

    with pytest.raises(ValidationError):
        store.transition(Transition.SET_STOP, stop=Stop(id="1"))
    with pytest.raises(ValidationError):
        store.transition(Transition.SET_DIRECTION, direction=Direction(value="Northbound"))

    assert store.state.stop is None
    assert store.state.direction is None


def test_failing_listener_does_not_block_others() -> None:
    store = StateStore()
    seen: list[StateChange] = []

    def _boom(_change: StateChange) -> None:
        raise RuntimeError("listener bug")

    store.subscribe(_boom)
    store.subscribe(seen.append)
    store.transition(Transition.STOPS_LOADED, stops_loaded=True)

    assert len(seen) == 1
    assert store.state.stops_loaded is True


def test_unsubscribe() -> None:
    store = StateStore()
    seen: list[StateChange] = []
    unsubscribe = store.subscribe(seen.append)

    unsubscribe()
    store.transition(Transition.STOPS_LOADED, stops_loaded=True)

    assert seen == []


def test_sequencer_supersedes_per_collection() -> None:
    sequencer = FetchSequencer()
    first = sequencer.issue(Collection.DIRECTIONS)
    stops = sequencer.issue(Collection.STOPS)
    second = sequencer.issue(Collection.DIRECTIONS)

    assert not sequencer.is_current(Collection.DIRECTIONS, first)
    assert sequencer.is_current(Collection.DIRECTIONS, second)
    assert sequencer.is_current(Collection.STOPS, stops)

    sequencer.invalidate([Collection.STOPS])
    assert not sequencer.is_current(Collection.STOPS, stops)
