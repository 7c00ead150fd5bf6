"""In-memory store for the bus view state.

This is the only component allowed to replace the state snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from pyctabus.state.events import StateChange, Transition
from pyctabus.state.snapshot import INITIAL_STATE, BusViewState

_logger = logging.getLogger(__name__)

Listener = Callable[[StateChange], None]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class StateStore:
    """Holds the current :class:`BusViewState` and notifies subscribers.

    Each call to :meth:`transition` builds one new validated snapshot and
    publishes it as a single :class:`StateChange`, so listeners never see a
    partially applied transition.
    """

    def __init__(
        self,
        initial: BusViewState = INITIAL_STATE,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._state = initial
        self._clock = clock
        self._listeners: list[Listener] = []

    @property
    def state(self) -> BusViewState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* and return a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def transition(self, transition: Transition, **changes: Any) -> StateChange:
        """Apply *changes* to the current state as one named transition.

        Raises
        ------
        pydantic.ValidationError
            The resulting state would break the selection cascade.
        """
        previous = self._state
        # Build through the constructor so the cascade validator runs.
        current = BusViewState(**{**dict(previous), **changes})
        self._state = current

        change = StateChange(
            transition=transition,
            previous=previous,
            current=current,
            observed_at=self._clock(),
        )
        _logger.debug("Transition %s: %s", transition, sorted(changes))
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                _logger.debug("State listener %r failed", listener, exc_info=True)
        return change
