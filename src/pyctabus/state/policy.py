"""Supersession policy for in-flight fetches.

Each fetch takes a token from :class:`FetchSequencer` when it starts and
may apply its result only while that token is still the latest one issued
for its collection. Requests are never aborted; late results are dropped.
"""

from __future__ import annotations

from collections.abc import Iterable

from pyctabus.state.events import Collection

#: Collections invalidated by each selection level, upstream first.
ROUTE_DEPENDENTS: tuple[Collection, ...] = (
    Collection.DIRECTIONS,
    Collection.STOPS,
    Collection.VEHICLES,
    Collection.PREDICTIONS,
)
DIRECTION_DEPENDENTS: tuple[Collection, ...] = (
    Collection.STOPS,
    Collection.VEHICLES,
    Collection.PREDICTIONS,
)
STOP_DEPENDENTS: tuple[Collection, ...] = (Collection.PREDICTIONS,)


class FetchSequencer:
    """Monotonic per-collection sequence tokens."""

    def __init__(self) -> None:
        self._latest: dict[Collection, int] = {}

    def issue(self, collection: Collection) -> int:
        """Start a new fetch for *collection*, superseding any pending one."""
        token = self._latest.get(collection, 0) + 1
        self._latest[collection] = token
        return token

    def invalidate(self, collections: Iterable[Collection]) -> None:
        """Supersede pending fetches without starting new ones."""
        for collection in collections:
            self.issue(collection)

    def is_current(self, collection: Collection, token: int) -> bool:
        return self._latest.get(collection, 0) == token
