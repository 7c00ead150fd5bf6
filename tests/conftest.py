from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from pyctabus._constants import ENVELOPE_KEY
from pyctabus._tasks import BackgroundTasks
from pyctabus.cascade import QueryCascade
from pyctabus.exceptions import CtaBusTransportError
from pyctabus.predictions import PredictionFetcher
from pyctabus.reset import ResetController
from pyctabus.state.policy import FetchSequencer
from pyctabus.state.store import StateStore
from pyctabus.vehicles import VehicleTracker


def envelope(field_name: str, items: Any) -> dict[str, Any]:
    return {ENVELOPE_KEY: {field_name: items}}


def _key(endpoint: str, params: Mapping[str, str] | None) -> tuple[str, tuple[tuple[str, str], ...]]:
    return endpoint, tuple(sorted((params or {}).items()))


class FakeTransport:
    """Scripted transport: canned payloads/exceptions per (endpoint, params), optional gates."""

    def __init__(self) -> None:
        self._responses: dict[tuple[str, tuple[tuple[str, str], ...]], Any] = {}
        self._gates: dict[tuple[str, tuple[tuple[str, str], ...]], asyncio.Event] = {}
        self.calls: list[tuple[str, dict[str, str]]] = []

    def respond(self, endpoint: str, params: Mapping[str, str] | None, result: Any) -> None:
        self._responses[_key(endpoint, params)] = result

    def gate(self, endpoint: str, params: Mapping[str, str] | None) -> asyncio.Event:
        event = asyncio.Event()
        self._gates[_key(endpoint, params)] = event
        return event

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        key = _key(endpoint, params)
        self.calls.append((endpoint, dict(params or {})))
        gate = self._gates.get(key)
        if gate is not None:
            await gate.wait()
        if key not in self._responses:
            raise CtaBusTransportError(f"no scripted response for {key}", endpoint=endpoint)
        result = self._responses[key]
        if isinstance(result, Exception):
            raise result
        return result


async def wait_until(predicate: Callable[[], bool], *, spins: int = 200) -> None:
    for _ in range(spins):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition not reached")


@dataclass
class Harness:
    transport: FakeTransport
    store: StateStore = field(default_factory=StateStore)
    sequencer: FetchSequencer = field(default_factory=FetchSequencer)
    tasks: BackgroundTasks = field(default_factory=BackgroundTasks)

    def __post_init__(self) -> None:
        self.tracker = VehicleTracker(self.store, self.transport, self.sequencer)
        self.cascade = QueryCascade(self.store, self.transport, self.sequencer, self.tracker, self.tasks)
        self.predictions = PredictionFetcher(self.store, self.transport, self.sequencer)
        self.resetter = ResetController(self.store, self.sequencer)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def harness(transport: FakeTransport) -> Harness:
    return Harness(transport=transport)
