from __future__ import annotations

import pytest
from conftest import FakeTransport, Harness, envelope, wait_until

from pyctabus._constants import (
    DIRECTIONS_ENDPOINT,
    ENVELOPE_KEY,
    NO_ACTIVE_BUSES_MESSAGE,
    PREDICTIONS_ENDPOINT,
    STOPS_ENDPOINT,
    VEHICLES_ENDPOINT,
)
from pyctabus.exceptions import CtaBusTransportError
from pyctabus.models.route import Direction, Route, Stop
from pyctabus.view import render_view

_PRD_PARAMS = {"stop_id": "1", "rt": "22"}


async def _select_stop(harness: Harness, transport: FakeTransport) -> None:
    transport.respond(DIRECTIONS_ENDPOINT, {"rt": "22"}, envelope("directions", [{"dir": "Northbound"}]))
    transport.respond(
        STOPS_ENDPOINT,
        {"rt": "22", "direction": "Northbound"},
        envelope("stops", [{"stpid": "1", "stpnm": "Clark/Howard"}, {"stpid": "2", "stpnm": "Clark/Touhy"}]),
    )
    transport.respond(VEHICLES_ENDPOINT, {"rt": "22"}, envelope("vehicle", []))
    harness.cascade.set_route(Route(id="22"))
    await harness.tasks.drain()
    harness.cascade.set_direction(Direction(value="Northbound"))
    await harness.tasks.drain()
    harness.cascade.set_stop(harness.cascade.stops[0])


@pytest.mark.asyncio
async def test_predictions_are_manual_only(harness: Harness, transport: FakeTransport) -> None:
    await _select_stop(harness, transport)

    assert all(endpoint != PREDICTIONS_ENDPOINT for endpoint, _ in transport.calls)
    assert harness.store.state.prediction_attempted is False


@pytest.mark.asyncio
async def test_fetch_current_populates_predictions(harness: Harness, transport: FakeTransport) -> None:
    await _select_stop(harness, transport)
    transport.respond(
        PREDICTIONS_ENDPOINT,
        _PRD_PARAMS,
        envelope("prd", [{"rt": "22", "rtdir": "Northbound", "prdtm": "20251225 14:10"}]),
    )

    await harness.predictions.fetch_current()

    state = harness.store.state
    assert [p.arrival_timestamp for p in state.predictions] == ["20251225 14:10"]
    assert state.prediction_attempted is True


@pytest.mark.asyncio
async def test_fetch_with_empty_stop_is_noop(harness: Harness, transport: FakeTransport) -> None:
    await harness.predictions.fetch(Route(id="22"), None)
    await harness.predictions.fetch(None, Stop(id="1"))

    assert transport.calls == []
    assert harness.store.state.prediction_attempted is False


@pytest.mark.asyncio
async def test_failure_keeps_previous_predictions(harness: Harness, transport: FakeTransport) -> None:
    await _select_stop(harness, transport)
    transport.respond(PREDICTIONS_ENDPOINT, _PRD_PARAMS, envelope("prd", [{"rt": "22", "prdtm": "20251225 14:10"}]))
    await harness.predictions.fetch_current()

    transport.respond(PREDICTIONS_ENDPOINT, _PRD_PARAMS, CtaBusTransportError("timeout"))
    await harness.predictions.fetch_current()

    state = harness.store.state
    assert len(state.predictions) == 1
    assert state.prediction_attempted is True


@pytest.mark.asyncio
async def test_empty_result_marks_attempted(harness: Harness, transport: FakeTransport) -> None:
    await _select_stop(harness, transport)
    transport.respond(PREDICTIONS_ENDPOINT, _PRD_PARAMS, envelope("prd", []))

    await harness.predictions.fetch_current()

    assert harness.store.state.predictions == ()
    assert harness.store.state.prediction_attempted is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "reply",
    [
        {ENVELOPE_KEY: {"error": [{"msg": "No service scheduled"}]}},
        {ENVELOPE_KEY: {}},
    ],
    ids=["error-list", "no-prd-field"],
)
async def test_reply_without_predictions_shows_no_buses(
    harness: Harness, transport: FakeTransport, reply: dict[str, object]
) -> None:
    await _select_stop(harness, transport)
    transport.respond(PREDICTIONS_ENDPOINT, _PRD_PARAMS, envelope("prd", [{"rt": "22", "prdtm": "20251225 14:10"}]))
    await harness.predictions.fetch_current()

    transport.respond(PREDICTIONS_ENDPOINT, _PRD_PARAMS, reply)
    await harness.predictions.fetch_current()

    state = harness.store.state
    assert state.predictions == ()
    assert state.prediction_attempted is True
    assert render_view(state).prediction_message == NO_ACTIVE_BUSES_MESSAGE


@pytest.mark.asyncio
async def test_stop_change_during_fetch_discards_result(harness: Harness, transport: FakeTransport) -> None:
    await _select_stop(harness, transport)
    transport.respond(PREDICTIONS_ENDPOINT, _PRD_PARAMS, envelope("prd", [{"rt": "22", "prdtm": "20251225 14:10"}]))
    gate = transport.gate(PREDICTIONS_ENDPOINT, _PRD_PARAMS)

    pending = harness.tasks.spawn(harness.predictions.fetch_current())
    await wait_until(lambda: any(endpoint == PREDICTIONS_ENDPOINT for endpoint, _ in transport.calls))
    harness.cascade.set_stop(harness.cascade.stops[1])
    gate.set()
    await pending

    state = harness.store.state
    assert state.stop is not None and state.stop.id == "2"
    assert state.predictions == ()
    assert state.prediction_attempted is False


@pytest.mark.asyncio
async def test_selecting_a_stop_clears_predictions(harness: Harness, transport: FakeTransport) -> None:
    await _select_stop(harness, transport)
    transport.respond(PREDICTIONS_ENDPOINT, _PRD_PARAMS, envelope("prd", [{"rt": "22", "prdtm": "20251225 14:10"}]))
    await harness.predictions.fetch_current()

    harness.cascade.set_stop(harness.cascade.stops[1])

    assert harness.store.state.predictions == ()
    assert harness.store.state.prediction_attempted is False
