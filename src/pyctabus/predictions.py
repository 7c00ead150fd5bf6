"""On-demand arrival predictions for the selected stop."""

from __future__ import annotations

import logging

from pyctabus._api.predictions import fetch_predictions
from pyctabus._transport import Transport
from pyctabus.exceptions import CtaBusResponseError, CtaBusTransportError
from pyctabus.models.prediction import Prediction
from pyctabus.models.route import Route, Stop
from pyctabus.state.events import Collection, Transition
from pyctabus.state.policy import FetchSequencer
from pyctabus.state.store import StateStore

_logger = logging.getLogger(__name__)


class PredictionFetcher:
    """Fetches predictions only when asked; selection changes never trigger it.

    A reply without predictions (including Bus Tracker's ``error`` list, e.g.
    "No service scheduled") counts as an attempt with no buses. Unlike the
    other fetchers, a transport failure keeps whatever predictions are
    already shown and leaves ``prediction_attempted`` untouched.
    """

    def __init__(self, store: StateStore, transport: Transport, sequencer: FetchSequencer) -> None:
        self._store = store
        self._transport = transport
        self._sequencer = sequencer

    async def fetch(self, route: Route | None, stop: Stop | None) -> None:
        if route is None or stop is None:
            _logger.debug("Prediction fetch skipped: route=%s stop=%s", route, stop)
            return

        token = self._sequencer.issue(Collection.PREDICTIONS)
        try:
            predictions: tuple[Prediction, ...] = tuple(
                await fetch_predictions(self._transport, stop.id, route.id)
            )
        except CtaBusResponseError as exc:
            _logger.info("No predictions for stop %s route %s: %s", stop.id, route.id, exc)
            predictions = ()
        except CtaBusTransportError as exc:
            _logger.warning("Fetching predictions for stop %s route %s failed: %s", stop.id, route.id, exc)
            return

        if not self._sequencer.is_current(Collection.PREDICTIONS, token):
            _logger.debug("Discarding superseded predictions for stop %s", stop.id)
            return
        self._store.transition(
            Transition.PREDICTIONS_LOADED,
            predictions=predictions,
            prediction_attempted=True,
        )

    async def fetch_current(self) -> None:
        """Fetch predictions for the store's current route and stop."""
        state = self._store.state
        await self.fetch(state.route, state.stop)
