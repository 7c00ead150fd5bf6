"""HTTP transport for the Bus Tracker proxy backend."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyctabus.config import BusTrackerConfig
from pyctabus.exceptions import CtaBusTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        ...


class HttpTransport:
    """JSON-over-HTTP GET transport backed by an :class:`aiohttp.ClientSession`."""

    def __init__(self, config: BusTrackerConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        # total=None disables aiohttp's default five minute ceiling.
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        """GET ``base_url + endpoint`` and return the decoded JSON body."""
        url = f"{self._config.base_url}{endpoint}"
        headers = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("GET %s params=%s", url, dict(params or {}))

        try:
            async with self._http.get(
                url,
                params=dict(params or {}),
                headers=headers,
                timeout=self._timeout,
            ) as resp:
                body = await resp.read()
                if resp.status != 200:
                    raise CtaBusTransportError(
                        f"HTTP {resp.status} from {endpoint}: {body[:200].decode('utf-8', 'replace')}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except CtaBusTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise CtaBusTransportError(
                f"Request to {endpoint} failed: {exc!r}",
                endpoint=endpoint,
            ) from exc

        try:
            return json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise CtaBusTransportError(
                f"Invalid JSON from {endpoint}: {body[:200]!r}",
                endpoint=endpoint,
            ) from exc
