"""Client configuration for pyctabus."""

from __future__ import annotations

import dataclasses
import math
import os
from collections.abc import Mapping
from typing import Any

from pyctabus._constants import (
    BASE_URL,
    FALLBACK_LATITUDE,
    FALLBACK_LONGITUDE,
    USER_AGENT,
    VIEWPORT_PADDING_DEG,
)
from pyctabus.exceptions import CtaBusConfigError


def _env_float(env: Mapping[str, str], key: str) -> float | None:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise CtaBusConfigError(f"{key} must be a number, got {raw!r}") from exc


@dataclasses.dataclass(frozen=True)
class BusTrackerConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Base URL of the backend that proxies the CTA Bus Tracker API.
        Defaults to a local development server.
    fallback_latitude : float
        Latitude used when device geolocation fails.
    fallback_longitude : float
        Longitude used when device geolocation fails.
    viewport_padding : float
        Degrees added on every side of a fitted map viewport.
    request_timeout : float or None
        Total per-request timeout in seconds. ``None`` (the default) waits
        indefinitely, leaving a hung request pending.
    user_agent : str
        User-Agent header sent with every request.
    """

    base_url: str = BASE_URL
    fallback_latitude: float = FALLBACK_LATITUDE
    fallback_longitude: float = FALLBACK_LONGITUDE
    viewport_padding: float = VIEWPORT_PADDING_DEG
    request_timeout: float | None = None
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if not self.base_url or not self.base_url.startswith(("http://", "https://")):
            raise CtaBusConfigError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        # Normalise so endpoint paths can be appended directly.
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if not -90.0 <= self.fallback_latitude <= 90.0:
            raise CtaBusConfigError(f"fallback_latitude out of range: {self.fallback_latitude}")
        if not -180.0 <= self.fallback_longitude <= 180.0:
            raise CtaBusConfigError(f"fallback_longitude out of range: {self.fallback_longitude}")
        if self.viewport_padding < 0 or math.isnan(self.viewport_padding):
            raise CtaBusConfigError(f"viewport_padding must be >= 0, got {self.viewport_padding}")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise CtaBusConfigError(f"request_timeout must be positive, got {self.request_timeout}")

    @classmethod
    def from_env(cls, **overrides: Any) -> BusTrackerConfig:
        """Create configuration from environment variables.

        Reads ``CTABUS_BASE_URL``, ``CTABUS_FALLBACK_LAT``,
        ``CTABUS_FALLBACK_LON``, ``CTABUS_VIEWPORT_PADDING`` and
        ``CTABUS_REQUEST_TIMEOUT``. Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        BusTrackerConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("CTABUS_BASE_URL")
        if base_url:
            config_kwargs["base_url"] = base_url

        _ENV_FLOAT_MAP = {
            "CTABUS_FALLBACK_LAT": "fallback_latitude",
            "CTABUS_FALLBACK_LON": "fallback_longitude",
            "CTABUS_VIEWPORT_PADDING": "viewport_padding",
            "CTABUS_REQUEST_TIMEOUT": "request_timeout",
        }
        for env_key, field_name in _ENV_FLOAT_MAP.items():
            if field_name in overrides:
                continue
            value = _env_float(env, env_key)
            if value is not None:
                config_kwargs[field_name] = value

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
