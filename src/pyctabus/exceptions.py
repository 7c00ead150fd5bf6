"""Custom exception hierarchy for pyctabus."""

from __future__ import annotations


class CtaBusError(Exception):
    """Base exception for all pyctabus errors."""


class CtaBusConfigError(CtaBusError):
    """Invalid or missing configuration."""


class CtaBusTransportError(CtaBusError):
    """HTTP-level failure (network, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class CtaBusResponseError(CtaBusError):
    """Response JSON did not have the expected ``bustime-response`` shape."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class CtaBusApiError(CtaBusResponseError):
    """Bus Tracker returned an ``error`` list instead of data.

    The upstream API reports "No data found" style conditions this way,
    so callers usually treat it the same as an empty result.
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: str = "",
        messages: tuple[str, ...] = (),
    ) -> None:
        self.messages = messages
        super().__init__(message, endpoint=endpoint)


class CtaBusSelectionError(CtaBusError):
    """A selection was made out of cascade order (e.g. a stop with no direction)."""


class GeolocationError(CtaBusError):
    """Device location was denied or is unavailable."""
