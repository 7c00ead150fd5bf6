"""Rider location resolution with a fixed city-center fallback."""

from __future__ import annotations

import logging
from typing import Protocol

from pydantic import ValidationError

from pyctabus.exceptions import GeolocationError
from pyctabus.models.location import UserLocation

_logger = logging.getLogger(__name__)


class LocationProvider(Protocol):
    """Source of the device's current coordinate.

    Implementations return ``(lat, lon)`` or raise :class:`GeolocationError`
    when the location is denied or unavailable.
    """

    async def current_position(self) -> tuple[float, float]:
        ...


class StaticLocationProvider:
    """Always reports the same coordinate (e.g. a configured home stop)."""

    def __init__(self, lat: float, lon: float) -> None:
        self._position = (lat, lon)

    async def current_position(self) -> tuple[float, float]:
        return self._position


class UnavailableLocationProvider:
    """Provider for environments with no location source."""

    async def current_position(self) -> tuple[float, float]:
        raise GeolocationError("geolocation is not available")


class GeolocationResolver:
    """Resolves the rider's location, falling back to *fallback* on failure."""

    def __init__(self, provider: LocationProvider, fallback: UserLocation) -> None:
        self._provider = provider
        self._fallback = fallback

    @property
    def fallback(self) -> UserLocation:
        return self._fallback

    async def resolve(self) -> UserLocation:
        try:
            lat, lon = await self._provider.current_position()
            return UserLocation(lat=lat, lon=lon)
        except GeolocationError as exc:
            _logger.warning("Error getting location, using fallback: %s", exc)
        except (ValidationError, TypeError, ValueError) as exc:
            _logger.warning("Location provider returned an unusable position, using fallback: %s", exc)
        return self._fallback
