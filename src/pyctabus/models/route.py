"""Route, direction and stop models."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pyctabus._normalize import safe_float, safe_str
from pyctabus.models._base import CtaBaseModel


class Route(CtaBaseModel):
    """A bus route from ``/cta/bus/routes``."""

    id: str = Field(validation_alias=AliasChoices("rt", "id"))
    """Route designator (e.g. ``"22"``)."""
    name: str = Field(default="", validation_alias=AliasChoices("rtnm", "rtn", "name"))
    """Route name (e.g. ``"Clark"``)."""
    color: str | None = Field(default=None, validation_alias=AliasChoices("rtclr", "color"))
    """Hex color the CTA uses for the route, when provided."""

    @field_validator("id", "name", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Any:
        return safe_str(value) if isinstance(value, (int, float)) else value

    @property
    def label(self) -> str:
        return f"{self.id} - {self.name}" if self.name else self.id


class Direction(CtaBaseModel):
    """A direction of travel for a route (e.g. ``"Northbound"``)."""

    value: str = Field(validation_alias=AliasChoices("dir", "name", "id", "value"))


class Stop(CtaBaseModel):
    """A stop served by a (route, direction) pair."""

    id: str = Field(validation_alias=AliasChoices("stpid", "id"))
    name: str = Field(default="", validation_alias=AliasChoices("stpnm", "name"))
    lat: float | None = None
    lon: float | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return safe_str(value) if isinstance(value, (int, float)) else value

    @field_validator("lat", "lon", mode="before")
    @classmethod
    def _coerce_floats(cls, value: Any) -> float | None:
        return safe_float(value)
