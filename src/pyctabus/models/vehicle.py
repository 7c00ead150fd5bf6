"""Live vehicle position model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pyctabus._normalize import safe_float, safe_str
from pyctabus.models._base import CtaBaseModel


class VehiclePosition(CtaBaseModel):
    """Position of a single bus from ``/cta/bus/vehicles``.

    Parameters
    ----------
    vehicle_id : str
        Vehicle number painted on the bus.
    lat : float
        Latitude in degrees. Bus Tracker sends it as a string.
    lon : float
        Longitude in degrees.
    heading_degrees : float
        Compass heading, 0 = north, clockwise.
    destination_label : str
        Destination sign text.
    """

    vehicle_id: str = Field(validation_alias=AliasChoices("vid", "vehicle_id"))
    lat: float = Field(allow_inf_nan=False)
    lon: float = Field(allow_inf_nan=False)
    heading_degrees: float = Field(default=0.0, validation_alias=AliasChoices("hdg", "heading_degrees"))
    destination_label: str = Field(default="", validation_alias=AliasChoices("des", "destination_label"))
    route: str | None = Field(default=None, validation_alias=AliasChoices("rt", "route"))

    @field_validator("vehicle_id", "route", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Any:
        return safe_str(value) if isinstance(value, (int, float)) else value

    @field_validator("lat", "lon", mode="before")
    @classmethod
    def _coerce_coordinate(cls, value: Any) -> Any:
        parsed = safe_float(value)
        # Leave unparseable input in place so validation reports it.
        return value if parsed is None else parsed

    @field_validator("heading_degrees", mode="before")
    @classmethod
    def _coerce_heading(cls, value: Any) -> float:
        parsed = safe_float(value)
        return 0.0 if parsed is None else parsed % 360.0
