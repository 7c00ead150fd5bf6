"""Arrival prediction model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pyctabus._normalize import safe_str
from pyctabus.models._base import CtaBaseModel


class Prediction(CtaBaseModel):
    """A predicted arrival of a bus at a stop.

    ``destination_label`` prefers the route direction (``rtdir``) and falls
    back to the destination sign (``des``) when the direction is absent.
    ``arrival_timestamp`` is kept as received (``"<date> HH:MM"``); see
    :func:`pyctabus.formatting.format_time`.
    """

    route: str = Field(validation_alias=AliasChoices("rt", "route"))
    destination_label: str = Field(
        default="",
        validation_alias=AliasChoices("rtdir", "des", "destination_label"),
    )
    arrival_timestamp: str = Field(validation_alias=AliasChoices("prdtm", "arrival_timestamp"))
    vehicle_id: str | None = Field(default=None, validation_alias=AliasChoices("vid", "vehicle_id"))
    stop_name: str | None = Field(default=None, validation_alias=AliasChoices("stpnm", "stop_name"))

    @field_validator("route", "vehicle_id", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Any:
        return safe_str(value) if isinstance(value, (int, float)) else value
