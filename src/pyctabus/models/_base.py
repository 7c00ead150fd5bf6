"""Base model for Bus Tracker responses.

Every response model inherits from :class:`CtaBaseModel` which provides:

* frozen, ``extra="ignore"`` configuration so unknown upstream keys
  never break parsing.
* A ``model_validator(mode="before")`` that strips Bus Tracker
  placeholder values (``""``, ``"--"``) so the field default is used.
* A ``raw`` dict that captures the original payload.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Placeholder strings Bus Tracker uses for "not available".
_SENTINELS = frozenset({"", "--"})


class CtaBaseModel(BaseModel):
    """Base for Bus Tracker response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False, exclude=True)
    """Original API item dict."""

    @model_validator(mode="before")
    @classmethod
    def _clean_values(cls, values: Any) -> Any:
        """Drop placeholder values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _SENTINELS:
                continue
            cleaned[key] = value
        # Keep the caller's raw when constructing with keyword arguments.
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
