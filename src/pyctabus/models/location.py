"""Geographic value objects: user location and bounding box."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UserLocation(BaseModel):
    """The rider's coordinate."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class BoundingBox(BaseModel):
    """Axis-aligned latitude/longitude rectangle."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    south: float
    west: float
    north: float
    east: float

    @model_validator(mode="after")
    def _check_order(self) -> BoundingBox:
        if self.south > self.north or self.west > self.east:
            raise ValueError("bounding box corners are inverted")
        return self

    def contains(self, lat: float, lon: float) -> bool:
        return self.south <= lat <= self.north and self.west <= lon <= self.east
