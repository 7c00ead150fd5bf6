"""Map markers derived from vehicles and the rider's location."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from pyctabus.formatting import heading_arrow, vehicle_popup
from pyctabus.models.location import UserLocation
from pyctabus.models.vehicle import VehiclePosition

USER_POPUP = "Your Location"


class MarkerKind(StrEnum):
    VEHICLE = "vehicle"
    USER = "user"


class MapMarker(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: MarkerKind
    lat: float
    lon: float
    popup: str
    icon: str = ""
    rotation_degrees: float = 0.0


def build_markers(
    vehicles: Sequence[VehiclePosition],
    user_location: UserLocation | None,
) -> tuple[MapMarker, ...]:
    """One marker per vehicle, then the rider's marker when located."""
    markers = [
        MapMarker(
            kind=MarkerKind.VEHICLE,
            lat=vehicle.lat,
            lon=vehicle.lon,
            popup=vehicle_popup(vehicle),
            icon=heading_arrow(vehicle.heading_degrees),
            rotation_degrees=vehicle.heading_degrees,
        )
        for vehicle in vehicles
    ]
    if user_location is not None:
        markers.append(
            MapMarker(
                kind=MarkerKind.USER,
                lat=user_location.lat,
                lon=user_location.lon,
                popup=USER_POPUP,
            )
        )
    return tuple(markers)
