"""Data models for Bus Tracker responses and client state."""

from pyctabus.models._base import CtaBaseModel
from pyctabus.models.location import BoundingBox, UserLocation
from pyctabus.models.prediction import Prediction
from pyctabus.models.route import Direction, Route, Stop
from pyctabus.models.vehicle import VehiclePosition

__all__ = [
    "BoundingBox",
    "CtaBaseModel",
    "Direction",
    "Prediction",
    "Route",
    "Stop",
    "UserLocation",
    "VehiclePosition",
]
