"""pyctabus - Async Python client for CTA Bus Tracker route, stop and vehicle tracking."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyctabus")
except PackageNotFoundError:
    __version__ = "0+local"
from pyctabus.cascade import QueryCascade
from pyctabus.client import BusTracker
from pyctabus.config import BusTrackerConfig
from pyctabus.exceptions import (
    CtaBusApiError,
    CtaBusConfigError,
    CtaBusError,
    CtaBusResponseError,
    CtaBusSelectionError,
    CtaBusTransportError,
    GeolocationError,
)
from pyctabus.formatting import format_time
from pyctabus.geolocation import (
    GeolocationResolver,
    LocationProvider,
    StaticLocationProvider,
    UnavailableLocationProvider,
)
from pyctabus.models import (
    BoundingBox,
    Direction,
    Prediction,
    Route,
    Stop,
    UserLocation,
    VehiclePosition,
)
from pyctabus.predictions import PredictionFetcher
from pyctabus.reset import ResetController
from pyctabus.state.events import StateChange, Transition
from pyctabus.state.snapshot import BusViewState
from pyctabus.vehicles import VehicleTracker
from pyctabus.view import BusView, StopPanel, render_view
from pyctabus.viewport import MapRenderer, ViewportFitter, fit_viewport

__all__ = [
    "__version__",
    "BoundingBox",
    "BusTracker",
    "BusTrackerConfig",
    "BusView",
    "BusViewState",
    "CtaBusApiError",
    "CtaBusConfigError",
    "CtaBusError",
    "CtaBusResponseError",
    "CtaBusSelectionError",
    "CtaBusTransportError",
    "Direction",
    "GeolocationError",
    "GeolocationResolver",
    "LocationProvider",
    "MapRenderer",
    "Prediction",
    "PredictionFetcher",
    "QueryCascade",
    "ResetController",
    "Route",
    "StateChange",
    "StaticLocationProvider",
    "Stop",
    "StopPanel",
    "Transition",
    "UnavailableLocationProvider",
    "UserLocation",
    "VehiclePosition",
    "VehicleTracker",
    "ViewportFitter",
    "fit_viewport",
    "format_time",
    "render_view",
]
