"""Internal constants shared across the library."""

BASE_URL = "http://127.0.0.1:8000"
USER_AGENT = "pyctabus"

#: Outer key wrapping every Bus Tracker response.
ENVELOPE_KEY = "bustime-response"

ROUTES_ENDPOINT = "/cta/bus/routes"
DIRECTIONS_ENDPOINT = "/cta/bus/directions"
STOPS_ENDPOINT = "/cta/bus/stops"
VEHICLES_ENDPOINT = "/cta/bus/vehicles"
PREDICTIONS_ENDPOINT = "/cta/bus/predictions"

# Chicago city center (State & Madison area), used when geolocation fails.
FALLBACK_LATITUDE = 41.8781
FALLBACK_LONGITUDE = -87.6298

#: Degrees added on every side of a fitted viewport.
VIEWPORT_PADDING_DEG = 0.005

NO_STOP_DATA_MESSAGE = "No stop data available for this route and direction."
NO_ACTIVE_BUSES_MESSAGE = "No active buses at this stop right now."
