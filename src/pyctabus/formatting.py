"""Display formatting helpers."""

from __future__ import annotations

from pyctabus.models.prediction import Prediction
from pyctabus.models.vehicle import VehiclePosition

_ARROWS = ("↑", "↗", "→", "↘", "↓", "↙", "←", "↖")


def format_time(timestamp: str) -> str:
    """Render a Bus Tracker ``"<date> HH:MM"`` timestamp as 12-hour time.

    The minute is kept exactly as received and the hour is not re-padded::

        >>> format_time("20251225 13:30")
        '1:30 PM'
        >>> format_time("12/25 0:05")
        '12:05 AM'

    Raises
    ------
    ValueError
        *timestamp* does not contain a ``H:MM`` time after a space.
    """
    parts = timestamp.split(" ")
    if len(parts) < 2:
        raise ValueError(f"timestamp has no time part: {timestamp!r}")
    fields = parts[1].split(":")
    if len(fields) < 2 or not fields[1]:
        raise ValueError(f"timestamp time is not H:MM: {timestamp!r}")
    hour, minute = int(fields[0]), fields[1]
    suffix = "PM" if hour >= 12 else "AM"
    display_hour = 12 if hour % 12 == 0 else hour % 12
    return f"{display_hour}:{minute} {suffix}"


def heading_arrow(heading_degrees: float) -> str:
    """Nearest of eight compass arrows for a heading (0 = north)."""
    index = int(((heading_degrees % 360.0) + 22.5) // 45.0) % len(_ARROWS)
    return _ARROWS[index]


def prediction_line(prediction: Prediction) -> str:
    try:
        arrival = format_time(prediction.arrival_timestamp)
    except ValueError:
        arrival = prediction.arrival_timestamp
    return f"Route {prediction.route} to {prediction.destination_label} – Arriving at {arrival}"


def vehicle_popup(vehicle: VehiclePosition) -> str:
    return f"Bus {vehicle.vehicle_id}\nTo: {vehicle.destination_label}"
