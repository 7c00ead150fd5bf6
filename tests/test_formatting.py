from __future__ import annotations

import pytest

from pyctabus.formatting import format_time, heading_arrow, prediction_line, vehicle_popup
from pyctabus.models.prediction import Prediction
from pyctabus.models.vehicle import VehiclePosition


@pytest.mark.parametrize(
    ("timestamp", "expected"),
    [
        ("12/25 0:05", "12:05 AM"),
        ("12/25 13:30", "1:30 PM"),
        ("12/25 12:00", "12:00 PM"),
        ("20251225 9:05", "9:05 AM"),
        ("20251225 23:59", "11:59 PM"),
    ],
)
def test_format_time(timestamp: str, expected: str) -> None:
    assert format_time(timestamp) == expected


def test_format_time_keeps_minute_as_received() -> None:
    assert format_time("20251225 14:5") == "2:5 PM"


@pytest.mark.parametrize("timestamp", ["20251225", "20251225 noon", "20251225 14"])
def test_format_time_rejects_malformed(timestamp: str) -> None:
    with pytest.raises(ValueError):
        format_time(timestamp)


def test_prediction_line() -> None:
    prediction = Prediction.model_validate({"rt": "22", "rtdir": "Northbound", "prdtm": "12/25 14:10"})

    assert prediction_line(prediction) == "Route 22 to Northbound – Arriving at 2:10 PM"


def test_prediction_line_falls_back_to_raw_timestamp() -> None:
    prediction = Prediction.model_validate({"rt": "22", "rtdir": "Northbound", "prdtm": "soon"})

    assert prediction_line(prediction).endswith("Arriving at soon")


@pytest.mark.parametrize(
    ("heading", "arrow"),
    [(0, "↑"), (90, "→"), (180, "↓"), (270, "←"), (350, "↑"), (44, "↗")],
)
def test_heading_arrow(heading: float, arrow: str) -> None:
    assert heading_arrow(heading) == arrow


def test_vehicle_popup() -> None:
    vehicle = VehiclePosition.model_validate({"vid": "101", "lat": "41.9", "lon": "-87.6", "des": "Howard"})

    assert vehicle_popup(vehicle) == "Bus 101\nTo: Howard"
