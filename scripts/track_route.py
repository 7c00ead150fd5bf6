#!/usr/bin/env python3
"""Live walk-through of the bus tracker cascade against a running backend.

Selects a route, its first (or the requested) direction and stop, then
prints the upcoming buses and the live vehicle markers.

The backend URL comes from ``CTABUS_BASE_URL`` (see
:meth:`pyctabus.BusTrackerConfig.from_env`).
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from pyctabus import BusTracker, BusTrackerConfig, StaticLocationProvider, StopPanel
from pyctabus.markers import MarkerKind


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Track a CTA bus route through a pyctabus backend")
    parser.add_argument("route", help="Route designator, e.g. 22")
    parser.add_argument("--direction", default=None, help="Direction value. Defaults to the first one returned.")
    parser.add_argument("--stop", default=None, help="Stop id. Defaults to the first stop returned.")
    parser.add_argument(
        "--location",
        nargs=2,
        type=float,
        metavar=("LAT", "LON"),
        default=None,
        help="Rider location. Without it the configured fallback is used.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging.")
    return parser.parse_args()


async def _run(args: argparse.Namespace) -> int:
    config = BusTrackerConfig.from_env()
    provider = StaticLocationProvider(*args.location) if args.location else None

    async with BusTracker(config, location_provider=provider) as tracker:
        await tracker.start()

        tracker.select_route(args.route)
        await tracker.wait_idle()
        view = tracker.view()
        if not view.direction_options:
            print(f"No directions returned for route {args.route}")
            return 2

        tracker.select_direction(args.direction or view.direction_options[0].value)
        await tracker.wait_idle()
        view = tracker.view()
        if view.stop_panel is StopPanel.NO_DATA:
            print(view.stop_message)
            return 2

        tracker.select_stop(args.stop or view.stop_options[0].value)
        await tracker.get_predictions()
        view = tracker.view()

    print(f"Route {view.selected_route} {view.selected_direction}, stop {view.selected_stop}")
    print("-" * 60)
    for line in view.prediction_lines:
        print(line)
    if view.prediction_message:
        print(view.prediction_message)

    if view.map is None:
        print("\nNo buses currently reporting on this route.")
        return 0

    print("\nLive buses")
    print("-" * 60)
    for marker in view.map.markers:
        if marker.kind is MarkerKind.VEHICLE:
            print(f"{marker.icon} {marker.lat:.5f},{marker.lon:.5f}  {marker.popup.replace(chr(10), ' / ')}")
    if view.map.bounds is not None:
        b = view.map.bounds
        print(f"\nViewport: S{b.south:.4f} W{b.west:.4f} N{b.north:.4f} E{b.east:.4f}")
    return 0


def main() -> int:
    args = _parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
