#!/usr/bin/env python3
"""
Check that the configured Google Maps key can serve the Spots page.
It opens a Map Tiles session and geocodes a sample address with the same client the page uses.
Run it directly, and expect it to print a JSON report and exit non-zero on failure.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.common.logging import configure_logging
from src.common.settings import get_settings
from src.map_app.app_config import load_app_config
from src.map_app.map_loader import MapLoadError, load_tile_url
from src.spots.maps_client import GoogleMapsClient, MapsRequestError, MapsUnavailableError


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check Google Maps access for the Spots page")
    parser.add_argument("--address", default="Quezon Memorial Circle, Quezon City")
    parser.add_argument("--skip-geocode", action="store_true")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging()
    settings = get_settings()
    config = load_app_config()
    client = GoogleMapsClient(
        api_key=settings.GOOGLE_MAPS_API_KEY,
        places_base_url=config.places_base_url,
        tiles_base_url=config.tiles_base_url,
        timeout_seconds=config.request_timeout_seconds,
    )

    report: dict[str, object] = {"tiles": "ok", "geocode": "skipped"}
    passed = True

    try:
        load_tile_url(client, config=config)
    except MapLoadError as exc:
        report["tiles"] = str(exc)
        passed = False

    if not args.skip_geocode:
        try:
            latitude, longitude = client.geocode(args.address)
            report["geocode"] = {"address": args.address, "lat": latitude, "lng": longitude}
        except (MapsUnavailableError, MapsRequestError) as exc:
            report["geocode"] = str(exc)
            passed = False

    print(json.dumps({"passed": passed, "details": report}, indent=2))

    if not passed:
        print("Google Maps check failed. The map page will show its load error.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
