# This file defines runtime configuration for the Spots page.
# It exists so service URLs, the starting view, search bias and marker styling can be tuned through environment variables.
# Keeping these values centralized avoids hard-coded behavior scattered across the components.

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from src.spots.camera import PAN_ZOOM, Camera
from src.spots.maps_client import (
    DEFAULT_PLACES_BASE_URL,
    DEFAULT_TILES_BASE_URL,
    SearchBias,
)


@dataclass(frozen=True)
class AppConfig:
    places_base_url: str
    tiles_base_url: str
    request_timeout_seconds: int
    initial_latitude: float
    initial_longitude: float
    initial_zoom: int
    pan_zoom: int
    search_radius_meters: int
    map_libraries: tuple[str, ...]
    map_language: str
    map_region: str
    tile_session_ttl_seconds: int
    marker_icon_url: str | None
    map_styles_path: str | None
    map_height: int

    def initial_camera(self) -> Camera:
        return Camera(
            latitude=self.initial_latitude,
            longitude=self.initial_longitude,
            zoom=self.initial_zoom,
        )

    def search_bias(self) -> SearchBias:
        return SearchBias(
            latitude=self.initial_latitude,
            longitude=self.initial_longitude,
            radius_meters=self.search_radius_meters,
        )


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def load_app_config(*, load_env: bool = True) -> AppConfig:
    if load_env:
        load_dotenv()

    request_timeout_seconds = int(os.getenv("SPOTS_REQUEST_TIMEOUT_SECONDS", "8"))
    if request_timeout_seconds <= 0:
        raise ValueError("SPOTS_REQUEST_TIMEOUT_SECONDS must be greater than 0.")

    search_radius_meters = int(os.getenv("SPOTS_SEARCH_RADIUS_METERS", str(200 * 1000)))
    if search_radius_meters <= 0:
        raise ValueError("SPOTS_SEARCH_RADIUS_METERS must be greater than 0.")

    return AppConfig(
        places_base_url=os.getenv("SPOTS_PLACES_BASE_URL", DEFAULT_PLACES_BASE_URL).rstrip("/"),
        tiles_base_url=os.getenv("SPOTS_TILES_BASE_URL", DEFAULT_TILES_BASE_URL).rstrip("/"),
        request_timeout_seconds=request_timeout_seconds,
        initial_latitude=float(os.getenv("SPOTS_INITIAL_LATITUDE", "14.609054")),
        initial_longitude=float(os.getenv("SPOTS_INITIAL_LONGITUDE", "121.022255")),
        initial_zoom=int(os.getenv("SPOTS_INITIAL_ZOOM", "8")),
        pan_zoom=int(os.getenv("SPOTS_PAN_ZOOM", str(PAN_ZOOM))),
        search_radius_meters=search_radius_meters,
        map_libraries=_env_list("SPOTS_MAP_LIBRARIES", ("places",)),
        map_language=os.getenv("SPOTS_MAP_LANGUAGE", "en-US"),
        map_region=os.getenv("SPOTS_MAP_REGION", "PH"),
        tile_session_ttl_seconds=int(os.getenv("SPOTS_TILE_SESSION_TTL_SECONDS", "86400")),
        marker_icon_url=os.getenv("SPOTS_MARKER_ICON_URL") or None,
        map_styles_path=os.getenv("SPOTS_MAP_STYLES_PATH") or None,
        map_height=int(os.getenv("SPOTS_MAP_HEIGHT", "640")),
    )
