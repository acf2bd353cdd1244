# This file loads everything the map surface needs before the page can show it.
# It reads the theme, opens a Map Tiles session and returns the tile URL template for folium.
# Any failure is reported as MapLoadError so the page can fall back to its static error screen.

from __future__ import annotations

import logging

from src.map_app.app_config import AppConfig
from src.spots.map_styles import load_map_styles
from src.spots.maps_client import GoogleMapsClient, MapsRequestError, MapsUnavailableError

LOGGER = logging.getLogger("spots.map_loader")


class MapLoadError(RuntimeError):
    """Raised when the map surface cannot be prepared."""


def load_tile_url(client: GoogleMapsClient, *, config: AppConfig) -> str:
    try:
        styles = load_map_styles(config.map_styles_path)
    except (OSError, ValueError) as exc:
        raise MapLoadError(f"Map styles could not be loaded: {exc}") from exc

    try:
        tile_session = client.create_tile_session(
            styles=styles,
            language=config.map_language,
            region=config.map_region,
        )
    except (MapsUnavailableError, MapsRequestError) as exc:
        raise MapLoadError(f"Map tile session could not be created: {exc}") from exc

    LOGGER.info(
        "tile session ready format=%s tile_width=%s expiry=%s",
        tile_session.image_format,
        tile_session.tile_width,
        tile_session.expiry,
    )
    return client.tile_url_template(tile_session)
