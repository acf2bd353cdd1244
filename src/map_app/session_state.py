# This file assembles the per-visitor interaction model and keeps it in Streamlit session state.
# Every rerun of the page reuses the same store, camera, search and locate objects for one browser session.

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

from src.map_app.app_config import AppConfig
from src.spots.camera import CameraController
from src.spots.geolocation import GeolocationTrigger
from src.spots.map_surface import MapSurface
from src.spots.markers import MarkerStore
from src.spots.search import AddressSearch, PlacesService

SESSION_KEY = "spots_session"


@dataclass
class MapSession:
    store: MarkerStore
    camera: CameraController
    surface: MapSurface
    search: AddressSearch
    locate: GeolocationTrigger


def build_session(*, config: AppConfig, places: PlacesService) -> MapSession:
    store = MarkerStore()
    camera = CameraController(pan_zoom=config.pan_zoom)
    return MapSession(
        store=store,
        camera=camera,
        surface=MapSurface(store=store, camera=camera),
        search=AddressSearch(
            places=places,
            camera=camera,
            bias=config.search_bias(),
            libraries=config.map_libraries,
        ),
        locate=GeolocationTrigger(camera=camera),
    )


def get_session(
    state: MutableMapping[str, Any], *, config: AppConfig, places: PlacesService
) -> MapSession:
    session = state.get(SESSION_KEY)
    if not isinstance(session, MapSession):
        session = build_session(config=config, places=places)
        state[SESSION_KEY] = session
    return session
