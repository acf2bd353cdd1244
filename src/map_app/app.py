# This file is the Streamlit entrypoint for the Spots map page.
# It loads the Google map surface, then hosts the search box, the locate button, the map and the spot details.
# When the map cannot load, the page shows a single static error message and does nothing else.
# Widget events are forwarded to the per-session interaction model and the page reruns to redraw.

from __future__ import annotations

import logging
from datetime import datetime

import streamlit as st

from src.common.logging import configure_logging
from src.common.settings import get_settings
from src.map_app.app_config import AppConfig, load_app_config
from src.map_app.components.info_panel import render_info_panel
from src.map_app.components.locate_button import render_locate_button
from src.map_app.components.map_view import build_map, render_map
from src.map_app.components.marker_table import markers_frame, render_marker_table
from src.map_app.components.search_box import render_search_box
from src.map_app.map_loader import MapLoadError, load_tile_url
from src.map_app.session_state import get_session
from src.map_app.tooltips import TOOLTIPS
from src.map_app.ui_text import (
    APP_SUBTITLE,
    APP_TITLE,
    EMPTY_SPOTS,
    ERROR_LOADING_MAPS,
    LOADING_MAPS,
    SAVED_SPOTS_TITLE,
)
from src.spots.formatting import resolve_timezone
from src.spots.maps_client import GoogleMapsClient

LOGGER = logging.getLogger("spots.app")


@st.cache_resource
def get_maps_client(api_key: str) -> GoogleMapsClient:
    config = load_app_config()
    return GoogleMapsClient(
        api_key=api_key,
        places_base_url=config.places_base_url,
        tiles_base_url=config.tiles_base_url,
        timeout_seconds=config.request_timeout_seconds,
    )


def _show_load_error() -> None:
    st.title(ERROR_LOADING_MAPS)
    st.stop()


def main() -> None:
    configure_logging()
    st.set_page_config(page_title=APP_TITLE, layout="wide")

    config: AppConfig = load_app_config()
    try:
        settings = get_settings()
    except RuntimeError as exc:
        LOGGER.error("maps cannot load: %s", exc)
        _show_load_error()
        return

    client = get_maps_client(settings.GOOGLE_MAPS_API_KEY)

    @st.cache_data(ttl=config.tile_session_ttl_seconds, show_spinner=LOADING_MAPS)
    def load_tiles() -> str:
        return load_tile_url(client, config=config)

    try:
        tile_url = load_tiles()
    except MapLoadError as exc:
        LOGGER.error("maps cannot load: %s", exc)
        _show_load_error()
        return

    session = get_session(st.session_state, config=config, places=client)
    session.camera.on_map_load(config.initial_camera())

    now = datetime.now(tz=resolve_timezone(st.context.timezone))

    st.title(APP_TITLE)
    st.caption(APP_SUBTITLE)

    search_col, locate_col = st.columns([6, 1], vertical_alignment="bottom")
    with search_col:
        render_search_box(search=session.search, tooltips=TOOLTIPS)
    with locate_col:
        render_locate_button(locate=session.locate, tooltips=TOOLTIPS)

    map_col, info_col = st.columns([4, 1])
    with map_col:
        fmap = build_map(
            config=config,
            tile_url=tile_url,
            initial=config.initial_camera(),
            store=session.store,
            now=now,
        )
        events = render_map(
            fmap,
            camera=session.camera.camera,
            height=config.map_height,
            generation=session.surface.generation,
        )
    with info_col:
        closed = render_info_panel(surface=session.surface, tooltips=TOOLTIPS, now=now)

    render_marker_table(
        markers_frame(session.store, now=now),
        title=SAVED_SPOTS_TITLE,
        empty_message=EMPTY_SPOTS,
        help_text=TOOLTIPS["saved_spots_table"],
    )

    if session.surface.process(events) or closed:
        st.rerun()


if __name__ == "__main__":
    main()
