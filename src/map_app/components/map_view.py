# This file builds the folium map for the Spots page and forwards its click events.
# It draws Google tiles from the current tile session, one pin per saved spot, and the selected spot's popup.
# The camera is passed to the widget as center and zoom so programmatic pans do not rebuild the map.
# Event payloads returned by the widget go straight to the session's map surface.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import folium
import streamlit as st
from streamlit_folium import st_folium

from src.map_app.app_config import AppConfig
from src.map_app.ui_text import POPUP_TITLE
from src.spots.camera import Camera
from src.spots.formatting import format_relative
from src.spots.markers import Marker, MarkerStore

MARKER_ICON_SIZE = (32, 32)
MAP_WIDGET_KEY = "spots_map"
RETURNED_EVENTS = ["last_clicked", "last_object_clicked", "center", "zoom"]


def widget_key(generation: int) -> str:
    return f"{MAP_WIDGET_KEY}-{generation}"


def popup_html(marker: Marker, *, now: datetime) -> str:
    return (
        f"<div><h2>{POPUP_TITLE}</h2>"
        f"<p>Saved {format_relative(marker.created_at, now)}</p></div>"
    )


def _marker_icon(config: AppConfig) -> folium.Icon | folium.CustomIcon:
    if config.marker_icon_url:
        return folium.CustomIcon(icon_image=config.marker_icon_url, icon_size=MARKER_ICON_SIZE)
    return folium.Icon(color="red", icon="map-marker", prefix="fa")


def build_map(
    *,
    config: AppConfig,
    tile_url: str,
    initial: Camera,
    store: MarkerStore,
    now: datetime | None = None,
) -> folium.Map:
    now = now or datetime.now(tz=UTC)
    fmap = folium.Map(
        location=list(initial.center),
        zoom_start=initial.zoom,
        tiles=tile_url,
        attr="Map data &copy; Google",
        zoom_control=True,
        control_scale=False,
    )

    selected = store.selected
    for marker in store:
        popup = None
        if marker == selected:
            popup = folium.Popup(
                popup_html(marker, now=now),
                max_width=240,
                show=True,
                close_button=False,
            )
        folium.Marker(
            location=[marker.latitude, marker.longitude],
            icon=_marker_icon(config),
            popup=popup,
        ).add_to(fmap)

    return fmap


def render_map(
    fmap: folium.Map,
    *,
    camera: Camera,
    height: int,
    generation: int = 0,
) -> dict[str, Any] | None:
    return st_folium(
        fmap,
        center=list(camera.center),
        zoom=camera.zoom,
        height=height,
        use_container_width=True,
        returned_objects=RETURNED_EVENTS,
        key=widget_key(generation),
    )
