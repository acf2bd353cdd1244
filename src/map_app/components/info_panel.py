# This file renders the details of the selected spot next to the map, with a close control.

from __future__ import annotations

from datetime import UTC, datetime

import streamlit as st

from src.map_app.ui_text import CLOSE_POPUP, POPUP_TITLE
from src.spots.formatting import format_coordinate, format_relative
from src.spots.map_surface import MapSurface


def render_info_panel(
    *, surface: MapSurface, tooltips: dict[str, str], now: datetime | None = None
) -> bool:
    """Render the selected spot. Returns True when the close control was used."""

    selected = surface.store.selected
    if selected is None:
        return False

    now = now or datetime.now(tz=UTC)
    with st.container(border=True):
        st.subheader(POPUP_TITLE)
        st.write(f"Saved {format_relative(selected.created_at, now)}")
        st.caption(
            f"{format_coordinate(selected.latitude)}, {format_coordinate(selected.longitude)}"
        )
        if st.button(CLOSE_POPUP, key="spots_close_popup", help=tooltips["close_popup"]):
            surface.handle_close()
            return True
    return False
