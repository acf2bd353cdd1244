# This file renders the saved-spots table in the sidebar.
# It exists so users can review every dropped pin even when some are outside the current view.
# The helper converts store contents into a display-ready DataFrame and only handles presentation.

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

import pandas as pd
import streamlit as st

from src.spots.formatting import format_relative
from src.spots.markers import Marker

MARKER_COLUMNS = ["lat", "lng", "saved"]


def markers_frame(markers: Iterable[Marker], *, now: datetime) -> pd.DataFrame:
    rows = [
        {
            "lat": round(marker.latitude, 6),
            "lng": round(marker.longitude, 6),
            "saved": format_relative(marker.created_at, now),
        }
        for marker in markers
    ]
    return pd.DataFrame(rows, columns=MARKER_COLUMNS)


def render_marker_table(
    dataframe: pd.DataFrame,
    *,
    title: str,
    empty_message: str,
    help_text: str | None = None,
) -> None:
    st.sidebar.subheader(title, help=help_text)
    if dataframe.empty:
        st.sidebar.info(empty_message)
        return
    st.sidebar.dataframe(dataframe, use_container_width=True, hide_index=True)
