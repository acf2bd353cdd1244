# This file renders the "locate me" button and polls the browser for the device position.
# The browser answers on a later rerun; a denied or failed lookup leaves the map where it is.

from __future__ import annotations

import streamlit as st
from streamlit_js_eval import get_geolocation

from src.map_app.ui_text import LOCATE_LABEL
from src.spots.geolocation import GeolocationTrigger

GEOLOCATION_COMPONENT_KEY = "spots_geolocation"


def render_locate_button(*, locate: GeolocationTrigger, tooltips: dict[str, str]) -> bool:
    """Render the button and return True once a pending request has been answered."""

    if st.button(LOCATE_LABEL, icon=":material/my_location:", help=tooltips["locate_button"]):
        locate.request()

    if not locate.pending:
        return False

    position = get_geolocation(component_key=GEOLOCATION_COMPONENT_KEY)
    return locate.receive(position)
