# This file renders the address search box and its suggestion picker.
# Submitting text fetches suggestions; picking one freezes the text and moves the map there.
# Resolution failures are absorbed by the search model, so this component never shows an error.

from __future__ import annotations

import streamlit as st

from src.map_app.ui_text import SEARCH_LABEL, SEARCH_PLACEHOLDER, SUGGESTION_PLACEHOLDER
from src.spots.search import AddressSearch

TEXT_KEY = "spots_search_text"
CHOICE_KEY = "spots_search_choice"


def _on_text_change(search: AddressSearch) -> None:
    search.set_value(st.session_state.get(TEXT_KEY, ""))


def _on_choice(search: AddressSearch) -> None:
    description = st.session_state.get(CHOICE_KEY)
    if not description:
        return
    search.select(description)
    st.session_state[TEXT_KEY] = search.value
    st.session_state[CHOICE_KEY] = None


def render_search_box(*, search: AddressSearch, tooltips: dict[str, str]) -> None:
    if TEXT_KEY not in st.session_state:
        st.session_state[TEXT_KEY] = search.value

    st.text_input(
        SEARCH_LABEL,
        key=TEXT_KEY,
        placeholder=SEARCH_PLACEHOLDER,
        disabled=not search.ready,
        on_change=_on_text_change,
        args=(search,),
        help=tooltips["search_box"],
        label_visibility="collapsed",
    )

    options = [suggestion.description for suggestion in search.visible_suggestions]
    if not options:
        return

    st.selectbox(
        SUGGESTION_PLACEHOLDER,
        options=options,
        index=None,
        key=CHOICE_KEY,
        placeholder=SUGGESTION_PLACEHOLDER,
        on_change=_on_choice,
        args=(search,),
        help=tooltips["suggestions"],
        label_visibility="collapsed",
    )
