# This file stores the copy shown on the Spots page.
# Centralizing text keeps wording consistent between components and tests.

from __future__ import annotations

APP_TITLE = "Spots"
APP_SUBTITLE = "Search for a place, or click the map to save a spot."

LOADING_MAPS = "Loading maps"
ERROR_LOADING_MAPS = "Error loading maps"

SEARCH_PLACEHOLDER = "Enter an address"
SEARCH_LABEL = "Search"
SUGGESTION_PLACEHOLDER = "Choose a suggestion"
LOCATE_LABEL = "Locate me"

POPUP_TITLE = "Spot Saved!"
CLOSE_POPUP = "Close"

SAVED_SPOTS_TITLE = "Saved spots"
EMPTY_SPOTS = "No spots saved yet. Click anywhere on the map to drop one."
