# This file defines help text for the Spots controls.
# A single dictionary keeps explanations consistent between components and tests.

from __future__ import annotations

TOOLTIPS: dict[str, str] = {
    "search_box": "Type an address and press Enter to see suggestions near the starting area.",
    "suggestions": "Pick a suggestion to move the map there.",
    "locate_button": "Center the map on your current position. Your browser may ask for permission.",
    "saved_spots_table": "Spots you dropped this session, oldest first. They are not kept after you leave.",
    "close_popup": "Hide the details of the selected spot.",
}
