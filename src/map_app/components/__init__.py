# This package groups the Streamlit components that make up the Spots page.
# Each component renders one control and forwards its events to the session's interaction model.

__all__ = ["info_panel", "locate_button", "map_view", "marker_table", "search_box"]
