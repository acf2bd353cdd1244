# This package holds the map interaction model behind the Spots page.
# It covers the marker store, the camera, address search and the geolocation trigger.
# Nothing here imports Streamlit, so the behavior can be exercised without a browser.

__all__ = [
    "camera",
    "formatting",
    "geolocation",
    "map_styles",
    "map_surface",
    "maps_client",
    "markers",
    "search",
]
