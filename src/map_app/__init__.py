# This package contains the Streamlit page that hosts the Spots map.
# It wires widget and map events into the interaction model under `src.spots`.
# The modules separate configuration, session state, and UI components to keep maintenance straightforward.

__all__ = ["app"]
