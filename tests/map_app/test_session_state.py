# This test file validates that one browser session keeps one interaction model across reruns.

from __future__ import annotations

from src.map_app.app_config import load_app_config
from src.map_app.session_state import SESSION_KEY, get_session
from src.spots.maps_client import SearchBias, SuggestionResult


class _NullPlaces:
    def autocomplete(self, text: str, *, bias: SearchBias) -> SuggestionResult:
        return SuggestionResult(status="ZERO_RESULTS", suggestions=())

    def geocode(self, address: str) -> tuple[float, float]:
        raise AssertionError("geocode should not be called")


def test_get_session_reuses_state_across_reruns() -> None:
    state: dict[str, object] = {}
    config = load_app_config(load_env=False)

    first = get_session(state, config=config, places=_NullPlaces())
    first.store.place(14.60, 121.02)
    second = get_session(state, config=config, places=_NullPlaces())

    assert state[SESSION_KEY] is first
    assert second is first
    assert len(second.store) == 1


def test_components_share_one_store_and_camera() -> None:
    session = get_session({}, config=load_app_config(load_env=False), places=_NullPlaces())

    assert session.surface.store is session.store
    assert session.surface.camera is session.camera
    assert session.search.camera is session.camera
    assert session.locate.camera is session.camera
    session.camera.on_map_load(load_app_config(load_env=False).initial_camera())
    assert session.search.ready is True
