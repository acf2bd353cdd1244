# This test file validates the marker store used for dropped pins.
# It covers click-order appends, selection set and clear, and lookups by coordinates.

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import UTC, datetime, timedelta

import pytest

from src.spots.markers import Marker, MarkerStore


def _ticking_clock(start: datetime):
    state = {"now": start}

    def clock() -> datetime:
        current = state["now"]
        state["now"] = current + timedelta(seconds=1)
        return current

    return clock


def _store() -> MarkerStore:
    return MarkerStore(clock=_ticking_clock(datetime(2026, 10, 17, 9, 0, tzinfo=UTC)))


def test_places_markers_in_click_order() -> None:
    store = _store()
    clicks = [(14.60, 121.02), (14.61, 121.03), (14.60, 121.02), (-33.86, 151.21)]

    for lat, lng in clicks:
        store.place(lat, lng)

    assert len(store) == len(clicks)
    assert [(m.latitude, m.longitude) for m in store.markers] == clicks


def test_place_stamps_creation_time_from_clock() -> None:
    store = _store()

    first = store.place(1.0, 2.0)
    second = store.place(3.0, 4.0)

    assert first.created_at == datetime(2026, 10, 17, 9, 0, tzinfo=UTC)
    assert second.created_at > first.created_at
    assert first.key != second.key


def test_select_then_clear_resets_selection() -> None:
    store = _store()
    marker = store.place(14.60, 121.02)

    store.select(marker)
    assert store.selected == marker

    store.clear()
    assert store.selected is None
    assert len(store) == 1


def test_selecting_same_marker_twice_is_idempotent() -> None:
    store = _store()
    marker = store.place(14.60, 121.02)

    store.select(marker)
    store.select(marker)

    assert store.selected == marker


def test_scenario_select_second_then_close() -> None:
    store = _store()
    store.place(14.60, 121.02)
    second = store.place(14.61, 121.03)

    store.select(second)
    store.clear()

    assert store.selected is None
    assert [(m.latitude, m.longitude) for m in store.markers] == [(14.60, 121.02), (14.61, 121.03)]


def test_find_returns_latest_marker_at_coordinates() -> None:
    store = _store()
    store.place(14.60, 121.02)
    later = store.place(14.60, 121.02)

    assert store.find(14.60, 121.02) == later
    assert store.find(10.0, 10.0) is None


def test_marker_is_immutable() -> None:
    marker = Marker(latitude=1.0, longitude=2.0, created_at=datetime(2026, 1, 1, tzinfo=UTC))

    with pytest.raises(FrozenInstanceError):
        marker.latitude = 5.0  # type: ignore[misc]
