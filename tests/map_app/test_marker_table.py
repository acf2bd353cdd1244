# This test file validates the saved-spots table built from the marker store.

from __future__ import annotations

from datetime import UTC, datetime

from src.map_app.components.marker_table import MARKER_COLUMNS, markers_frame
from src.spots.markers import MarkerStore

NOW = datetime(2026, 10, 17, 15, 4, tzinfo=UTC)


def test_markers_frame_keeps_click_order() -> None:
    store = MarkerStore(clock=lambda: datetime(2026, 10, 17, 9, 30, tzinfo=UTC))
    store.place(14.60, 121.02)
    store.place(14.61, 121.03)

    frame = markers_frame(store, now=NOW)

    assert list(frame.columns) == MARKER_COLUMNS
    assert frame[["lat", "lng"]].values.tolist() == [[14.60, 121.02], [14.61, 121.03]]
    assert frame.iloc[0]["saved"] == "today at 9:30 AM"


def test_markers_frame_empty_store_has_columns() -> None:
    frame = markers_frame(MarkerStore(), now=NOW)

    assert frame.empty
    assert list(frame.columns) == MARKER_COLUMNS
