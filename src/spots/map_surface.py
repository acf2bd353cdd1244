# This file turns the map widget's event payload into marker store and camera updates.
# The widget repeats its last click on every rerun, so each distinct event is applied exactly once.
# After a click or a close the widget is remounted under a new generation with an empty payload,
# which makes the next click on the same point or the same pin a fresh event.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from src.spots.camera import CameraController
from src.spots.markers import Marker, MarkerStore


def _coordinates(event: Any) -> tuple[float, float] | None:
    if not isinstance(event, Mapping):
        return None
    try:
        return float(event["lat"]), float(event["lng"])
    except (KeyError, TypeError, ValueError):
        return None


def _view(events: Mapping[str, Any]) -> tuple[float, float, int] | None:
    center = _coordinates(events.get("center"))
    zoom = events.get("zoom")
    if center is None or zoom is None:
        return None
    try:
        return center[0], center[1], int(zoom)
    except (TypeError, ValueError):
        return None


class MapSurface:
    def __init__(self, *, store: MarkerStore, camera: CameraController | None = None) -> None:
        self.store = store
        self.camera = camera
        self.generation = 0
        self._last_click: tuple[float, float] | None = None
        self._last_object_click: tuple[float, float] | None = None
        self._last_view: tuple[float, float, int] | None = None

    def handle_click(self, latitude: float, longitude: float) -> Marker:
        return self.store.place(latitude, longitude)

    def handle_marker_click(self, latitude: float, longitude: float) -> Marker | None:
        marker = self.store.find(latitude, longitude)
        if marker is not None:
            self.store.select(marker)
        return marker

    def handle_close(self) -> None:
        self.store.clear()
        self._remount()

    def _remount(self) -> None:
        self.generation += 1
        self._last_click = None
        self._last_object_click = None

    def process(self, events: Mapping[str, Any] | None) -> bool:
        """Apply new events from a widget payload. Returns whether the page must redraw."""

        if not events:
            return False

        self._follow_view(events)

        changed = False
        click = _coordinates(events.get("last_clicked"))
        if click is not None and click != self._last_click:
            self._last_click = click
            self.handle_click(*click)
            changed = True

        object_click = _coordinates(events.get("last_object_clicked"))
        if object_click is not None and object_click != self._last_object_click:
            self._last_object_click = object_click
            if self.handle_marker_click(*object_click) is not None:
                changed = True

        if changed:
            self._remount()
        return changed

    def _follow_view(self, events: Mapping[str, Any]) -> None:
        # Only a view the widget has not reported before is a user pan; a stale
        # report must not undo a programmatic pan_to made since.
        view = _view(events)
        if view is None or view == self._last_view:
            return
        self._last_view = view
        if self.camera is not None and self.camera.is_ready:
            self.camera.follow(*view)
