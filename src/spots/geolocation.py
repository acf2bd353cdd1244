# This file implements the "locate me" trigger.
# A request waits for the browser's one-shot position answer; success pans the camera, failure is a silent no-op.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from src.spots.camera import CameraController


def parse_position(position: Mapping[str, Any]) -> tuple[float, float] | None:
    coords = position.get("coords")
    if not isinstance(coords, Mapping):
        return None
    try:
        return float(coords["latitude"]), float(coords["longitude"])
    except (KeyError, TypeError, ValueError):
        return None


class GeolocationTrigger:
    def __init__(self, *, camera: CameraController) -> None:
        self.camera = camera
        self.pending = False

    def request(self) -> None:
        self.pending = True

    def receive(self, position: Mapping[str, Any] | None) -> bool:
        """Consume a browser answer. Returns False while the answer is still outstanding."""

        if position is None:
            return False

        self.pending = False
        coordinates = parse_position(position)
        if coordinates is None:
            return True

        self.camera.pan_to(*coordinates)
        return True
