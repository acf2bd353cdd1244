# This file implements the camera controller shared by search and geolocation.
# Both features only ever move the map through `pan_to`, which recenters and applies a fixed zoom.
# Panning before the map has loaded is a programming error and is raised, not handled.

from __future__ import annotations

from dataclasses import dataclass

PAN_ZOOM = 14


class MapNotInitializedError(RuntimeError):
    """Raised when the camera is moved before the map surface has loaded."""


@dataclass(frozen=True)
class Camera:
    latitude: float
    longitude: float
    zoom: int

    @property
    def center(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


class CameraController:
    def __init__(self, *, pan_zoom: int = PAN_ZOOM) -> None:
        self.pan_zoom = pan_zoom
        self._camera: Camera | None = None

    @property
    def is_ready(self) -> bool:
        return self._camera is not None

    @property
    def camera(self) -> Camera:
        if self._camera is None:
            raise MapNotInitializedError("Map surface has not been loaded yet.")
        return self._camera

    def on_map_load(self, initial: Camera) -> None:
        # Reruns report the load again; keep wherever the camera has moved to since.
        if self._camera is None:
            self._camera = initial

    def pan_to(self, latitude: float, longitude: float) -> None:
        if self._camera is None:
            raise MapNotInitializedError("Cannot pan before the map surface has loaded.")
        self._camera = Camera(
            latitude=float(latitude),
            longitude=float(longitude),
            zoom=self.pan_zoom,
        )

    def follow(self, latitude: float, longitude: float, zoom: int) -> None:
        """Record where the user has moved the map by hand."""

        if self._camera is None:
            raise MapNotInitializedError("Cannot follow the view before the map has loaded.")
        self._camera = Camera(
            latitude=float(latitude),
            longitude=float(longitude),
            zoom=int(zoom),
        )
