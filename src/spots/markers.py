# This file implements the in-memory marker store for one page session.
# Markers are appended in click order and never removed; one of them may be selected for its popup.
# The store is the only owner of marker values, and selection always points at a stored value.

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from datetime import UTC, datetime

COORDINATE_TOLERANCE = 1e-9


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class Marker:
    latitude: float
    longitude: float
    created_at: datetime

    @property
    def key(self) -> str:
        return self.created_at.isoformat()

    def matches(self, latitude: float, longitude: float) -> bool:
        return math.isclose(
            self.latitude, latitude, abs_tol=COORDINATE_TOLERANCE
        ) and math.isclose(self.longitude, longitude, abs_tol=COORDINATE_TOLERANCE)


class MarkerStore:
    """Append-only ordered sequence of placed markers plus the current selection."""

    def __init__(self, *, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock
        self._markers: list[Marker] = []
        self._selected: Marker | None = None

    @property
    def markers(self) -> tuple[Marker, ...]:
        return tuple(self._markers)

    @property
    def selected(self) -> Marker | None:
        return self._selected

    def place(self, latitude: float, longitude: float) -> Marker:
        marker = Marker(
            latitude=float(latitude),
            longitude=float(longitude),
            created_at=self._clock(),
        )
        self._markers.append(marker)
        return marker

    def select(self, marker: Marker) -> None:
        self._selected = marker

    def clear(self) -> None:
        self._selected = None

    def find(self, latitude: float, longitude: float) -> Marker | None:
        """Return the most recently placed marker at the given coordinates."""

        for marker in reversed(self._markers):
            if marker.matches(latitude, longitude):
                return marker
        return None

    def __len__(self) -> int:
        return len(self._markers)

    def __iter__(self) -> Iterator[Marker]:
        return iter(tuple(self._markers))
