# This file implements the address search state behind the search box.
# Typing fetches suggestions biased to the configured area; confirming one geocodes it and pans the camera.
# A failed resolution is logged and otherwise ignored, leaving the frozen text and the camera untouched.

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from src.spots.camera import CameraController
from src.spots.maps_client import (
    MapsRequestError,
    MapsUnavailableError,
    SearchBias,
    Suggestion,
    SuggestionResult,
)

LOGGER = logging.getLogger("spots.search")

PLACES_LIBRARY = "places"


class SearchPhase(str, Enum):
    TYPING = "typing"
    RESOLVING = "resolving"


class PlacesService(Protocol):
    def autocomplete(self, text: str, *, bias: SearchBias) -> SuggestionResult: ...

    def geocode(self, address: str) -> tuple[float, float]: ...


class AddressSearch:
    def __init__(
        self,
        *,
        places: PlacesService,
        camera: CameraController,
        bias: SearchBias,
        libraries: tuple[str, ...] = (PLACES_LIBRARY,),
    ) -> None:
        self.places = places
        self.camera = camera
        self.bias = bias
        self.libraries = libraries
        self.value = ""
        self.phase = SearchPhase.TYPING
        self.status = ""
        self.suggestions: tuple[Suggestion, ...] = ()

    @property
    def ready(self) -> bool:
        return PLACES_LIBRARY in self.libraries and self.camera.is_ready

    @property
    def visible_suggestions(self) -> tuple[Suggestion, ...]:
        return self.suggestions if self.status == "OK" else ()

    def set_value(self, text: str, *, fetch: bool = True) -> None:
        self.value = text
        if not fetch:
            return

        self.phase = SearchPhase.TYPING
        if not text.strip():
            self.clear_suggestions()
            return

        try:
            result = self.places.autocomplete(text, bias=self.bias)
        except (MapsUnavailableError, MapsRequestError) as exc:
            LOGGER.debug("suggestion fetch failed for %r: %s", text, exc)
            self.status = getattr(exc, "status", "UNKNOWN_ERROR")
            self.suggestions = ()
            return

        self.status = result.status
        self.suggestions = result.suggestions

    def clear_suggestions(self) -> None:
        self.status = ""
        self.suggestions = ()

    def select(self, description: str) -> bool:
        """Confirm a suggestion and pan to it. Returns whether the camera moved."""

        self.set_value(description, fetch=False)
        self.clear_suggestions()
        self.phase = SearchPhase.RESOLVING

        try:
            latitude, longitude = self.places.geocode(description)
        except (MapsUnavailableError, MapsRequestError) as exc:
            LOGGER.warning("address resolution failed for %r: %s", description, exc)
            return False

        self.camera.pan_to(latitude, longitude)
        return True
