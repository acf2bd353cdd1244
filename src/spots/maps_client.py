# This file implements the Google Maps Platform web-service client used by the Spots page.
# It covers place suggestions, geocoding of a chosen description, and Map Tiles session creation.
# The client normalizes transport and status failures into two exception types the callers can rely on.
# Keeping request details here lets search and map rendering stay free of URL and payload handling.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

LOGGER = logging.getLogger("spots.maps_client")

DEFAULT_PLACES_BASE_URL = "https://maps.googleapis.com/maps/api"
DEFAULT_TILES_BASE_URL = "https://tile.googleapis.com/v1"


class MapsUnavailableError(RuntimeError):
    """Raised when Google Maps cannot be reached or responds with server errors."""


class MapsRequestError(ValueError):
    """Raised when a request is rejected or the service answers with a non-OK status."""

    def __init__(self, message: str, *, status: str) -> None:
        self.status = status
        super().__init__(message)


@dataclass(frozen=True)
class SearchBias:
    latitude: float
    longitude: float
    radius_meters: int

    def location_param(self) -> str:
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True)
class Suggestion:
    place_id: str
    description: str


@dataclass(frozen=True)
class SuggestionResult:
    status: str
    suggestions: tuple[Suggestion, ...]


@dataclass(frozen=True)
class TileSession:
    session: str
    expiry: int
    tile_width: int
    image_format: str


class GoogleMapsClient:
    def __init__(
        self,
        *,
        api_key: str,
        places_base_url: str = DEFAULT_PLACES_BASE_URL,
        tiles_base_url: str = DEFAULT_TILES_BASE_URL,
        timeout_seconds: int = 8,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.places_base_url = places_base_url.rstrip("/")
        self.tiles_base_url = tiles_base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def autocomplete(self, text: str, *, bias: SearchBias) -> SuggestionResult:
        payload = self._request_json(
            "GET",
            f"{self.places_base_url}/place/autocomplete/json",
            params={
                "input": text,
                "location": bias.location_param(),
                "radius": bias.radius_meters,
                "key": self.api_key,
            },
        )
        status = str(payload.get("status", "UNKNOWN_ERROR"))
        if status not in {"OK", "ZERO_RESULTS"}:
            return SuggestionResult(status=status, suggestions=())

        suggestions = tuple(
            Suggestion(
                place_id=str(prediction.get("place_id", "")),
                description=str(prediction.get("description", "")),
            )
            for prediction in payload.get("predictions", []) or []
            if isinstance(prediction, dict) and prediction.get("description")
        )
        return SuggestionResult(status=status, suggestions=suggestions)

    def geocode(self, address: str) -> tuple[float, float]:
        """Resolve an address to the (lat, lng) of the first geocoding result."""

        payload = self._request_json(
            "GET",
            f"{self.places_base_url}/geocode/json",
            params={"address": address, "key": self.api_key},
        )
        status = str(payload.get("status", "UNKNOWN_ERROR"))
        results = payload.get("results") or []
        if status != "OK" or not results:
            raise MapsRequestError(
                f"Geocoding returned {status} for {address!r}",
                status=status,
            )

        try:
            location = results[0]["geometry"]["location"]
            return float(location["lat"]), float(location["lng"])
        except (KeyError, TypeError, ValueError) as exc:
            raise MapsUnavailableError(
                f"Geocoding result for {address!r} has no usable location"
            ) from exc

    def create_tile_session(
        self,
        *,
        styles: list[dict[str, Any]],
        map_type: str = "roadmap",
        language: str = "en-US",
        region: str = "US",
    ) -> TileSession:
        body: dict[str, Any] = {
            "mapType": map_type,
            "language": language,
            "region": region,
        }
        if styles:
            body["styles"] = styles

        payload = self._request_json(
            "POST",
            f"{self.tiles_base_url}/createSession",
            params={"key": self.api_key},
            json_body=body,
        )
        if not payload.get("session"):
            raise MapsUnavailableError("Map Tiles API did not return a session token")

        return TileSession(
            session=str(payload["session"]),
            expiry=int(payload.get("expiry", 0)),
            tile_width=int(payload.get("tileWidth", 256)),
            image_format=str(payload.get("imageFormat", "png")),
        )

    def tile_url_template(self, tile_session: TileSession) -> str:
        return (
            f"{self.tiles_base_url}/2dtiles/{{z}}/{{x}}/{{y}}"
            f"?session={tile_session.session}&key={self.api_key}"
        )

    def _request_json(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            if method == "POST":
                response = self.session.post(
                    url, params=params, json=json_body, timeout=self.timeout_seconds
                )
            else:
                response = self.session.get(url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise MapsUnavailableError(f"Google Maps request failed for {url}: {exc}") from exc

        if response.status_code >= 500:
            raise MapsUnavailableError(
                f"Google Maps request failed with status {response.status_code} for {url}"
            )
        if response.status_code >= 400:
            raise MapsRequestError(
                f"Google Maps rejected the request with status {response.status_code} for {url}",
                status=str(response.status_code),
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise MapsUnavailableError(f"Google Maps did not return valid JSON for {url}") from exc

        if not isinstance(payload, dict):
            raise MapsUnavailableError(f"Unexpected payload shape from {url}")
        LOGGER.debug("%s %s -> %s", method, url, payload.get("status", response.status_code))
        return payload
