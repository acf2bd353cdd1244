# This file holds the map theme sent to the Map Tiles API when a tile session is created.
# Rules use the featureType / elementType / stylers shape shared by Google's styled maps.
# A JSON file with the same shape can replace the default theme without code edits.

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

MapStyle = list[dict[str, Any]]

DEFAULT_MAP_STYLES: MapStyle = [
    {"elementType": "geometry", "stylers": [{"color": "#ebe3cd"}]},
    {"elementType": "labels.text.fill", "stylers": [{"color": "#523735"}]},
    {"elementType": "labels.text.stroke", "stylers": [{"color": "#f5f1e6"}]},
    {
        "featureType": "administrative",
        "elementType": "geometry.stroke",
        "stylers": [{"color": "#c9b2a6"}],
    },
    {
        "featureType": "landscape.natural",
        "elementType": "geometry",
        "stylers": [{"color": "#dfd2ae"}],
    },
    {"featureType": "poi", "elementType": "geometry", "stylers": [{"color": "#dfd2ae"}]},
    {"featureType": "poi", "elementType": "labels.text.fill", "stylers": [{"color": "#93817c"}]},
    {"featureType": "poi.park", "elementType": "geometry.fill", "stylers": [{"color": "#a5b076"}]},
    {"featureType": "road", "elementType": "geometry", "stylers": [{"color": "#f5f1e6"}]},
    {"featureType": "road.arterial", "elementType": "geometry", "stylers": [{"color": "#fdfcf8"}]},
    {"featureType": "road.highway", "elementType": "geometry", "stylers": [{"color": "#f8c967"}]},
    {
        "featureType": "road.highway",
        "elementType": "geometry.stroke",
        "stylers": [{"color": "#e9bc62"}],
    },
    {"featureType": "transit.line", "elementType": "geometry", "stylers": [{"color": "#dfd2ae"}]},
    {"featureType": "water", "elementType": "geometry.fill", "stylers": [{"color": "#b9d3c2"}]},
    {"featureType": "water", "elementType": "labels.text.fill", "stylers": [{"color": "#92998d"}]},
]


class StyleRule(BaseModel):
    """One styled-map rule; omitted selectors apply the stylers to everything."""

    model_config = ConfigDict(extra="forbid")

    featureType: str | None = None
    elementType: str | None = None
    stylers: list[dict[str, Any]] = Field(min_length=1)


_STYLE_RULES = TypeAdapter(list[StyleRule])


def validate_map_styles(styles: Any) -> MapStyle:
    try:
        rules = _STYLE_RULES.validate_python(styles)
    except ValidationError as exc:
        raise ValueError(f"Invalid map styles: {exc}") from exc
    return [rule.model_dump(exclude_none=True) for rule in rules]


def load_map_styles(path: str | Path | None = None) -> MapStyle:
    if path is None:
        return [dict(rule) for rule in DEFAULT_MAP_STYLES]
    with Path(path).open(encoding="utf-8") as handle:
        return validate_map_styles(json.load(handle))
