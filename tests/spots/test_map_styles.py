# This test file validates the map theme loader.

from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.spots.map_styles import DEFAULT_MAP_STYLES, load_map_styles, validate_map_styles


def test_default_styles_are_valid() -> None:
    assert validate_map_styles(load_map_styles()) == DEFAULT_MAP_STYLES


def test_load_styles_from_json_file(tmp_path: Path) -> None:
    rules = [{"featureType": "water", "stylers": [{"color": "#0000ff"}]}]
    path = tmp_path / "styles.json"
    path.write_text(json.dumps(rules), encoding="utf-8")

    assert load_map_styles(path) == rules


@pytest.mark.parametrize(
    "styles",
    [
        {"featureType": "water"},
        [["not", "a", "rule"]],
        [{"featureType": "water"}],
        [{"featureType": "water", "stylers": [], "color": "#fff"}],
        [{"featureType": 5, "stylers": [{"color": "#fff"}]}],
        [{"featureType": "water", "stylers": ["not-a-dict"]}],
        [{"elementType": ["geometry"], "stylers": [{"visibility": "off"}]}],
    ],
)
def test_invalid_styles_are_rejected(styles: object) -> None:
    with pytest.raises(ValueError):
        validate_map_styles(styles)


def test_validated_rules_drop_unset_selectors() -> None:
    rules = [{"elementType": "geometry", "stylers": [{"visibility": "simplified"}]}]

    assert validate_map_styles(rules) == rules
