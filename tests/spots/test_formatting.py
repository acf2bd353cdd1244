# This test file checks relative timestamp phrases shown in popups and the saved-spots table.

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from src.spots.formatting import format_coordinate, format_relative, resolve_timezone

BASE = datetime(2026, 10, 17, 15, 4, tzinfo=UTC)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (datetime(2026, 10, 17, 15, 4, tzinfo=UTC), "today at 3:04 PM"),
        (datetime(2026, 10, 16, 9, 5, tzinfo=UTC), "yesterday at 9:05 AM"),
        (datetime(2026, 10, 14, 0, 30, tzinfo=UTC), "last Wednesday at 12:30 AM"),
        (datetime(2026, 10, 18, 23, 59, tzinfo=UTC), "tomorrow at 11:59 PM"),
        (datetime(2026, 10, 19, 12, 0, tzinfo=UTC), "Monday at 12:00 PM"),
        (datetime(2026, 10, 1, 8, 0, tzinfo=UTC), "10/01/2026"),
        (datetime(2026, 11, 2, 8, 0, tzinfo=UTC), "11/02/2026"),
    ],
)
def test_format_relative_phrases(value: datetime, expected: str) -> None:
    assert format_relative(value, BASE) == expected


def test_format_relative_reads_value_in_base_timezone() -> None:
    manila = timezone(timedelta(hours=8))
    base = datetime(2026, 10, 17, 10, 0, tzinfo=manila)

    assert format_relative(datetime(2026, 10, 16, 20, 0, tzinfo=UTC), base) == "today at 4:00 AM"


def test_format_coordinate() -> None:
    assert format_coordinate(None) == "-"
    assert format_coordinate(14.6090541) == "14.609054"


def test_saved_time_is_read_in_browser_timezone() -> None:
    manila = resolve_timezone("Asia/Manila")
    base = datetime(2026, 10, 17, 15, 4, tzinfo=UTC).astimezone(manila)

    assert format_relative(datetime(2026, 10, 17, 1, 30, tzinfo=UTC), base) == "today at 9:30 AM"


@pytest.mark.parametrize("name", [None, "", "Not/AZone", "../etc/passwd"])
def test_unknown_timezone_falls_back_to_utc(name: str | None) -> None:
    assert resolve_timezone(name) is UTC
