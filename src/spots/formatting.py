# This file renders marker timestamps as short relative phrases for the popup and the saved-spots table.
# Phrases follow calendar days between the two instants: "today at 3:04 PM", "last Monday at 9:15 AM".

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def _clock_time(value: datetime) -> str:
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def format_relative(value: datetime, base: datetime) -> str:
    """Describe `value` relative to `base`, both read in `base`'s timezone."""

    if value.tzinfo is not None and base.tzinfo is not None:
        value = value.astimezone(base.tzinfo)

    day_delta = (value.date() - base.date()).days
    at_time = _clock_time(value)
    weekday = value.strftime("%A")

    if day_delta < -6 or day_delta >= 7:
        return value.strftime("%m/%d/%Y")
    if day_delta < -1:
        return f"last {weekday} at {at_time}"
    if day_delta == -1:
        return f"yesterday at {at_time}"
    if day_delta == 0:
        return f"today at {at_time}"
    if day_delta == 1:
        return f"tomorrow at {at_time}"
    return f"{weekday} at {at_time}"


def resolve_timezone(name: str | None) -> tzinfo:
    """Map an IANA name reported by the browser to a tzinfo, falling back to UTC."""

    if not name:
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return UTC


def format_coordinate(value: float | None) -> str:
    if value is None:
        return "-"
    return f"{float(value):.6f}"
