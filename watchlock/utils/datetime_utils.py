"""Datetime helpers for display formatting.

TIMEZONE CONVENTION:
Stored datetimes are UTC. Display formatting always takes the target
timezone as an argument (normally ``Settings.display_timezone``); nothing
here reads a module-level timezone.
"""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo


def timezone_label(tz_name: str) -> str:
    """Short label for an IANA zone: "America/Indiana/Indianapolis" -> "Indianapolis"."""
    return tz_name.rsplit("/", 1)[-1].replace("_", " ")


def to_display_time(value: datetime, tz_name: str) -> datetime:
    """Convert ``value`` into ``tz_name``. Naive datetimes are treated as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(ZoneInfo(tz_name))


def format_start_time(start_time: datetime | None, tz_name: str, with_label: bool = True) -> str:
    """Format a game start as "6:15 PM Indianapolis" in the given zone.

    Returns "TBD" when the start time is unknown.
    """
    if start_time is None:
        return "TBD"
    local = to_display_time(start_time, tz_name)
    hour = local.hour % 12 or 12
    text = f"{hour}:{local.minute:02d} {'AM' if local.hour < 12 else 'PM'}"
    if with_label:
        text += f" {timezone_label(tz_name)}"
    return text


def format_game_date(start_time: datetime, tz_name: str) -> str:
    """Format the local game day as "October 18, 2026"."""
    local = to_display_time(start_time, tz_name)
    return f"{local:%B} {local.day}, {local.year}"
