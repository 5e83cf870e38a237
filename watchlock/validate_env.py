"""Fail-fast environment validation for the WatchLock core."""

from __future__ import annotations

import os
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

ALLOWED_ENVIRONMENTS = {"development", "staging", "production"}


def validate_environment_value(environment: str) -> None:
    """Ensure ENVIRONMENT is one of the allowed values."""
    if environment not in ALLOWED_ENVIRONMENTS:
        allowed = ", ".join(sorted(ALLOWED_ENVIRONMENTS))
        raise RuntimeError(f"ENVIRONMENT must be one of: {allowed}.")


def validate_timezone_name(name: str, value: str) -> None:
    """Ensure a timezone setting names a real IANA zone."""
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise RuntimeError(f"{name} must be a valid IANA timezone, got '{value}'.") from exc


@lru_cache(maxsize=1)
def validate_env() -> None:
    """Validate environment variables before settings are loaded."""
    environment = os.getenv("ENVIRONMENT", "development").strip().lower() or "development"
    validate_environment_value(environment)

    display_tz = os.getenv("WATCHLOCK_DISPLAY_TIMEZONE")
    if display_tz and display_tz.strip():
        validate_timezone_name("WATCHLOCK_DISPLAY_TIMEZONE", display_tz.strip())
