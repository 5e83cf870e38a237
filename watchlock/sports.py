"""
Single Source of Truth (SSOT) for supported sports.

Every function that dispatches by sport must handle each member of
``Sport``; this registry is checked against the enum at import time so a
new sport cannot be half-registered.

To add a new sport:
1. Add a member to ``Sport`` and an entry to SPORT_CONFIG
2. Add a codec module under ``watchlock.positions`` and wire it into
   ``watchlock.positions.codec``
"""

from __future__ import annotations

from dataclasses import dataclass

from .positions.types import (
    INNING_BLOCK,
    QUARTER_BLOCK,
    Sport,
)


@dataclass(frozen=True)
class SportConfig:
    """Configuration for a single sport."""

    sport: Sport
    display_name: str  # "MLB Baseball"
    period_name: str  # "inning", "quarter"
    regulation_periods: int
    period_width: int  # encoded integers per period


SPORT_CONFIG: dict[Sport, SportConfig] = {
    Sport.MLB: SportConfig(
        sport=Sport.MLB,
        display_name="MLB Baseball",
        period_name="inning",
        regulation_periods=9,
        period_width=INNING_BLOCK,
    ),
    Sport.NFL: SportConfig(
        sport=Sport.NFL,
        display_name="NFL Football",
        period_name="quarter",
        regulation_periods=4,
        period_width=QUARTER_BLOCK,
    ),
}

_missing = set(Sport) - set(SPORT_CONFIG)
if _missing:
    raise RuntimeError(f"SPORT_CONFIG is missing sports: {sorted(s.value for s in _missing)}")


def validate_sport_code(sport_code: str | Sport) -> Sport:
    """
    Validate and return a sport tag.

    Raises:
        ValueError: If sport_code is not a supported sport
    """
    try:
        return Sport(sport_code.lower())
    except (ValueError, AttributeError):
        valid = ", ".join(s.value for s in Sport)
        raise ValueError(f"Unknown sport '{sport_code}'. Valid sports: {valid}") from None


def get_sport_config(sport_code: str | Sport) -> SportConfig:
    """
    Get configuration for a specific sport.

    Raises:
        ValueError: If sport_code is not a supported sport
    """
    return SPORT_CONFIG[validate_sport_code(sport_code)]

