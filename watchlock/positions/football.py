"""Football position codec.

Each quarter is a block of 901 integers, one per clock value from 15:00
down to 0:00 inclusive, so the last second of a quarter and the first of
the next are adjacent but never equal:

    Q1 15:00 -> 0
    Q1 10:00 -> 300
    Q1  0:00 -> 900
    Q2 15:00 -> 901
    Q4  0:00 -> 3603
    OT 15:00 -> 3604

Halftime sits on the end of the second quarter. Pregame and postgame map to
sentinels outside every quarter block.
"""

from __future__ import annotations

import re

from .types import (
    DOWN_END,
    FOOTBALL_POSTGAME_POSITION,
    FOOTBALL_PREGAME_POSITION,
    MAX_QUARTER,
    PHASE_QUARTERS,
    QUARTER_BLOCK,
    QUARTER_SECONDS,
    FootballPhase,
    FootballPosition,
    InvalidPositionError,
    Possession,
    Sport,
)

_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
_VALID_DOWNS = (1, 2, 3, 4)
_DOWN_SUFFIXES = {1: "st", 2: "nd", 3: "rd", 4: "th"}
_PHASES_WITHOUT_CLOCK = (
    FootballPhase.PREGAME,
    FootballPhase.HALFTIME,
    FootballPhase.POSTGAME,
)

PREGAME = FootballPosition(quarter=1, time="15:00", phase=FootballPhase.PREGAME)
POSTGAME = FootballPosition(quarter=4, time="0:00", phase=FootballPhase.POSTGAME)

# Halftime is the moment the second quarter's clock hits zero
HALFTIME_POSITION = QUARTER_BLOCK + QUARTER_SECONDS


def parse_clock(time: str) -> int:
    """Parse "MM:SS" to seconds remaining in the quarter.

    Raises:
        ValueError: If ``time`` is not a MM:SS clock.
    """
    match = _CLOCK_PATTERN.match(time.strip())
    if match is None:
        raise ValueError(f"Clock must look like MM:SS, got {time!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


def format_clock(seconds: int) -> str:
    """Seconds remaining -> "M:SS"."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def encode(meta: FootballPosition) -> int:
    """Encode a football position. Callers validate untrusted input first."""
    if meta.phase == FootballPhase.PREGAME:
        return FOOTBALL_PREGAME_POSITION
    if meta.phase == FootballPhase.POSTGAME:
        return FOOTBALL_POSTGAME_POSITION
    if meta.phase == FootballPhase.HALFTIME:
        return HALFTIME_POSITION

    seconds_elapsed = QUARTER_SECONDS - parse_clock(meta.time)
    return (meta.quarter - 1) * QUARTER_BLOCK + seconds_elapsed


def decode(pos: int) -> FootballPosition:
    """Decode any integer back to a football position.

    Possession, down, distance and yard line are not encoded and come back
    unset.
    """
    # Everything before kickoff, the pregame sentinel included
    if pos < 0:
        return PREGAME
    if pos >= FOOTBALL_POSTGAME_POSITION:
        return POSTGAME

    quarter = min(pos // QUARTER_BLOCK + 1, MAX_QUARTER)
    seconds_elapsed = min(pos - (quarter - 1) * QUARTER_BLOCK, QUARTER_SECONDS)
    return FootballPosition(
        quarter=quarter,
        time=format_clock(QUARTER_SECONDS - seconds_elapsed),
    )


def _invalid_reason(meta: FootballPosition) -> str | None:
    if meta.phase is not None and meta.phase not in list(FootballPhase):
        return f"unknown phase {meta.phase!r}"
    if meta.phase in _PHASES_WITHOUT_CLOCK:
        return None

    if isinstance(meta.quarter, bool) or not isinstance(meta.quarter, int):
        return f"quarter must be an integer, got {meta.quarter!r}"
    if not 1 <= meta.quarter <= MAX_QUARTER:
        return f"quarter must be between 1 and {MAX_QUARTER}, got {meta.quarter}"
    if meta.phase is not None and PHASE_QUARTERS[FootballPhase(meta.phase)] != meta.quarter:
        return f"phase {FootballPhase(meta.phase).value} does not match quarter {meta.quarter}"

    if not isinstance(meta.time, str) or _CLOCK_PATTERN.match(meta.time.strip()) is None:
        return f"time must look like MM:SS, got {meta.time!r}"
    minutes, seconds = (int(part) for part in meta.time.strip().split(":"))
    if seconds >= 60:
        return f"clock seconds must be below 60, got {meta.time}"
    if minutes * 60 + seconds > QUARTER_SECONDS:
        return f"clock cannot exceed 15:00, got {meta.time}"

    if meta.down is not None and meta.down != DOWN_END:
        if isinstance(meta.down, bool) or meta.down not in _VALID_DOWNS:
            return f"down must be 1-4 or END, got {meta.down!r}"
    if meta.distance is not None and meta.distance < 0:
        return f"distance cannot be negative, got {meta.distance}"
    if meta.yard_line is not None and not 0 <= meta.yard_line <= 100:
        return f"yard line must be between 0 and 100, got {meta.yard_line}"
    if meta.possession is not None and meta.possession not in (Possession.HOME, Possession.AWAY):
        return f"possession must be home, away or empty, got {meta.possession!r}"
    return None


def is_valid(meta: FootballPosition) -> bool:
    return _invalid_reason(meta) is None


def validate(meta: FootballPosition) -> FootballPosition:
    """Return ``meta`` unchanged or raise InvalidPositionError."""
    reason = _invalid_reason(meta)
    if reason is not None:
        raise InvalidPositionError(Sport.NFL, reason)
    return meta


def quarter_label(quarter: int) -> str:
    return f"Q{quarter}" if quarter <= 4 else "OT"


def format_position(meta: FootballPosition) -> str:
    """Human-readable position: "Q3 7:32 • 2nd & 8 at 35 • Home ball"."""
    if meta.phase == FootballPhase.PREGAME:
        return "Pregame"
    if meta.phase == FootballPhase.POSTGAME:
        return "Final"
    if meta.phase == FootballPhase.HALFTIME:
        return "Halftime"

    text = f"{quarter_label(meta.quarter)} {meta.time}"

    if meta.down is not None and meta.down != DOWN_END and meta.distance is not None:
        text += f" • {meta.down}{_DOWN_SUFFIXES[meta.down]} & {meta.distance}"
        if meta.yard_line is not None:
            text += f" at {meta.yard_line}"

    if meta.possession is not None:
        side = "Home" if meta.possession == Possession.HOME else "Away"
        text += f" • {side} ball"

    return text


def format_position_with_teams(meta: FootballPosition, away_team: str, home_team: str) -> str:
    """Position string naming the team with the ball."""
    if meta.phase == FootballPhase.PREGAME:
        return f"Pregame • {away_team} @ {home_team}"
    if meta.phase == FootballPhase.POSTGAME:
        return f"Final • {away_team} @ {home_team}"
    if meta.phase == FootballPhase.HALFTIME:
        return f"Halftime • {away_team} @ {home_team}"

    base = format_position(meta)
    if meta.possession is None:
        return base

    if meta.possession == Possession.HOME:
        return base.replace("Home ball", f"{home_team} ball")
    return base.replace("Away ball", f"{away_team} ball")


def next_milestone(pos: int) -> int:
    """Encoded start of the next quarter after ``pos``; overtime leads to the final."""
    if pos < 0:
        return 0
    if pos >= FOOTBALL_POSTGAME_POSITION:
        return FOOTBALL_POSTGAME_POSITION

    quarter = pos // QUARTER_BLOCK + 1
    if quarter >= MAX_QUARTER:
        return FOOTBALL_POSTGAME_POSITION
    return quarter * QUARTER_BLOCK
