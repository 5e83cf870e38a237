"""Game card text: the current position plus the scheduled start.

The display timezone comes from ``Settings.display_timezone``; the
datetime helpers underneath never read it on their own.
"""

from __future__ import annotations

from datetime import datetime

from .config import Settings
from .positions.codec import format_position
from .positions.types import Position, PositionState
from .utils.datetime_utils import format_game_date, format_start_time


def format_game_status(
    position: Position,
    settings: Settings,
    teams: tuple[str, str] | None = None,
    start_time: datetime | None = None,
) -> str:
    """Status line for a game card.

    Before first pitch or kickoff the local start time is appended
    ("Pregame • NYY @ BOS • 7:05 PM Indianapolis"); otherwise this is the
    position text alone.
    """
    text = format_position(position, teams)
    if position.state is PositionState.PREGAME:
        text += f" • {format_start_time(start_time, settings.display_timezone)}"
    return text


def format_game_day(start_time: datetime, settings: Settings) -> str:
    """Local calendar day of the game, e.g. "October 18, 2026"."""
    return format_game_date(start_time, settings.display_timezone)
