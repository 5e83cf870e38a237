"""Sport-dispatching facade over the per-sport codecs.

Every dispatch handles each ``Sport`` explicitly and ends in
``assert_never`` so a type checker flags a sport that is not wired in.
"""

from __future__ import annotations

from typing import assert_never

from . import baseball, football
from .types import (
    BASEBALL_POSTGAME_POSITION,
    BASEBALL_PREGAME_POSITION,
    FOOTBALL_POSTGAME_POSITION,
    FOOTBALL_PREGAME_POSITION,
    BaseballPosition,
    FootballPosition,
    Position,
    Sport,
)


def sport_of(position: Position) -> Sport:
    if isinstance(position, BaseballPosition):
        return Sport.MLB
    if isinstance(position, FootballPosition):
        return Sport.NFL
    assert_never(position)


def encode_position(position: Position) -> int:
    """Encode a structured position with its own sport's codec."""
    if isinstance(position, BaseballPosition):
        return baseball.encode(position)
    if isinstance(position, FootballPosition):
        return football.encode(position)
    assert_never(position)


def decode_position(sport: Sport, pos: int) -> Position:
    """Decode ``pos`` as a position of ``sport``. Total for every integer."""
    if sport is Sport.MLB:
        return baseball.decode(pos)
    if sport is Sport.NFL:
        return football.decode(pos)
    assert_never(sport)


def is_valid_position(position: Position) -> bool:
    if isinstance(position, BaseballPosition):
        return baseball.is_valid(position)
    if isinstance(position, FootballPosition):
        return football.is_valid(position)
    assert_never(position)


def validate_position(position: Position) -> Position:
    """Return ``position`` unchanged or raise InvalidPositionError."""
    if isinstance(position, BaseballPosition):
        return baseball.validate(position)
    if isinstance(position, FootballPosition):
        return football.validate(position)
    assert_never(position)


def format_position(position: Position, teams: tuple[str, str] | None = None) -> str:
    """Display string for a position; ``teams`` is ``(away, home)``."""
    if isinstance(position, BaseballPosition):
        if teams is None:
            return baseball.format_position(position)
        return baseball.format_position_with_teams(position, *teams)
    if isinstance(position, FootballPosition):
        if teams is None:
            return football.format_position(position)
        return football.format_position_with_teams(position, *teams)
    assert_never(position)


def sentinels(sport: Sport) -> tuple[int, int]:
    """(pregame, postgame) sentinel pair of ``sport``."""
    if sport is Sport.MLB:
        return BASEBALL_PREGAME_POSITION, BASEBALL_POSTGAME_POSITION
    if sport is Sport.NFL:
        return FOOTBALL_PREGAME_POSITION, FOOTBALL_POSTGAME_POSITION
    assert_never(sport)


def next_milestone(sport: Sport, pos: int) -> int:
    if sport is Sport.MLB:
        return baseball.next_milestone(pos)
    if sport is Sport.NFL:
        return football.next_milestone(pos)
    assert_never(sport)
