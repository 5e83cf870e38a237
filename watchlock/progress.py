"""Viewer progress: the monotonic ratchet and timeline fractions.

Storage enforces the ratchet atomically (conditional update "only if the new
position is greater"). ``apply_progress`` is the same rule as a pure
function, for in-memory stores and for deciding what to report back.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .logging import logger
from .positions.codec import decode_position, sentinels
from .positions.types import Sport, is_allowed_transition
from .sports import get_sport_config

# Position assumed for a viewer who has never set one
DEFAULT_VIEWER_POSITION = 0


@dataclass(frozen=True)
class ProgressUpdate:
    pos: int
    updated: bool


def apply_progress(
    stored: int | None, candidate: int, sport: Sport | None = None
) -> ProgressUpdate:
    """Resolve a progress write against the stored marker.

    The marker only moves forward; an equal or earlier candidate leaves it
    where it is. When ``sport`` is given, the move must also be an allowed
    state transition: nothing moves a viewer past a final, and a larger
    integer that still decodes to pregame is not progress.
    """
    if stored is None:
        return ProgressUpdate(pos=candidate, updated=True)
    if candidate <= stored:
        logger.info("progress_regression_ignored", stored_pos=stored, candidate_pos=candidate)
        return ProgressUpdate(pos=stored, updated=False)

    if sport is not None:
        current = decode_position(sport, stored).state
        new = decode_position(sport, candidate).state
        if not is_allowed_transition(current, new):
            logger.info(
                "progress_transition_rejected",
                sport=sport.value,
                stored_pos=stored,
                candidate_pos=candidate,
                from_state=current.value,
                to_state=new.value,
            )
            return ProgressUpdate(pos=stored, updated=False)

    return ProgressUpdate(pos=candidate, updated=True)


def _timeline_span(sport: Sport, max_period: int | None) -> tuple[int, int]:
    cfg = get_sport_config(sport)
    periods = max_period if max_period is not None else cfg.regulation_periods
    if periods < 1:
        raise ValueError(f"max_period must be >= 1, got {periods}")
    last_in_game = periods * cfg.period_width - 1
    _, postgame = sentinels(sport)
    return postgame, last_in_game


def timeline_fraction(sport: Sport, pos: int, max_period: int | None = None) -> float:
    """Where ``pos`` sits on a 0.0 (pregame) to 1.0 (final) progress bar.

    ``max_period`` sets how many innings/quarters the bar spans; defaults to
    regulation. Positions past it (extra innings, overtime) pin just short of
    the final.
    """
    postgame, last_in_game = _timeline_span(sport, max_period)
    # Both sports keep every in-game position non-negative
    if pos < 0:
        return 0.0
    if pos >= postgame:
        return 1.0
    return (min(pos, last_in_game) + 1) / (last_in_game + 2)


def message_markers(
    sport: Sport, positions: Iterable[int], max_period: int | None = None
) -> list[float]:
    """Progress-bar fractions for a set of message positions, in input order."""
    return [timeline_fraction(sport, pos, max_period) for pos in positions]
