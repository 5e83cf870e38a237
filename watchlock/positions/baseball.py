"""Baseball position codec.

Maps inning/half/outs onto a monotonic integer timeline. Each inning is a
block of 8 consecutive integers:

    offset 0-2  TOP half, 0/1/2 outs
    offset 3    TOP half concluded (END)
    offset 4-6  BOTTOM half, 0/1/2 outs
    offset 7    BOTTOM half concluded (END)

Examples:
    Top 1st, 0 outs     -> 0
    Top 1st, END        -> 3
    Bottom 1st, 0 outs  -> 4
    Bottom 9th, 2 outs  -> 70
    Top 10th, 0 outs    -> 72

Pregame and postgame sit on sentinels outside every in-game block.
"""

from __future__ import annotations

from .types import (
    BASEBALL_POSTGAME_POSITION,
    BASEBALL_PREGAME_POSITION,
    HALF_BLOCK,
    INNING_BLOCK,
    MAX_INNING,
    OUTS_END,
    BaseballPhase,
    BaseballPosition,
    Half,
    InvalidPositionError,
    Sport,
)

_END_OFFSET = 3
_VALID_OUTS = (0, 1, 2)

PREGAME = BaseballPosition(inning=1, half=Half.TOP, outs=0, phase=BaseballPhase.PREGAME)
POSTGAME = BaseballPosition(
    inning=9, half=Half.BOTTOM, outs=OUTS_END, phase=BaseballPhase.POSTGAME
)


def encode(meta: BaseballPosition) -> int:
    """Encode a baseball position. Callers validate untrusted input first."""
    if meta.phase == BaseballPhase.PREGAME:
        return BASEBALL_PREGAME_POSITION
    if meta.phase == BaseballPhase.POSTGAME:
        return BASEBALL_POSTGAME_POSITION

    inning_base = (meta.inning - 1) * INNING_BLOCK
    half_offset = 0 if meta.half == Half.TOP else HALF_BLOCK
    outs_value = _END_OFFSET if meta.outs == OUTS_END else meta.outs
    return inning_base + half_offset + outs_value


def decode(pos: int) -> BaseballPosition:
    """Decode any integer back to a baseball position.

    Total: values at or below the pregame sentinel decode to the canonical
    pregame position, values at or above the postgame sentinel to the
    canonical postgame position.
    """
    if pos <= BASEBALL_PREGAME_POSITION:
        return PREGAME
    if pos >= BASEBALL_POSTGAME_POSITION:
        return POSTGAME

    inning = pos // INNING_BLOCK + 1
    remainder = pos % INNING_BLOCK
    half = Half.TOP if remainder < HALF_BLOCK else Half.BOTTOM
    outs_remainder = remainder % HALF_BLOCK
    outs = OUTS_END if outs_remainder == _END_OFFSET else outs_remainder
    return BaseballPosition(inning=inning, half=half, outs=outs)


def _invalid_reason(meta: BaseballPosition) -> str | None:
    if meta.phase in (BaseballPhase.PREGAME, BaseballPhase.POSTGAME):
        return None
    if meta.phase != BaseballPhase.IN_GAME:
        return f"unknown phase {meta.phase!r}"
    if isinstance(meta.inning, bool) or not isinstance(meta.inning, int):
        return f"inning must be an integer, got {meta.inning!r}"
    if meta.inning < 1:
        return f"inning must be >= 1, got {meta.inning}"
    if meta.inning > MAX_INNING:
        return f"inning must be <= {MAX_INNING}, got {meta.inning}"
    if meta.half not in (Half.TOP, Half.BOTTOM):
        return f"half must be TOP or BOTTOM, got {meta.half!r}"
    if meta.outs == OUTS_END:
        return None
    if isinstance(meta.outs, bool) or not isinstance(meta.outs, int):
        return f"outs must be an integer or END, got {meta.outs!r}"
    if meta.outs not in _VALID_OUTS:
        return f"outs must be 0, 1, 2 or END, got {meta.outs!r}"
    return None


def is_valid(meta: BaseballPosition) -> bool:
    return _invalid_reason(meta) is None


def validate(meta: BaseballPosition) -> BaseballPosition:
    """Return ``meta`` unchanged or raise InvalidPositionError."""
    reason = _invalid_reason(meta)
    if reason is not None:
        raise InvalidPositionError(Sport.MLB, reason)
    return meta


def ordinal(n: int) -> str:
    """1 -> "1st", 2 -> "2nd", 11 -> "11th", 23 -> "23rd"."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_position(meta: BaseballPosition) -> str:
    """Human-readable position: "Top 3rd • 2 outs", "End of top half • 3rd"."""
    if meta.phase == BaseballPhase.PREGAME:
        return "Pregame"
    if meta.phase == BaseballPhase.POSTGAME:
        return "Final"

    half_label = "Top" if meta.half == Half.TOP else "Bottom"
    inning_label = ordinal(meta.inning)

    if meta.outs == OUTS_END:
        end_label = "End of top half" if meta.half == Half.TOP else "End of bottom half"
        return f"{end_label} • {inning_label}"

    outs_label = "out" if meta.outs == 1 else "outs"
    text = f"{half_label} {inning_label} • {meta.outs} {outs_label}"
    if meta.batter:
        text += f" • {meta.batter} batting"
    return text


def format_position_with_teams(meta: BaseballPosition, away_team: str, home_team: str) -> str:
    """Position string naming the batting team (away bats TOP, home bats BOTTOM)."""
    if meta.phase == BaseballPhase.PREGAME:
        return f"Pregame • {away_team} @ {home_team}"
    if meta.phase == BaseballPhase.POSTGAME:
        return f"Final • {away_team} @ {home_team}"

    base = format_position(meta)
    # Nobody is batting once the half is over; a named batter already says who is up
    if meta.outs == OUTS_END or meta.batter:
        return base

    batting_team = away_team if meta.half == Half.TOP else home_team
    return f"{base} • {batting_team} Batting"


def next_milestone(pos: int) -> int:
    """Encoded start of the next half-inning after ``pos``."""
    if pos <= BASEBALL_PREGAME_POSITION:
        return 0
    if pos >= BASEBALL_POSTGAME_POSITION:
        return BASEBALL_POSTGAME_POSITION

    inning_base = (pos // INNING_BLOCK) * INNING_BLOCK
    if pos % INNING_BLOCK < HALF_BLOCK:
        return inning_base + HALF_BLOCK
    return min(inning_base + INNING_BLOCK, BASEBALL_POSTGAME_POSITION)


def advance(meta: BaseballPosition) -> BaseballPosition:
    """Step to the next recordable moment.

    PREGAME -> Top 1st 0 outs; an out is added until the half ends; a
    concluded half rolls to the next half. POSTGAME is terminal; declaring
    the game final is an explicit move, not a step. The end of the last
    encodable inning steps to POSTGAME.
    """
    if meta.phase == BaseballPhase.POSTGAME:
        return meta
    if meta.phase == BaseballPhase.PREGAME:
        return BaseballPosition(inning=1, half=Half.TOP, outs=0)
    if meta.outs == OUTS_END:
        if meta.half == Half.TOP:
            return BaseballPosition(inning=meta.inning, half=Half.BOTTOM, outs=0)
        if meta.inning >= MAX_INNING:
            return POSTGAME
        return BaseballPosition(inning=meta.inning + 1, half=Half.TOP, outs=0)
    if meta.outs == 2:
        return BaseballPosition(inning=meta.inning, half=meta.half, outs=OUTS_END)
    return BaseballPosition(inning=meta.inning, half=meta.half, outs=meta.outs + 1)
