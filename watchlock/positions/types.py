"""Structured position types, sentinels, and exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Literal, Union


# =============================================================================
# CONSTANTS
# =============================================================================

OUTS_END: Final = "END"
DOWN_END: Final = "END"

# Each inning is a block of 8: TOP 0/1/2/END then BOTTOM 0/1/2/END
INNING_BLOCK = 8
HALF_BLOCK = 4

BASEBALL_PREGAME_POSITION = -1
BASEBALL_POSTGAME_POSITION = 1_000_000
# Highest inning whose block still sorts below the postgame sentinel
MAX_INNING = BASEBALL_POSTGAME_POSITION // INNING_BLOCK

QUARTER_SECONDS = 15 * 60
# One integer per clock value 15:00..0:00 inclusive
QUARTER_BLOCK = QUARTER_SECONDS + 1
MAX_QUARTER = 5  # 5 = overtime

FOOTBALL_PREGAME_POSITION = -2
FOOTBALL_POSTGAME_POSITION = 2_000_000


# =============================================================================
# ENUMS
# =============================================================================


class Sport(str, Enum):
    MLB = "mlb"
    NFL = "nfl"


class Half(str, Enum):
    TOP = "TOP"
    BOTTOM = "BOTTOM"


class Possession(str, Enum):
    HOME = "home"
    AWAY = "away"


class BaseballPhase(str, Enum):
    PREGAME = "PREGAME"
    IN_GAME = "IN_GAME"
    POSTGAME = "POSTGAME"


class FootballPhase(str, Enum):
    PREGAME = "PREGAME"
    Q1 = "Q1"
    Q2 = "Q2"
    HALFTIME = "HALFTIME"
    Q3 = "Q3"
    Q4 = "Q4"
    OVERTIME = "OVERTIME"
    POSTGAME = "POSTGAME"


# Phases that pin a quarter; PREGAME/HALFTIME/POSTGAME ignore the clock.
PHASE_QUARTERS: dict[FootballPhase, int] = {
    FootballPhase.Q1: 1,
    FootballPhase.Q2: 2,
    FootballPhase.Q3: 3,
    FootballPhase.Q4: 4,
    FootballPhase.OVERTIME: 5,
}
QUARTER_PHASES: dict[int, FootballPhase] = {q: p for p, q in PHASE_QUARTERS.items()}


class PositionState(str, Enum):
    """Named states of a broadcast moment.

    BREAK covers a concluded half-inning, a concluded quarter, and halftime.
    """

    PREGAME = "PREGAME"
    IN_PROGRESS = "IN_PROGRESS"
    BREAK = "BREAK"
    POSTGAME = "POSTGAME"


TRANSITIONS: dict[PositionState, frozenset[PositionState]] = {
    PositionState.PREGAME: frozenset(
        {PositionState.IN_PROGRESS, PositionState.BREAK, PositionState.POSTGAME}
    ),
    PositionState.IN_PROGRESS: frozenset(
        {PositionState.IN_PROGRESS, PositionState.BREAK, PositionState.POSTGAME}
    ),
    PositionState.BREAK: frozenset(
        {PositionState.IN_PROGRESS, PositionState.BREAK, PositionState.POSTGAME}
    ),
    PositionState.POSTGAME: frozenset(),
}


def is_allowed_transition(current: PositionState, new: PositionState) -> bool:
    """Return True if a viewer may move from ``current`` to ``new``."""
    return new in TRANSITIONS[current]


# =============================================================================
# STRUCTURED POSITIONS
# =============================================================================

Outs = Union[int, Literal["END"]]
Down = Union[int, Literal["END"]]


@dataclass(frozen=True)
class BaseballPosition:
    inning: int
    half: Half
    outs: Outs
    phase: BaseballPhase = BaseballPhase.IN_GAME
    batter: str | None = None  # display only, never part of ordering

    @property
    def sport(self) -> Sport:
        return Sport.MLB

    @property
    def state(self) -> PositionState:
        if self.phase == BaseballPhase.PREGAME:
            return PositionState.PREGAME
        if self.phase == BaseballPhase.POSTGAME:
            return PositionState.POSTGAME
        if self.outs == OUTS_END:
            return PositionState.BREAK
        return PositionState.IN_PROGRESS


@dataclass(frozen=True)
class FootballPosition:
    quarter: int
    time: str  # "MM:SS" counting down from 15:00
    possession: Possession | None = None
    down: Down | None = None
    distance: int | None = None
    yard_line: int | None = None  # 0 = own goal line, 100 = opponent goal line
    phase: FootballPhase | None = None

    @property
    def sport(self) -> Sport:
        return Sport.NFL

    @property
    def effective_phase(self) -> FootballPhase:
        """The explicit phase, or the one implied by the quarter."""
        if self.phase is not None:
            return self.phase
        return QUARTER_PHASES.get(self.quarter, FootballPhase.OVERTIME)

    @property
    def state(self) -> PositionState:
        phase = self.effective_phase
        if phase == FootballPhase.PREGAME:
            return PositionState.PREGAME
        if phase == FootballPhase.POSTGAME:
            return PositionState.POSTGAME
        if phase == FootballPhase.HALFTIME:
            return PositionState.BREAK
        if self.down == DOWN_END or self.time.strip() in ("0:00", "00:00"):
            return PositionState.BREAK
        return PositionState.IN_PROGRESS


Position = Union[BaseballPosition, FootballPosition]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PositionError(Exception):
    """Base class for position errors."""


class InvalidPositionError(PositionError):
    """Structured position failed its sport's validation rules."""

    def __init__(self, sport: Sport | str | None, reason: str) -> None:
        self.sport = sport
        self.reason = reason
        label = sport.value if isinstance(sport, Sport) else sport or "unknown"
        super().__init__(f"Invalid {label} position: {reason}")


class SportMismatchError(PositionError):
    """Two encoded positions from different sports were compared."""

    def __init__(self, left: Sport, right: Sport) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot compare {left.value} position with {right.value} position"
        )
