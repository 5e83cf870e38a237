"""Game position encoding: structured positions <-> monotonic integers."""

from . import baseball, football
from .codec import (
    decode_position,
    encode_position,
    format_position,
    is_valid_position,
    next_milestone,
    sentinels,
    sport_of,
    validate_position,
)
from .types import (
    DOWN_END,
    OUTS_END,
    BaseballPhase,
    BaseballPosition,
    FootballPhase,
    FootballPosition,
    Half,
    InvalidPositionError,
    Position,
    PositionError,
    PositionState,
    Possession,
    Sport,
    SportMismatchError,
    is_allowed_transition,
)

__all__ = [
    "DOWN_END",
    "OUTS_END",
    "BaseballPhase",
    "BaseballPosition",
    "FootballPhase",
    "FootballPosition",
    "Half",
    "InvalidPositionError",
    "Position",
    "PositionError",
    "PositionState",
    "Possession",
    "Sport",
    "SportMismatchError",
    "baseball",
    "decode_position",
    "encode_position",
    "football",
    "format_position",
    "is_allowed_transition",
    "is_valid_position",
    "next_milestone",
    "sentinels",
    "sport_of",
    "validate_position",
]
