"""WatchLock: spoiler-safe positions and message visibility for delayed broadcasts."""

from .display import format_game_day, format_game_status
from .messages import InvalidMessageError, PreparedMessage, prepare_message
from .positions import (
    BaseballPhase,
    BaseballPosition,
    FootballPhase,
    FootballPosition,
    Half,
    InvalidPositionError,
    Position,
    PositionState,
    Possession,
    Sport,
    SportMismatchError,
    decode_position,
    encode_position,
    format_position,
    is_valid_position,
    validate_position,
)
from .positions.schemas import dump_position, parse_position
from .progress import ProgressUpdate, apply_progress, timeline_fraction
from .visibility import (
    EncodedPosition,
    FeedView,
    build_feed,
    filter_visible,
    is_visible,
    is_visible_to,
    timeline_order,
)

__all__ = [
    "BaseballPhase",
    "BaseballPosition",
    "EncodedPosition",
    "FeedView",
    "FootballPhase",
    "FootballPosition",
    "Half",
    "InvalidMessageError",
    "InvalidPositionError",
    "Position",
    "PositionState",
    "Possession",
    "PreparedMessage",
    "ProgressUpdate",
    "Sport",
    "SportMismatchError",
    "apply_progress",
    "build_feed",
    "decode_position",
    "dump_position",
    "encode_position",
    "filter_visible",
    "format_game_day",
    "format_game_status",
    "format_position",
    "is_valid_position",
    "is_visible",
    "is_visible_to",
    "parse_position",
    "prepare_message",
    "timeline_fraction",
    "timeline_order",
    "validate_position",
]
