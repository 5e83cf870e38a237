"""Server-side preparation of chat messages before they are stored.

The encoded position of a message is always computed here from the
validated structured position; a client-sent integer is never used.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .config import Settings
from .logging import logger
from .positions.codec import encode_position, sport_of
from .positions.schemas import dump_position, parse_position
from .positions.types import Position, Sport


class InvalidMessageError(Exception):
    """Chat message body failed validation."""


@dataclass(frozen=True)
class PreparedMessage:
    body: str
    sport: Sport
    pos: int
    position: Position

    @property
    def position_meta(self) -> dict[str, Any]:
        return dump_position(self.position)


def validate_body(body: str | None, max_length: int) -> str:
    """Return the trimmed body or raise InvalidMessageError."""
    if body is None or not isinstance(body, str):
        raise InvalidMessageError("Message body is required")
    trimmed = body.strip()
    if not trimmed:
        raise InvalidMessageError("Message body is required")
    if len(trimmed) > max_length:
        raise InvalidMessageError(f"Message too long (max {max_length} characters)")
    return trimmed


def prepare_message(
    body: str | None,
    position_payload: Mapping[str, Any],
    settings: Settings,
) -> PreparedMessage:
    """Validate a message body and its position, and encode the position.

    Raises:
        InvalidMessageError: If the body is empty or too long.
        InvalidPositionError: If the position payload is invalid.
    """
    try:
        trimmed = validate_body(body, settings.message_max_length)
    except InvalidMessageError as exc:
        logger.info("message_rejected", error=str(exc))
        raise

    position = parse_position(position_payload)
    return PreparedMessage(
        body=trimmed,
        sport=sport_of(position),
        pos=encode_position(position),
        position=position,
    )
