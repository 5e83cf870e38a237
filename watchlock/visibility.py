"""
Spoiler gate: which chat messages a viewer may see.

THE RULE: a message is visible iff its encoded position is at or before
the viewer's encoded position. Both integers must come from the same
sport's codec. The rule is applied server side on every read path; a
client-supplied position is never trusted.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from operator import attrgetter
from typing import Any, Generic, TypeVar

from .logging import logger
from .positions.codec import encode_position, sport_of
from .positions.types import Position, Sport, SportMismatchError

T = TypeVar("T")

_by_pos: Callable[[Any], int] = attrgetter("pos")


def is_visible(message_pos: int, viewer_pos: int) -> bool:
    """True when a message at ``message_pos`` is safe for a viewer at ``viewer_pos``."""
    return message_pos <= viewer_pos


@dataclass(frozen=True)
class EncodedPosition:
    """An encoded position that remembers which sport produced it."""

    sport: Sport
    pos: int

    @classmethod
    def from_position(cls, position: Position) -> EncodedPosition:
        return cls(sport=sport_of(position), pos=encode_position(position))


def is_visible_to(message: EncodedPosition, viewer: EncodedPosition) -> bool:
    """Sport-checked visibility.

    Raises:
        SportMismatchError: If the two positions come from different sports.
    """
    if message.sport is not viewer.sport:
        raise SportMismatchError(message.sport, viewer.sport)
    return is_visible(message.pos, viewer.pos)


def filter_visible(
    messages: Iterable[T],
    viewer_pos: int,
    key: Callable[[T], int] = _by_pos,
) -> list[T]:
    """Messages visible at ``viewer_pos``, in their original order."""
    return [message for message in messages if is_visible(key(message), viewer_pos)]


@dataclass(frozen=True)
class FeedView(Generic[T]):
    visible: list[T]
    hidden_count: int


def build_feed(
    messages: Iterable[T],
    viewer_pos: int,
    key: Callable[[T], int] = _by_pos,
) -> FeedView[T]:
    """Split a message list into what the viewer sees and how much is held back."""
    visible: list[T] = []
    hidden = 0
    for message in messages:
        if is_visible(key(message), viewer_pos):
            visible.append(message)
        else:
            hidden += 1
    logger.debug(
        "feed_filtered",
        viewer_pos=viewer_pos,
        visible_count=len(visible),
        hidden_count=hidden,
    )
    return FeedView(visible=visible, hidden_count=hidden)


def timeline_order(
    messages: Iterable[T],
    key: Callable[[T], int] = _by_pos,
    created_at: Callable[[T], datetime | None] | None = None,
) -> list[T]:
    """Order messages along the game timeline.

    Sorted by encoded position, then by ``created_at`` when given. The sort
    is stable, so messages that tie on both keep their arrival order.
    """
    if created_at is None:
        return sorted(messages, key=key)

    def _sort_key(message: T) -> tuple[int, bool, datetime | None]:
        stamp = created_at(message)
        # Undated messages go after dated ones at the same position
        return key(message), stamp is None, stamp

    return sorted(messages, key=_sort_key)
