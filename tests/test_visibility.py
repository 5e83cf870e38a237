"""Tests for watchlock.visibility."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import pytest

from watchlock.positions.types import (
    BaseballPosition,
    FootballPosition,
    Half,
    Sport,
    SportMismatchError,
)
from watchlock.visibility import (
    EncodedPosition,
    FeedView,
    build_feed,
    filter_visible,
    is_visible,
    is_visible_to,
    timeline_order,
)

T0 = datetime(2026, 10, 18, 23, 0, tzinfo=UTC)


@dataclass(frozen=True)
class Msg:
    body: str
    pos: int
    created_at: datetime | None = None


class TestIsVisible:
    """Tests for the core visibility rule."""

    @pytest.mark.parametrize(
        "message_pos,viewer_pos,expected",
        [
            (10, 10, True),
            (9, 10, True),
            (11, 10, False),
            (-1, 0, True),
            (0, -1, False),
            (1_000_000, 1_000_000, True),
        ],
    )
    def test_boundary(self, message_pos, viewer_pos, expected):
        assert is_visible(message_pos, viewer_pos) is expected

    def test_end_of_half_inning_message(self):
        """Top 1st END is visible from Bottom 1st, not from Top 1st with 2 outs."""
        assert is_visible(3, 4)
        assert not is_visible(3, 2)


class TestIsVisibleTo:
    """Tests for the sport-checked comparison."""

    def test_same_sport(self):
        message = EncodedPosition.from_position(BaseballPosition(inning=1, half=Half.TOP, outs="END"))
        viewer = EncodedPosition.from_position(BaseballPosition(inning=1, half=Half.BOTTOM, outs=0))
        assert message == EncodedPosition(Sport.MLB, 3)
        assert is_visible_to(message, viewer)
        assert not is_visible_to(viewer, message)

    def test_cross_sport_raises(self):
        message = EncodedPosition(Sport.MLB, 3)
        viewer = EncodedPosition.from_position(FootballPosition(quarter=2, time="10:00"))
        with pytest.raises(SportMismatchError, match="Cannot compare mlb position with nfl"):
            is_visible_to(message, viewer)


class TestFilterVisible:
    """Tests for filter_visible."""

    def test_keeps_order_and_includes_equal(self):
        messages = [Msg("a", 0), Msg("b", 5), Msg("c", 10), Msg("d", 15)]
        visible = filter_visible(messages, 10)
        assert [m.body for m in visible] == ["a", "b", "c"]

    def test_unsorted_input_order_is_preserved(self):
        messages = [Msg("late", 12), Msg("early", 1), Msg("mid", 6), Msg("tie", 6)]
        assert [m.body for m in filter_visible(messages, 6)] == ["early", "mid", "tie"]

    def test_custom_key(self):
        rows = [{"pos": 2}, {"pos": 7}]
        assert filter_visible(rows, 5, key=lambda row: row["pos"]) == [{"pos": 2}]

    def test_pregame_viewer_sees_only_pregame(self):
        messages = [Msg("hype", -1), Msg("first pitch", 0)]
        assert [m.body for m in filter_visible(messages, -1)] == ["hype"]

    def test_empty(self):
        assert filter_visible([], 10) == []


class TestBuildFeed:
    def test_counts_hidden_messages(self):
        messages = [Msg("a", 0), Msg("b", 5), Msg("c", 10), Msg("d", 15), Msg("e", 20)]
        feed = build_feed(messages, 10)
        assert isinstance(feed, FeedView)
        assert [m.body for m in feed.visible] == ["a", "b", "c"]
        assert feed.hidden_count == 2

    def test_accepts_generator(self):
        feed = build_feed((Msg(str(i), i) for i in range(5)), 1)
        assert feed.hidden_count == 3


class TestTimelineOrder:
    """Tests for timeline_order."""

    def test_sorted_by_position(self):
        messages = [Msg("c", 10), Msg("a", 0), Msg("b", 5)]
        assert [m.body for m in timeline_order(messages)] == ["a", "b", "c"]

    def test_ties_keep_arrival_order(self):
        messages = [Msg("first", 4), Msg("second", 4), Msg("before", 3)]
        assert [m.body for m in timeline_order(messages)] == ["before", "first", "second"]

    def test_created_at_breaks_ties(self):
        messages = [
            Msg("newer", 4, T0 + timedelta(minutes=2)),
            Msg("undated", 4, None),
            Msg("older", 4, T0),
            Msg("earliest_pos", 1, T0 + timedelta(hours=1)),
        ]
        ordered = timeline_order(messages, created_at=lambda m: m.created_at)
        assert [m.body for m in ordered] == ["earliest_pos", "older", "newer", "undated"]
