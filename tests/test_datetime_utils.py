"""Tests for datetime_utils module."""

from datetime import UTC, datetime

from watchlock.utils.datetime_utils import (
    format_game_date,
    format_start_time,
    timezone_label,
    to_display_time,
)

INDY = "America/Indiana/Indianapolis"


class TestTimezoneLabel:
    def test_last_segment(self):
        assert timezone_label(INDY) == "Indianapolis"

    def test_underscores(self):
        assert timezone_label("America/New_York") == "New York"


class TestToDisplayTime:
    def test_naive_treated_as_utc(self):
        naive = datetime(2026, 7, 15, 22, 15)
        aware = datetime(2026, 7, 15, 22, 15, tzinfo=UTC)
        assert to_display_time(naive, INDY) == to_display_time(aware, INDY)

    def test_summer_offset(self):
        local = to_display_time(datetime(2026, 7, 15, 22, 15, tzinfo=UTC), INDY)
        assert (local.hour, local.minute) == (18, 15)


class TestFormatStartTime:
    """Tests for format_start_time."""

    def test_summer_evening(self):
        start = datetime(2026, 7, 15, 22, 15, tzinfo=UTC)
        assert format_start_time(start, INDY) == "6:15 PM Indianapolis"

    def test_winter_evening(self):
        start = datetime(2026, 1, 10, 1, 5, tzinfo=UTC)
        assert format_start_time(start, INDY) == "8:05 PM Indianapolis"

    def test_without_label(self):
        start = datetime(2026, 10, 18, 16, 0, tzinfo=UTC)
        assert format_start_time(start, INDY, with_label=False) == "12:00 PM"

    def test_midnight(self):
        start = datetime(2026, 10, 18, 4, 30, tzinfo=UTC)
        assert format_start_time(start, INDY, with_label=False) == "12:30 AM"

    def test_other_zone(self):
        start = datetime(2026, 7, 15, 22, 15, tzinfo=UTC)
        assert format_start_time(start, "America/Los_Angeles") == "3:15 PM Los Angeles"

    def test_unknown(self):
        assert format_start_time(None, INDY) == "TBD"


class TestFormatGameDate:
    def test_local_date(self):
        # 01:05 UTC on the 10th is still the evening of the 9th in Indianapolis
        assert format_game_date(datetime(2026, 1, 10, 1, 5, tzinfo=UTC), INDY) == "January 9, 2026"
