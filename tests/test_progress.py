"""Tests for watchlock.progress."""

import pytest
from structlog.testing import capture_logs

from watchlock.positions.types import Sport
from watchlock.progress import (
    DEFAULT_VIEWER_POSITION,
    ProgressUpdate,
    apply_progress,
    message_markers,
    timeline_fraction,
)


class TestApplyProgress:
    """The stored marker only ever moves forward."""

    def test_first_write_accepted(self):
        assert apply_progress(None, 12) == ProgressUpdate(pos=12, updated=True)

    def test_forward_move_accepted(self):
        assert apply_progress(10, 11) == ProgressUpdate(pos=11, updated=True)

    def test_equal_is_not_an_update(self):
        assert apply_progress(10, 10) == ProgressUpdate(pos=10, updated=False)

    def test_regression_ignored(self):
        assert apply_progress(70, 4) == ProgressUpdate(pos=70, updated=False)

    def test_sequence_never_decreases(self):
        stored = None
        seen = []
        for candidate in [0, 4, 2, 8, 8, 3, 72, -1]:
            stored = apply_progress(stored, candidate).pos
            seen.append(stored)
        assert seen == [0, 4, 4, 8, 8, 8, 72, 72]

    def test_default_viewer_position(self):
        assert DEFAULT_VIEWER_POSITION == 0


class TestApplyProgressTransitions:
    """With a sport, the ratchet also follows the position state machine."""

    def test_in_game_to_final(self):
        assert apply_progress(70, 1_000_000, Sport.MLB) == ProgressUpdate(1_000_000, True)

    def test_pregame_to_kickoff(self):
        assert apply_progress(-2, 0, Sport.NFL) == ProgressUpdate(0, True)

    def test_nothing_moves_past_final(self):
        with capture_logs() as logs:
            result = apply_progress(1_000_000, 1_000_005, Sport.MLB)
        assert result == ProgressUpdate(1_000_000, False)
        rejected = [e for e in logs if e["event"] == "progress_transition_rejected"]
        assert rejected
        assert rejected[0]["from_state"] == "POSTGAME"

    def test_larger_pregame_integer_is_not_progress(self):
        # -1 is above the football pregame sentinel but still decodes to pregame
        assert apply_progress(-2, -1, Sport.NFL) == ProgressUpdate(-2, False)

    def test_without_sport_only_integers_count(self):
        assert apply_progress(1_000_000, 1_000_005) == ProgressUpdate(1_000_005, True)

    def test_regression_is_logged(self):
        with capture_logs() as logs:
            apply_progress(70, 4, Sport.MLB)
        assert [e["event"] for e in logs] == ["progress_regression_ignored"]


class TestTimelineFraction:
    """Tests for timeline_fraction."""

    @pytest.mark.parametrize("sport", list(Sport))
    def test_ends(self, sport):
        assert timeline_fraction(sport, -2) == 0.0
        assert timeline_fraction(sport, -1) == 0.0
        assert timeline_fraction(sport, 2_000_000) == 1.0

    def test_baseball_regulation(self):
        # 9 innings -> in-game positions 0..71, spread over 73 steps
        assert timeline_fraction(Sport.MLB, 0) == pytest.approx(1 / 73)
        assert timeline_fraction(Sport.MLB, 71) == pytest.approx(72 / 73)

    def test_football_regulation(self):
        # 4 quarters -> in-game positions 0..3603
        assert timeline_fraction(Sport.NFL, 1801) == pytest.approx(1802 / 3605)

    def test_extra_periods_pin_below_final(self):
        assert timeline_fraction(Sport.MLB, 90) == timeline_fraction(Sport.MLB, 71)
        assert timeline_fraction(Sport.NFL, 4000) < 1.0

    def test_max_period_stretches_timeline(self):
        nine = timeline_fraction(Sport.MLB, 40)
        twelve = timeline_fraction(Sport.MLB, 40, max_period=12)
        assert twelve < nine

    def test_is_monotonic(self):
        fractions = [timeline_fraction(Sport.MLB, pos) for pos in range(-1, 80)]
        assert fractions == sorted(fractions)

    def test_rejects_empty_timeline(self):
        with pytest.raises(ValueError, match="max_period"):
            timeline_fraction(Sport.NFL, 10, max_period=0)


class TestMessageMarkers:
    def test_input_order(self):
        markers = message_markers(Sport.MLB, [71, -1, 0])
        assert markers == [timeline_fraction(Sport.MLB, p) for p in (71, -1, 0)]
        assert markers[1] == 0.0
