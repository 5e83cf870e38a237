"""Tests for watchlock.messages."""

import pytest

from watchlock.config import get_settings
from watchlock.messages import InvalidMessageError, prepare_message, validate_body
from watchlock.positions.types import InvalidPositionError, Sport

TOP_FIRST_END = {"sport": "mlb", "inning": 1, "half": "TOP", "outs": "END"}


class TestValidateBody:
    def test_trims(self):
        assert validate_body("  what a catch  ", 280) == "what a catch"

    @pytest.mark.parametrize("body", [None, "", "   \n\t"])
    def test_required(self, body):
        with pytest.raises(InvalidMessageError, match="Message body is required"):
            validate_body(body, 280)

    def test_length_counts_trimmed_body(self):
        assert validate_body(" " + "x" * 10 + " ", 10) == "x" * 10
        with pytest.raises(InvalidMessageError, match=r"Message too long \(max 10 characters\)"):
            validate_body("x" * 11, 10)


class TestPrepareMessage:
    """Tests for prepare_message."""

    def test_computes_position_server_side(self):
        prepared = prepare_message("Homer!", TOP_FIRST_END, get_settings())
        assert prepared.body == "Homer!"
        assert prepared.sport is Sport.MLB
        assert prepared.pos == 3
        assert prepared.position_meta == {
            "sport": "mlb",
            "inning": 1,
            "half": "TOP",
            "outs": "END",
            "phase": "IN_GAME",
        }

    def test_ignores_client_supplied_integer(self):
        payload = {**TOP_FIRST_END, "pos": 999}
        assert prepare_message("hi", payload, get_settings()).pos == 3

    def test_football(self):
        payload = {"sport": "nfl", "quarter": 2, "time": "15:00", "possession": "away"}
        prepared = prepare_message("kickoff", payload, get_settings())
        assert prepared.sport is Sport.NFL
        assert prepared.pos == 901

    def test_uses_configured_max_length(self):
        settings = get_settings().model_copy(update={"message_max_length": 5})
        with pytest.raises(InvalidMessageError):
            prepare_message("too long", TOP_FIRST_END, settings)

    def test_invalid_position(self):
        with pytest.raises(InvalidPositionError):
            prepare_message("hi", {"sport": "mlb", "inning": 1, "half": "TOP", "outs": 5}, get_settings())

    def test_body_checked_before_position(self):
        with pytest.raises(InvalidMessageError):
            prepare_message("", {"sport": "nba"}, get_settings())
