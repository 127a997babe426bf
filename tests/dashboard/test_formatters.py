"""Tests for shared/formatters.py — pure display helpers."""

from __future__ import annotations

import pytest

from f1grid import FailureKind
from shared.constants import FALLBACK_TEAM_COLOR
from shared.formatters import describe_failure, driver_card, format_number, format_team_color


class TestFormatTeamColor:
    def test_valid_hex(self):
        assert format_team_color("3671C6") == "#3671C6"

    def test_none(self):
        assert format_team_color(None) == FALLBACK_TEAM_COLOR == "#333"

    def test_empty(self):
        assert format_team_color("") == "#333"

    @pytest.mark.parametrize("bad", ["zzzzzz", "#3671C6", "12", "red"])
    def test_invalid(self, bad):
        assert format_team_color(bad) == "#333"


class TestFormatNumber:
    def test_prefix(self):
        assert format_number(44) == "#44"


class TestDriverCard:
    def test_full_record(self, hamilton):
        card = driver_card(hamilton)
        assert card == {
            "key": "44",
            "number_label": "#44",
            "broadcast_name": "L HAMILTON",
            "full_name": "Lewis HAMILTON",
            "team_name": "Mercedes",
            "acronym": "HAM",
            "accent": "#27F4D2",
            "headshot_url": "https://example.com/ham.png",
            "flag_url": "https://flagcdn.com/48x36/gb.png",
        }

    def test_sparse_record(self, rookie):
        card = driver_card(rookie)
        assert card["headshot_url"] is None
        assert card["accent"] == "#333"
        assert card["flag_url"].endswith("/un.png")
        # Falls back to the full name when there is no broadcast name
        assert card["broadcast_name"] == "Test DRIVER"


class TestDescribeFailure:
    def test_network(self):
        text = describe_failure(FailureKind.NETWORK, "HTTP 503: down")
        assert text.startswith("Could not reach")
        assert "HTTP 503" in text

    def test_parse(self):
        text = describe_failure(FailureKind.PARSE, "bad json")
        assert "could not read" in text
