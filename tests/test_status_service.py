"""Tests for services.status_service and services.target_service."""

import random

import pytest

from models import RoundStatus
from services.status_service import build_status_hints, format_number
from services.target_service import generate_target


class TestFormatNumber:
    @pytest.mark.parametrize("value, expected", [
        (0, "0"),
        (999, "999"),
        (12345, "12,345"),
        (999999, "999,999"),
    ])
    def test_thousands_separator(self, value, expected):
        assert format_number(value) == expected

    def test_none_is_empty(self):
        assert format_number(None) == ""


class TestStatusHints:
    def test_fresh_round(self):
        hints = build_status_hints(RoundStatus.IN_PROGRESS, touched=False)
        assert hints == {
            "status_message": "Start adding beads...",
            "next_enabled": False,
            "next_label": "Solve to Continue",
        }

    def test_in_progress_after_adjust(self):
        hints = build_status_hints(RoundStatus.IN_PROGRESS, touched=True)
        assert hints["status_message"] == "Keep adjusting the beads..."
        assert hints["next_enabled"] is False

    def test_solved(self):
        hints = build_status_hints(RoundStatus.SOLVED, touched=True)
        assert hints["status_message"] == "You matched the number!"
        assert hints["next_enabled"] is True
        assert hints["next_label"] == "New Question"


class TestGenerateTarget:
    def test_stays_within_bounds(self):
        rng = random.Random(0)
        targets = [generate_target(9, rng) for _ in range(200)]
        assert min(targets) >= 1
        assert max(targets) <= 9
        assert set(targets) == set(range(1, 10))
