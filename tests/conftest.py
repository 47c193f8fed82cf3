"""Shared fixtures for the abacus game test suite."""

import pytest
from fastapi.testclient import TestClient

from config import Settings
from core.game_manager import GameManager, get_game_manager
from core.round_controller import RoundController
from models import OverflowPolicy


class FixedRandom:
    """Random source stub: randint returns queued values in order."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self.values.pop(0)


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def controller():
    """5-rod controller (wrap policy) whose first target is 12345."""
    ctrl = RoundController(digit_count=5, upper_bound=99999, rng=FixedRandom(12345, 777))
    ctrl.start_round()
    return ctrl


@pytest.fixture
def test_settings():
    return Settings(
        digit_count=5,
        upper_bound=99999,
        overflow_policy=OverflowPolicy.WRAP,
        max_games=3,
        log_level="DEBUG",
    )


@pytest.fixture
def manager(test_settings):
    return GameManager(test_settings)


@pytest.fixture
def client(manager):
    """TestClient wired to a fresh GameManager."""
    from main import app

    app.dependency_overrides[get_game_manager] = lambda: manager
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
