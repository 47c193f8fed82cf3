"""Tests for core.locks.GameLockRegistry."""

import threading
from uuid import uuid4

import pytest

from core.exceptions import GameNotFound
from core.locks import GameLockRegistry


class TestGameLockRegistry:
    def test_register_is_idempotent(self):
        locks = GameLockRegistry()
        game_id = uuid4()
        locks.register(game_id)
        locks.register(game_id)
        with locks.with_game_lock(game_id):
            pass
        assert len(locks) == 1

    def test_unregistered_game_raises(self):
        locks = GameLockRegistry()
        with pytest.raises(GameNotFound):
            with locks.with_game_lock(uuid4()):
                pass
        assert len(locks) == 0

    def test_discard(self):
        locks = GameLockRegistry()
        game_id = uuid4()
        locks.register(game_id)
        locks.discard(game_id)
        locks.discard(game_id)

        assert len(locks) == 0
        with pytest.raises(GameNotFound):
            with locks.with_game_lock(game_id):
                pass

    def test_serializes_concurrent_updates(self):
        locks = GameLockRegistry()
        game_id = uuid4()
        locks.register(game_id)
        counter = {"value": 0}

        def bump():
            for _ in range(500):
                with locks.with_game_lock(game_id):
                    current = counter["value"]
                    counter["value"] = current + 1

        threads = [threading.Thread(target=bump) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert counter["value"] == 2000
