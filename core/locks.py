"""
並發控制工具

FastAPI 的同步 endpoint 跑在 thread pool 裡，同一個遊戲可能同時收到兩個請求
這裡提供 per-game 的鎖，確保 start_round / adjust 對同一個遊戲是原子操作

RoundController 本身不處理並發（一個 controller 一次只會被一個請求使用）
"""
import threading
from contextlib import contextmanager
from typing import Dict, Iterator
from uuid import UUID

from core.exceptions import GameNotFound


class GameLockRegistry:
    """
    每個遊戲一把鎖

    使用場景：
    - 修改遊戲狀態時（開新回合、調整算盤棒）
    - 讀取快照時（避免讀到調整到一半的狀態）
    - 結束遊戲時（等進行中的請求做完才移除）

    範例：
        locks.register(game_id)
        with locks.with_game_lock(game_id):
            controller.adjust(rod_index, direction)

    注意：
        鎖只在 register 時建立；查不到的遊戲一律 GameNotFound，
        不會替已經結束的遊戲補建新鎖
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[UUID, threading.Lock] = {}

    def register(self, game_id: UUID) -> None:
        """建立遊戲時呼叫，登記它的鎖"""
        with self._guard:
            self._locks.setdefault(game_id, threading.Lock())

    def _get(self, game_id: UUID) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(game_id)
        if lock is None:
            raise GameNotFound(game_id)
        return lock

    @contextmanager
    def with_game_lock(self, game_id: UUID) -> Iterator[None]:
        """
        鎖定一個遊戲

        異常：
            GameNotFound: 遊戲沒有登記過鎖（不存在或已結束）

        注意：
            - 會等待鎖被釋放（不是 nowait）
            - 不可在同一個 thread 內巢狀鎖同一個遊戲（Lock 不可重入）
            - 拿到鎖之後遊戲可能已被結束，呼叫者要再確認一次
        """
        lock = self._get(game_id)
        with lock:
            yield

    def discard(self, game_id: UUID) -> None:
        """
        移除遊戲的鎖

        注意：
            呼叫者應該持有這把鎖，確保沒有請求在中途
        """
        with self._guard:
            self._locks.pop(game_id, None)

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
