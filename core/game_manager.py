"""
Game Manager：管理遊戲的完整生命週期

職責：
1. 建立遊戲（並開始第一回合）
2. 開新回合 / 調整算盤棒（轉交給該遊戲的 RoundController）
3. 結束遊戲
4. 查詢遊戲狀態

原則：
- 單一職責：只管「有哪些遊戲」，回合規則交給 RoundController
- 不做持久化：遊戲只存在記憶體裡，重啟就沒了
- 所有狀態變更都在該遊戲的鎖內完成
"""
import random
import threading
import logging
from functools import lru_cache
from contextlib import contextmanager
from typing import Dict, Iterator, Optional, Tuple
from uuid import UUID, uuid4

from config import Settings, get_settings
from models import Direction, OverflowPolicy
from core.locks import GameLockRegistry
from core.round_controller import AdjustResult, GameSnapshot, RoundController, RoundStart
from core.exceptions import GameNotFound, TooManyGames

logger = logging.getLogger(__name__)


class GameManager:
    """遊戲生命週期管理器（記憶體內）"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._games: Dict[UUID, RoundController] = {}
        self._guard = threading.Lock()
        self.locks = GameLockRegistry()

    def create_game(
        self,
        digit_count: Optional[int] = None,
        overflow_policy: Optional[OverflowPolicy] = None,
        seed: Optional[int] = None
    ) -> Tuple[UUID, GameSnapshot]:
        """
        建立新遊戲並開始第一回合

        流程：
        1. 建立 RoundController（會驗證設定）
        2. 開始第一回合並取快照
        3. 檢查遊戲數量上限
        4. 登記到遊戲列表（連同它的鎖）

        參數：
            digit_count: 算盤棒數量（None 用 settings.digit_count）
            overflow_policy: 最左邊算盤棒的溢位規則（None 用 settings）
            seed: 亂數種子，給定時目標數字序列可重現

        返回：
            (game_id, 第一回合的 GameSnapshot) tuple

        異常：
            TooManyGames: 已達 settings.max_games
            InvalidConfiguration: 算盤棒數量或上限不合法
        """
        if digit_count is None:
            digit_count = self.settings.digit_count
            upper_bound = self.settings.upper_bound
        else:
            # 每個遊戲自訂棒數時，上限跟著棒數走
            upper_bound = None

        if overflow_policy is None:
            overflow_policy = self.settings.overflow_policy

        controller = RoundController(
            digit_count=digit_count,
            upper_bound=upper_bound,
            overflow_policy=overflow_policy,
            rng=random.Random(seed)
        )
        controller.start_round()
        # 還沒登記前只有這個 thread 看得到 controller
        snapshot = controller.current_state()

        with self._guard:
            if len(self._games) >= self.settings.max_games:
                raise TooManyGames(self.settings.max_games)
            game_id = uuid4()
            self.locks.register(game_id)
            self._games[game_id] = controller

        logger.info(
            f"Created game {game_id} with {digit_count} rods "
            f"(policy={controller.overflow_policy.value}), target {snapshot.target}"
        )

        return game_id, snapshot

    def get_game(self, game_id: UUID) -> RoundController:
        """
        取得遊戲的 RoundController（不加鎖，只給唯讀的設定欄位用）

        異常：
            GameNotFound: 遊戲不存在
        """
        with self._guard:
            controller = self._games.get(game_id)
        if controller is None:
            raise GameNotFound(game_id)
        return controller

    @contextmanager
    def _locked(self, game_id: UUID) -> Iterator[RoundController]:
        """
        鎖定遊戲並取得它的 controller

        拿到鎖之後再查一次列表：等鎖期間遊戲可能已被 end_game 移除

        異常：
            GameNotFound: 遊戲不存在或已結束
        """
        with self.locks.with_game_lock(game_id):
            with self._guard:
                controller = self._games.get(game_id)
            if controller is None:
                raise GameNotFound(game_id)
            yield controller

    def start_round(self, game_id: UUID) -> Tuple[RoundStart, GameSnapshot]:
        """
        開新回合（前端的「New Question」按鈕）

        返回：
            (RoundStart, 開局後的 GameSnapshot)，兩者來自同一次持鎖

        注意：
            - 不管目前回合有沒有答對都可以開新回合
            - 前端只在答對後才開放按鈕，這裡不強制
        """
        with self._locked(game_id) as controller:
            started = controller.start_round()
            snapshot = controller.current_state()

        logger.info(
            f"Game {game_id} started round {snapshot.round_number} with target {started.target}"
        )
        return started, snapshot

    def adjust(
        self, game_id: UUID, rod_index: int, direction: Direction
    ) -> Tuple[AdjustResult, GameSnapshot]:
        """
        調整算盤棒

        返回：
            (AdjustResult, 調整後的 GameSnapshot)，兩者來自同一次持鎖

        異常：
            GameNotFound: 遊戲不存在
            RoundNotStarted: 遊戲還沒有任何回合（正常流程不會發生）
        """
        with self._locked(game_id) as controller:
            was_solved = controller.solved
            result = controller.adjust(rod_index, direction)
            snapshot = controller.current_state()

        if result.solved and not was_solved:
            logger.info(
                f"Game {game_id} solved round {snapshot.round_number} at {result.value}"
            )
        return result, snapshot

    def get_state(self, game_id: UUID) -> GameSnapshot:
        with self._locked(game_id) as controller:
            return controller.current_state()

    def end_game(self, game_id: UUID) -> None:
        """
        結束遊戲（從列表移除）

        流程：
        1. 取得遊戲的鎖（等進行中的請求做完）
        2. 移除遊戲和它的鎖

        異常：
            GameNotFound: 遊戲不存在
        """
        with self._locked(game_id) as controller:
            with self._guard:
                self._games.pop(game_id, None)
            self.locks.discard(game_id)

        logger.info(f"Game {game_id} ended after {controller.round_number} rounds")

    def game_count(self) -> int:
        with self._guard:
            return len(self._games)


@lru_cache()
def get_game_manager() -> GameManager:
    """
    FastAPI dependency：提供全域唯一的 GameManager

    測試時用 app.dependency_overrides 換成新的 instance
    """
    return GameManager(get_settings())
