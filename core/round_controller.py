"""
RoundController：管理單一遊戲的回合生命週期

職責：
1. 開新回合（抽目標數字、算盤歸零）
2. 接受算盤棒調整，交給 DigitState 計算
3. 每次調整後重新判定是否答對

狀態機（每回合）：
    IN_PROGRESS --(value == target)--> SOLVED
    SOLVED --(start_round)--> IN_PROGRESS

原則：
- 單一職責：只管一個遊戲，不管遊戲列表（那是 GameManager 的事）
- 不合法的輸入一律當作 no-op，不丟例外
- 亂數來源由外部注入，方便測試
"""
import random
import logging
from typing import List, NamedTuple, Optional

from models import Direction, OverflowPolicy, RoundStatus
from core.digit_state import DigitState
from core.exceptions import InvalidConfiguration, RoundNotStarted
from services.target_service import generate_target

logger = logging.getLogger(__name__)


class RoundStart(NamedTuple):
    target: int


class AdjustResult(NamedTuple):
    digits: List[int]
    value: int
    solved: bool


class GameSnapshot(NamedTuple):
    digits: List[int]
    value: int
    target: Optional[int]
    solved: bool
    status: Optional[RoundStatus]
    round_number: int
    touched: bool
    digit_count: int
    overflow_policy: OverflowPolicy


class RoundController:
    """單一遊戲的回合控制器"""

    def __init__(
        self,
        digit_count: int = 5,
        upper_bound: Optional[int] = None,
        overflow_policy: OverflowPolicy = OverflowPolicy.WRAP,
        rng: Optional[random.Random] = None
    ):
        """
        參數：
            digit_count: 算盤棒數量 N
            upper_bound: 目標上限，必須等於 10^N - 1（None 表示自動推算）
            overflow_policy: 最左邊算盤棒的溢位規則
            rng: 預設亂數來源（start_round 沒給時使用）

        異常：
            InvalidConfiguration: N <= 0 或 upper_bound 與 N 不一致
        """
        if not isinstance(digit_count, int) or digit_count <= 0:
            raise InvalidConfiguration(
                f"Digit count must be a positive integer, got {digit_count!r}"
            )

        expected_bound = 10 ** digit_count - 1
        if upper_bound is None:
            upper_bound = expected_bound
        if upper_bound != expected_bound:
            raise InvalidConfiguration(
                f"Upper bound must be {expected_bound} for {digit_count} digits, got {upper_bound}"
            )

        # DigitState 會驗證 overflow_policy
        self.digit_state = DigitState(digit_count, overflow_policy)

        self.digit_count = digit_count
        self.upper_bound = upper_bound
        self.overflow_policy = self.digit_state.overflow_policy
        self.rng = rng if rng is not None else random.Random()

        self.target: Optional[int] = None
        self.solved = False
        self.status: Optional[RoundStatus] = None
        self.round_number = 0
        self.touched = False

    def start_round(self, rng: Optional[random.Random] = None) -> RoundStart:
        """
        開始新回合

        流程：
        1. 從 [1, upper_bound] 均勻抽出目標數字
        2. 換一個全新的 DigitState（全部歸零）
        3. solved 重設為 False

        參數：
            rng: 這回合使用的亂數來源（None 則用建構時給的）

        返回：
            RoundStart(target)

        注意：
            目標 >= 1，所以剛開回合時一定不是 solved
        """
        source = rng if rng is not None else self.rng

        self.target = generate_target(self.upper_bound, source)
        self.digit_state = DigitState(self.digit_count, self.overflow_policy)
        self.solved = False
        self.status = RoundStatus.IN_PROGRESS
        self.round_number += 1
        self.touched = False

        logger.debug(f"Round {self.round_number} started with target {self.target}")

        return RoundStart(target=self.target)

    def adjust(self, rod_index: int, direction: Direction) -> AdjustResult:
        """
        調整一根算盤棒

        規則：
        - rod_index 超出範圍 → no-op
        - direction 不是 INC / DEC → no-op
        - 已經答對（SOLVED）→ no-op，要開新回合才能繼續
        - 其他情況交給 DigitState，然後重新判定 solved

        返回：
            AdjustResult(digits, value, solved)

        異常：
            RoundNotStarted: 還沒呼叫過 start_round
        """
        if self.status is None:
            raise RoundNotStarted("Call start_round before adjusting rods")

        if self.status == RoundStatus.SOLVED:
            logger.debug(f"Ignoring adjust on solved board (rod={rod_index})")
            return self._result()

        # 任何一次按鈕都算「動過」，即使是 no-op
        self.touched = True

        if not self.digit_state.in_range(rod_index):
            logger.debug(f"Ignoring adjust on out-of-range rod {rod_index!r}")
            return self._result()

        if direction == Direction.INC:
            self.digit_state.increment(rod_index)
        elif direction == Direction.DEC:
            self.digit_state.decrement(rod_index)
        else:
            logger.debug(f"Ignoring adjust with unknown direction {direction!r}")
            return self._result()

        self.solved = self.digit_state.value() == self.target
        if self.solved:
            self.status = RoundStatus.SOLVED

        return self._result()

    def current_state(self) -> GameSnapshot:
        """唯讀快照，給 UI 重新渲染用"""
        return GameSnapshot(
            digits=self.digit_state.digits,
            value=self.digit_state.value(),
            target=self.target,
            solved=self.solved,
            status=self.status,
            round_number=self.round_number,
            touched=self.touched,
            digit_count=self.digit_count,
            overflow_policy=self.overflow_policy
        )

    def _result(self) -> AdjustResult:
        return AdjustResult(
            digits=self.digit_state.digits,
            value=self.digit_state.value(),
            solved=self.solved
        )
