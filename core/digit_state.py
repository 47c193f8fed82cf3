"""
DigitState：算盤棒的數字狀態

職責：
1. 保存 N 根算盤棒的珠子數（index 0 = 最高位，index N-1 = 個位）
2. 加一（含進位）、減一（不借位）
3. 由珠子數算出目前的整數值

規則：
- 加一會進位：某根超過 9 就歸零，往左一根再加一
- 減一不借位：0 再減還是 0，不會影響左邊
- 最左邊那根滿了怎麼辦由 OverflowPolicy 決定（WRAP / CLAMP）
"""
from typing import List

from models import OverflowPolicy
from core.exceptions import InvalidConfiguration

MAX_DIGIT = 9


class DigitState:
    """算盤棒狀態（每個回合一個新的 instance）"""

    def __init__(self, digit_count: int, overflow_policy: OverflowPolicy = OverflowPolicy.WRAP):
        if not isinstance(digit_count, int) or digit_count <= 0:
            raise InvalidConfiguration(
                f"Digit count must be a positive integer, got {digit_count!r}"
            )
        try:
            overflow_policy = OverflowPolicy(overflow_policy)
        except ValueError:
            raise InvalidConfiguration(f"Unknown overflow policy: {overflow_policy!r}")

        self.digit_count = digit_count
        self.overflow_policy = overflow_policy
        self._digits = [0] * digit_count

    def __len__(self) -> int:
        return self.digit_count

    def __repr__(self) -> str:
        return f"DigitState(digits={self._digits}, policy={self.overflow_policy.value})"

    @property
    def digits(self) -> List[int]:
        """目前的珠子數（複本，修改它不會影響狀態）"""
        return list(self._digits)

    def in_range(self, index) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < self.digit_count

    def increment(self, index: int) -> None:
        """
        在第 index 根加一顆珠子

        流程：
        1. 從 index 開始往左走
        2. 沒超過 9 就停
        3. 超過 9 → 歸零，進位到左邊一根
        4. 走到最左邊時依 overflow_policy 決定：
           - WRAP：9 → 0，進位丟掉
           - CLAMP：已經是 9 就不動，進位被吃掉

        範例（N=5, WRAP）：
            [0, 0, 0, 0, 9] increment(4) -> [0, 0, 0, 1, 0]
            [9, 9, 9, 9, 9] increment(4) -> [0, 0, 0, 0, 0]

        範例（N=5, CLAMP）：
            [9, 0, 0, 0, 0] increment(0) -> [9, 0, 0, 0, 0]
            [9, 9, 9, 9, 9] increment(4) -> [9, 0, 0, 0, 0]

        注意：
            index 超出範圍時什麼都不做（呼叫者負責驗證）
        """
        if not self.in_range(index):
            return

        while index >= 0:
            if index == 0 and self.overflow_policy == OverflowPolicy.CLAMP:
                if self._digits[0] < MAX_DIGIT:
                    self._digits[0] += 1
                return

            if self._digits[index] < MAX_DIGIT:
                self._digits[index] += 1
                return

            # 溢位：歸零並往左進位（index 0 溢位時迴圈結束，進位丟掉）
            self._digits[index] = 0
            index -= 1

    def decrement(self, index: int) -> None:
        """第 index 根拿掉一顆珠子；已經是 0 就不動（不借位）"""
        if not self.in_range(index):
            return

        if self._digits[index] > 0:
            self._digits[index] -= 1

    def value(self) -> int:
        """
        把珠子數組成整數

        範例：
            [0, 1, 0, 5, 2, 0] -> 10520
        """
        total = 0
        for digit in self._digits:
            total = total * 10 + digit
        return total
