"""
目標服務：產生每回合要湊出的目標數字

純計算邏輯，不涉及狀態轉換
"""
import random


def generate_target(upper_bound: int, rng: random.Random = random) -> int:
    """
    從 [1, upper_bound] 均勻抽出一個整數

    範例：
        upper_bound=99999  → 1 ~ 99,999
        upper_bound=999999 → 1 ~ 999,999

    參數：
        upper_bound: 目標上限（含）
        rng: 亂數來源，任何有 randint 的物件都可以（測試時可注入固定值）

    注意：
    - 不包含 0：全部歸零的算盤不會一開局就答對
    - 不檢查 upper_bound 與算盤棒數量是否一致（由 RoundController 負責）
    """
    return rng.randint(1, upper_bound)
