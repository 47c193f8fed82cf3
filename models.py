"""
遊戲狀態列舉

算盤遊戲不做持久化，這裡只放核心與 API 共用的 enum
"""
import enum


class Direction(str, enum.Enum):
    """算盤棒調整方向"""
    INC = "inc"
    DEC = "dec"


class OverflowPolicy(str, enum.Enum):
    """
    最左邊（最高位）算盤棒滿 9 之後再加一的處理方式

    - WRAP：歸零，進位直接丟掉（等同整個數字對 10^N 取模）
    - CLAMP：停在 9，多出來的加一被吃掉
    """
    WRAP = "wrap"
    CLAMP = "clamp"


class RoundStatus(str, enum.Enum):
    """回合狀態：IN_PROGRESS → SOLVED，只有開新回合才會回到 IN_PROGRESS"""
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
