"""
自定義異常類別

集中管理所有業務邏輯異常，方便 API 層統一處理

注意：不合法的算盤棒索引和方向不算錯誤（直接當作 no-op），
這裡只有設定錯誤和生命週期錯誤
"""


class AbacusGameException(Exception):
    """所有遊戲異常的基類"""
    pass


# ============ Game 相關異常 ============

class GameNotFound(AbacusGameException):
    """遊戲不存在"""
    def __init__(self, game_id):
        self.game_id = game_id
        super().__init__(f"Game {game_id} not found")


class TooManyGames(AbacusGameException):
    """同時存在的遊戲數量已達上限（settings.max_games）"""
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Cannot create more than {limit} games")


# ============ 設定相關異常 ============

class InvalidConfiguration(AbacusGameException):
    """算盤棒數量或上限不合法（必須 N > 0 且 upper_bound == 10^N - 1）"""
    pass


# ============ Round 相關異常 ============

class RoundNotStarted(AbacusGameException):
    """還沒呼叫 start_round 就嘗試調整算盤棒"""
    pass
