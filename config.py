from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List
import logging

from models import OverflowPolicy

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    # 5 根算盤棒 → 目標最大 99,999；6 根 → 999,999
    digit_count: int = 5
    upper_bound: int = 99999
    overflow_policy: OverflowPolicy = OverflowPolicy.WRAP
    max_games: int = 1000
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    @model_validator(mode="after")
    def check_digit_bounds(self) -> "Settings":
        """
        啟動時就檢查棒數與上限是否一致（upper_bound 必須是 10^N - 1）

        設定錯了就讓 app 起不來，而不是每次建立遊戲都回 400
        """
        if self.digit_count <= 0:
            raise ValueError(f"digit_count must be positive, got {self.digit_count}")

        expected_bound = 10 ** self.digit_count - 1
        if self.upper_bound != expected_bound:
            raise ValueError(
                f"upper_bound must be {expected_bound} for {self.digit_count} digits, "
                f"got {self.upper_bound}"
            )
        return self


@lru_cache()
def get_settings():
    return Settings()


def configure_logging(settings: Settings) -> None:
    """
    設定 root logger 等級

    注意：
        - 只在應用啟動時呼叫一次（main.py 的 lifespan）
        - root 已經有 handler 時 basicConfig 不會動，所以等級另外直接設定
        - 等級字串不合法時退回 INFO，並記錄警告
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        logging.basicConfig(level=logging.INFO)
        logging.getLogger().setLevel(logging.INFO)
        logger.warning(f"Unknown log level {settings.log_level!r}, falling back to INFO")
        return

    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)
