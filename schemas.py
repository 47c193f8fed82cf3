"""
API request / response schemas（Pydantic）
"""
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from models import Direction, OverflowPolicy, RoundStatus


# ============ Requests ============

class GameCreate(BaseModel):
    digit_count: Optional[int] = Field(None, ge=1, le=18, description="算盤棒數量，預設用設定值")
    overflow_policy: Optional[OverflowPolicy] = None
    seed: Optional[int] = None


class AdjustSubmit(BaseModel):
    # 索引不在這裡限制範圍：超出範圍由核心當作 no-op
    rod_index: int
    direction: Direction


# ============ Responses ============

class GameStateResponse(BaseModel):
    game_id: UUID
    digit_count: int
    overflow_policy: OverflowPolicy
    round_number: int
    status: RoundStatus
    digits: List[int]
    value: int
    target: int
    solved: bool
    display_value: str
    display_target: str
    status_message: str
    next_enabled: bool
    next_label: str


class RoundStartResponse(BaseModel):
    game_id: UUID
    round_number: int
    target: int
    display_target: str


class AdjustResponse(BaseModel):
    digits: List[int]
    value: int
    solved: bool
    state: GameStateResponse


class GameEndResponse(BaseModel):
    status: str
