"""
Game API Endpoints

職責：
1. 建立遊戲（同時開始第一回合）
2. 查詢遊戲狀態（前端初次載入或重新整理時使用）
3. 結束遊戲
"""
from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
from uuid import UUID
import logging

from schemas import GameCreate, GameStateResponse, GameEndResponse
from core.game_manager import GameManager, get_game_manager
from core.round_controller import GameSnapshot
from core.exceptions import GameNotFound, InvalidConfiguration, TooManyGames
from services.status_service import build_status_hints, format_number

router = APIRouter(prefix="/api/games", tags=["games"])
logger = logging.getLogger(__name__)


def build_state_response(game_id: UUID, snapshot: GameSnapshot) -> GameStateResponse:
    """
    把 RoundController 的快照轉成 API response

    只讀 snapshot，不碰 controller：同一個 response 的欄位一定來自同一次持鎖

    除了核心狀態外，還附上前端直接顯示的文字：
    - display_value / display_target：千分位格式（12,345）
    - status_message / next_enabled / next_label：狀態列與「下一題」按鈕
    """
    hints = build_status_hints(snapshot.status, snapshot.touched)

    return GameStateResponse(
        game_id=game_id,
        digit_count=snapshot.digit_count,
        overflow_policy=snapshot.overflow_policy,
        round_number=snapshot.round_number,
        status=snapshot.status,
        digits=snapshot.digits,
        value=snapshot.value,
        target=snapshot.target,
        solved=snapshot.solved,
        display_value=format_number(snapshot.value),
        display_target=format_number(snapshot.target),
        **hints
    )


@router.post("", response_model=GameStateResponse)
def create_game(
    game_data: Optional[GameCreate] = None,
    manager: GameManager = Depends(get_game_manager)
):
    """
    建立新遊戲

    流程：
    1. 依參數（或設定預設值）建立 RoundController
    2. 抽出第一回合的目標
    3. 返回完整狀態

    參數：
        digit_count: 算盤棒數量（選填）
        overflow_policy: wrap / clamp（選填）
        seed: 亂數種子（選填，用於可重現的題目）
    """
    game_data = game_data or GameCreate()

    try:
        game_id, snapshot = manager.create_game(
            digit_count=game_data.digit_count,
            overflow_policy=game_data.overflow_policy,
            seed=game_data.seed
        )
        return build_state_response(game_id, snapshot)

    except InvalidConfiguration as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TooManyGames as e:
        raise HTTPException(status_code=429, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to create game: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/{game_id}", response_model=GameStateResponse)
def get_game_state(game_id: UUID, manager: GameManager = Depends(get_game_manager)):
    """
    取得遊戲目前狀態（唯讀）

    返回：
        digits, value, target, solved 以及前端顯示用的文字
    """
    try:
        return build_state_response(game_id, manager.get_state(game_id))

    except GameNotFound:
        raise HTTPException(status_code=404, detail="Game not found")
    except Exception as e:
        logger.error(f"Failed to get game state: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.delete("/{game_id}", response_model=GameEndResponse)
def end_game(game_id: UUID, manager: GameManager = Depends(get_game_manager)):
    """結束遊戲，釋放記憶體"""
    try:
        manager.end_game(game_id)
        return GameEndResponse(status="ok")

    except GameNotFound:
        raise HTTPException(status_code=404, detail="Game not found")
    except Exception as e:
        logger.error(f"Failed to end game: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
