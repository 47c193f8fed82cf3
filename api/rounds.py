"""
Round API Endpoints

重點：
1. 開新回合 = 前端的「New Question」按鈕
2. adjust = 算盤棒旁邊的 + / - 按鈕，每按一下呼叫一次
3. 所有規則集中在 RoundController，這裡只做轉換和錯誤對應
"""
from fastapi import APIRouter, Depends, HTTPException
from uuid import UUID
import logging

from schemas import AdjustSubmit, AdjustResponse, RoundStartResponse
from core.game_manager import GameManager, get_game_manager
from core.exceptions import GameNotFound, RoundNotStarted
from services.status_service import format_number
from api.games import build_state_response

router = APIRouter(prefix="/api/games", tags=["rounds"])
logger = logging.getLogger(__name__)


@router.post("/{game_id}/rounds", response_model=RoundStartResponse)
def start_round(game_id: UUID, manager: GameManager = Depends(get_game_manager)):
    """
    開始新回合

    流程：
    1. 抽新的目標數字
    2. 算盤全部歸零

    注意：
        目前回合沒答對也可以開新回合（前端自行決定何時開放按鈕）
    """
    try:
        started, snapshot = manager.start_round(game_id)

        return RoundStartResponse(
            game_id=game_id,
            round_number=snapshot.round_number,
            target=started.target,
            display_target=format_number(started.target)
        )

    except GameNotFound:
        raise HTTPException(status_code=404, detail="Game not found")
    except Exception as e:
        logger.error(f"Failed to start round: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/{game_id}/adjust", response_model=AdjustResponse)
def adjust_rod(
    game_id: UUID,
    adjust_data: AdjustSubmit,
    manager: GameManager = Depends(get_game_manager)
):
    """
    調整一根算盤棒

    **不合法的調整不會報錯**：
    - rod_index 超出範圍 → 狀態不變
    - 已經答對 → 狀態不變（要開新回合）

    參數：
        game_id: 遊戲 UUID
        adjust_data: rod_index 與 direction（inc / dec）

    返回：
        - digits, value, solved：調整後的結果
        - state：完整狀態（含狀態文字）
    """
    try:
        logger.debug(
            f"Adjusting rod {adjust_data.rod_index} ({adjust_data.direction.value}) in game {game_id}"
        )
        result, snapshot = manager.adjust(game_id, adjust_data.rod_index, adjust_data.direction)
        state = build_state_response(game_id, snapshot)

        return AdjustResponse(
            digits=result.digits,
            value=result.value,
            solved=result.solved,
            state=state
        )

    except GameNotFound:
        raise HTTPException(status_code=404, detail="Game not found")
    except RoundNotStarted as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to adjust rod: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
