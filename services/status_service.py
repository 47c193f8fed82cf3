"""
Status hint service.

Derives the texts the frontend shows next to the abacus (status line,
"next question" button) from a game snapshot, so every client renders
the same wording without duplicating the win logic.
"""
from typing import Any, Dict

from models import RoundStatus

START_MESSAGE = "Start adding beads..."
PROGRESS_MESSAGE = "Keep adjusting the beads..."
SOLVED_MESSAGE = "You matched the number!"

NEXT_LABEL_LOCKED = "Solve to Continue"
NEXT_LABEL_READY = "New Question"


def format_number(value) -> str:
    """Thousands-separated display string, e.g. 12345 -> '12,345'."""
    if value is None:
        return ""
    return f"{value:,}"


def build_status_hints(status: RoundStatus, touched: bool) -> Dict[str, Any]:
    """
    Return status_message / next_enabled / next_label for a round.

    `touched` is False right after a round starts (nothing adjusted yet),
    which is the only time the "start" wording is shown.
    """
    if status == RoundStatus.SOLVED:
        return {
            "status_message": SOLVED_MESSAGE,
            "next_enabled": True,
            "next_label": NEXT_LABEL_READY,
        }

    return {
        "status_message": PROGRESS_MESSAGE if touched else START_MESSAGE,
        "next_enabled": False,
        "next_label": NEXT_LABEL_LOCKED,
    }
