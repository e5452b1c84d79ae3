"""View model for the reels, credits label and result message"""
from typing import List, Optional


def result_message(amount_won: int) -> str:
    if amount_won > 0:
        return f"You won {amount_won} credits!"
    return "Try again."


def render_outcome(symbols: Optional[List[str]], amount_won: int, credits: int) -> dict:
    """Build what the player sees after a spin (or on first load).

    ``symbols`` of None leaves the reels as they were.
    """
    return {
        "reels": list(symbols) if symbols else None,
        "credits_label": f"Credits: {credits}",
        "message": result_message(amount_won)
    }
