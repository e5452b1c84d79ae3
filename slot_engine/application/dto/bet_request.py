"""Bet adjustment request DTO"""
from dataclasses import dataclass
from typing import Optional


def parse_bet(text) -> int:
    """Parse player-entered bet text; anything unparseable counts as 0"""
    if isinstance(text, bool):
        return 0
    if isinstance(text, int):
        return text
    try:
        return int(str(text).strip())
    except (TypeError, ValueError):
        return 0


@dataclass
class BetRequest:
    """Request DTO for a bet adjustment.

    ``base`` is the bet currently shown to the player; None means adjust
    from the stored bet.
    """

    session_id: str
    adjustment: int
    base: Optional[int] = None
