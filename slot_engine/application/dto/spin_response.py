"""Spin response DTO"""
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class SpinResponse:
    """Response DTO for a spin"""

    spun: bool
    symbols: List[str]
    win: bool
    amount_won: int
    credits_after: int
    bet: int
    error: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to snake_case dictionary (REST API)"""
        result = {
            "spun": self.spun,
            "symbols": self.symbols if self.spun else None,
            "win": self.win,
            "amount_won": self.amount_won,
            "credits_after": self.credits_after,
            "bet": self.bet
        }
        if self.error:
            result["error"] = self.error
        return result
