"""Bet adjustment response DTO"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class BetResponse:
    """Response DTO for a bet adjustment"""

    bet: int
    credits: int
    changed: bool
    can_spin: bool
    error: Optional[str] = None

    def to_dict(self) -> dict:
        result = {
            "bet": self.bet,
            "credits": self.credits,
            "changed": self.changed,
            "can_spin": self.can_spin
        }
        if self.error:
            result["error"] = self.error
        return result
