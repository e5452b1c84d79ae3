"""Session state response DTO"""
from dataclasses import dataclass

from slot_engine.domain.services.spin_engine import SpinEngine


@dataclass
class SessionResponse:
    """Response DTO describing an open session"""

    session_id: str
    credits: int
    bet: int
    can_spin: bool
    reel_count: int

    @classmethod
    def from_engine(cls, session_id: str, engine: SpinEngine) -> 'SessionResponse':
        return cls(
            session_id=session_id,
            credits=engine.credits,
            bet=engine.bet,
            can_spin=engine.can_spin(),
            reel_count=engine.reel_count
        )

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "credits": self.credits,
            "bet": self.bet,
            "can_spin": self.can_spin,
            "reel_count": self.reel_count
        }
