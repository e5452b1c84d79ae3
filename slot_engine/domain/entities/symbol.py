"""Reel symbol value object"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Symbol:
    """A reel symbol: display token plus payout multiplier.

    Two symbols are the same symbol when their tokens match.
    """

    token: str
    multiplier: int = field(compare=False)

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "token": self.token,
            "multiplier": self.multiplier
        }
