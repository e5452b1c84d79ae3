"""Spin outcome entity"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from slot_engine.domain.entities.symbol import Symbol


@dataclass(frozen=True)
class SpinOutcome:
    """Result of one spin attempt.

    ``drawn_symbols`` is None when the spin was declined (bet not covered).
    """

    drawn_symbols: Optional[Tuple[Symbol, ...]]
    amount_won: int
    credits_after: int

    @classmethod
    def declined(cls, credits: int) -> 'SpinOutcome':
        return cls(drawn_symbols=None, amount_won=0, credits_after=credits)

    @property
    def spun(self) -> bool:
        """Whether reels were actually drawn"""
        return self.drawn_symbols is not None

    @property
    def win(self) -> bool:
        return self.amount_won > 0

    @property
    def tokens(self) -> List[str]:
        if self.drawn_symbols is None:
            return []
        return [symbol.token for symbol in self.drawn_symbols]
