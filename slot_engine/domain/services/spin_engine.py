"""Spin engine: bet, credits and reel resolution for one player session"""
import logging
from typing import Optional, Sequence

from slot_engine.domain.entities.paytable import Paytable
from slot_engine.domain.entities.spin_outcome import SpinOutcome
from slot_engine.domain.entities.symbol import Symbol

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_CREDITS = 100


class SpinEngine:
    """Holds one session's bet and credit balance and resolves spins.

    ``rng`` is the uniform source used for every reel draw; inject a seeded
    or scripted source for reproducible play.
    """

    def __init__(
        self,
        reel_count: int,
        paytable: Paytable,
        rng,
        initial_credits: int = DEFAULT_INITIAL_CREDITS
    ):
        if reel_count < 1:
            raise ValueError(f"reel_count must be positive, got {reel_count}")
        self.reel_count = reel_count
        self.paytable = paytable
        self.rng = rng
        self._credits = initial_credits
        self._bet = 0

    @property
    def credits(self) -> int:
        return self._credits

    @property
    def bet(self) -> int:
        return self._bet

    def set_bet(self, amount: int) -> None:
        """Store a bet as-is; an out-of-range bet only disables spinning"""
        self._bet = amount

    def can_spin(self) -> bool:
        return self._credits >= self._bet and self._bet > 0

    def adjust_bet(self, delta: int, base: Optional[int] = None) -> bool:
        """Move the bet by ``delta`` if the result stays within [1, credits].

        ``base`` replaces the stored bet as the starting point. Returns True
        when the bet changed; out-of-range adjustments are ignored.
        """
        start = self._bet if base is None else base
        proposed = start + delta
        if 0 < proposed <= self._credits:
            self._bet = proposed
            return True
        logger.debug(f"Ignored bet adjustment to {proposed} (credits={self._credits})")
        return False

    def spin(self) -> SpinOutcome:
        """Deduct the bet, draw one symbol per reel and pay a full line"""
        if not self.can_spin():
            return SpinOutcome.declined(self._credits)

        bet = self._bet
        self._credits -= bet

        drawn = tuple(self.paytable.draw(self.rng) for _ in range(self.reel_count))
        amount_won = self.calculate_win_amount(drawn, bet)
        self._credits += amount_won

        return SpinOutcome(
            drawn_symbols=drawn,
            amount_won=amount_won,
            credits_after=self._credits
        )

    @staticmethod
    def calculate_win_amount(symbols: Sequence[Symbol], bet: int) -> int:
        """Pay multiplier * bet when every reel shows the same token"""
        first = symbols[0].token
        if all(symbol.token == first for symbol in symbols):
            return symbols[0].multiplier * bet
        return 0
