"""Prometheus business metrics for the slot engine"""
import logging
from prometheus_client import Counter, Gauge

from slot_engine.domain.entities.spin_outcome import SpinOutcome

logger = logging.getLogger(__name__)

SPINS = Counter(
    'slot_spins_total',
    'Spin attempts by result',
    ['result']
)
CREDITS_WAGERED = Counter(
    'slot_credits_wagered_total',
    'Credits deducted as bets'
)
CREDITS_PAID = Counter(
    'slot_credits_paid_total',
    'Credits paid out on winning lines'
)
BET_ADJUSTMENTS = Counter(
    'slot_bet_adjustments_total',
    'Bet adjustment requests by result',
    ['result']
)
ACTIVE_SESSIONS = Gauge(
    'slot_active_sessions',
    'Open player sessions'
)


class BusinessMetrics:
    """Records game events on the process-wide Prometheus registry"""

    WIN = "win"
    LOSS = "loss"
    DECLINED = "declined"

    @staticmethod
    def result_label(outcome: SpinOutcome) -> str:
        if not outcome.spun:
            return BusinessMetrics.DECLINED
        return BusinessMetrics.WIN if outcome.win else BusinessMetrics.LOSS

    @classmethod
    def track_spin(cls, outcome: SpinOutcome, bet: int) -> None:
        SPINS.labels(result=cls.result_label(outcome)).inc()
        if outcome.spun:
            CREDITS_WAGERED.inc(bet)
            CREDITS_PAID.inc(outcome.amount_won)

    @staticmethod
    def track_bet_adjustment(changed: bool) -> None:
        BET_ADJUSTMENTS.labels(result="applied" if changed else "ignored").inc()

    @staticmethod
    def set_active_sessions(count: int) -> None:
        ACTIVE_SESSIONS.set(count)
