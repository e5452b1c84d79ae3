"""Play spin use case"""
import logging
import sentry_sdk
from sentry_sdk import start_span

from slot_engine.application.dto.spin_request import SpinRequest
from slot_engine.application.dto.spin_response import SpinResponse
from slot_engine.application.ports.session_repository_port import SessionRepositoryPort
from slot_engine.metrics import BusinessMetrics

logger = logging.getLogger(__name__)


class PlaySpinUseCase:
    """Use case for resolving one spin of a session's reels"""

    def __init__(self, session_repository: SessionRepositoryPort):
        self.session_repository = session_repository

    def execute(self, request: SpinRequest) -> SpinResponse:
        """Execute a spin; unknown sessions raise SessionNotFoundError"""
        engine = self.session_repository.get(request.session_id)
        bet = engine.bet

        try:
            with start_span(op="game.rng", name="Resolve reels") as span:
                outcome = engine.spin()
                span.set_data("reel_count", engine.reel_count)
                span.set_data("spun", outcome.spun)
        except Exception as e:
            logger.error(f"Spin failed for session {request.session_id}: {e}")
            sentry_sdk.capture_exception(e)
            return SpinResponse(
                spun=False,
                symbols=[],
                win=False,
                amount_won=0,
                credits_after=engine.credits,
                bet=bet,
                error=str(e)
            )

        # The spin is settled here; metrics failures only get logged
        with start_span(op="metrics.track", name="Track spin metrics") as metrics_span:
            try:
                BusinessMetrics.track_spin(outcome, bet)
            except Exception as metrics_error:
                logger.error(f"Failed to track spin metrics: {metrics_error}")
                sentry_sdk.capture_exception(metrics_error)
                metrics_span.set_tag("metrics.tracked", "false")

        if outcome.spun:
            sentry_sdk.set_tag("game.win", str(outcome.win))
            logger.info(
                f"Session {request.session_id} spun {' '.join(outcome.tokens)}: "
                f"bet={bet} won={outcome.amount_won} credits={outcome.credits_after}"
            )
        else:
            logger.info(
                f"Session {request.session_id} spin declined: "
                f"bet={bet} credits={outcome.credits_after}"
            )

        return SpinResponse(
            spun=outcome.spun,
            symbols=outcome.tokens,
            win=outcome.win,
            amount_won=outcome.amount_won,
            credits_after=outcome.credits_after,
            bet=bet
        )
