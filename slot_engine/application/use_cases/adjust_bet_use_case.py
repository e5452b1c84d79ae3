"""Adjust bet use case"""
import logging

from slot_engine.application.dto.bet_request import BetRequest
from slot_engine.application.dto.bet_response import BetResponse
from slot_engine.application.ports.session_repository_port import SessionRepositoryPort
from slot_engine.metrics import BusinessMetrics

logger = logging.getLogger(__name__)


class AdjustBetUseCase:
    """Use case for raising or lowering a session's bet by a step"""

    def __init__(self, session_repository: SessionRepositoryPort):
        self.session_repository = session_repository

    def execute(self, request: BetRequest) -> BetResponse:
        engine = self.session_repository.get(request.session_id)
        changed = engine.adjust_bet(request.adjustment, base=request.base)
        BusinessMetrics.track_bet_adjustment(changed)

        if changed:
            logger.info(f"Session {request.session_id} bet set to {engine.bet}")

        return BetResponse(
            bet=engine.bet,
            credits=engine.credits,
            changed=changed,
            can_spin=engine.can_spin()
        )
