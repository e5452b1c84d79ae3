"""Open and inspect player sessions"""
import logging
from typing import Callable

from slot_engine.domain.entities.paytable import Paytable
from slot_engine.domain.services.spin_engine import SpinEngine
from slot_engine.application.dto.session_response import SessionResponse
from slot_engine.application.ports.random_source_port import RandomSourcePort
from slot_engine.application.ports.session_repository_port import SessionRepositoryPort
from slot_engine.metrics import BusinessMetrics

logger = logging.getLogger(__name__)


class OpenSessionUseCase:
    """Use case for starting a new session with a fresh engine"""

    def __init__(
        self,
        session_repository: SessionRepositoryPort,
        paytable: Paytable,
        random_source_factory: Callable[[], RandomSourcePort],
        reel_count: int = 3,
        initial_credits: int = 100,
        opening_bet: int = 1
    ):
        self.session_repository = session_repository
        self.paytable = paytable
        self.random_source_factory = random_source_factory
        self.reel_count = reel_count
        self.initial_credits = initial_credits
        self.opening_bet = opening_bet

    def execute(self) -> SessionResponse:
        """Create an engine and register it as a new session"""
        engine = SpinEngine(
            reel_count=self.reel_count,
            paytable=self.paytable,
            rng=self.random_source_factory(),
            initial_credits=self.initial_credits
        )
        engine.set_bet(self.opening_bet)

        session_id = self.session_repository.add(engine)
        BusinessMetrics.set_active_sessions(self.session_repository.count())
        logger.info(f"Opened session {session_id} with {engine.credits} credits")

        return SessionResponse.from_engine(session_id, engine)


class GetSessionUseCase:
    """Use case for reading a session's current state"""

    def __init__(self, session_repository: SessionRepositoryPort):
        self.session_repository = session_repository

    def execute(self, session_id: str) -> SessionResponse:
        engine = self.session_repository.get(session_id)
        return SessionResponse.from_engine(session_id, engine)


class CloseSessionUseCase:
    """Use case for discarding a session and its credits"""

    def __init__(self, session_repository: SessionRepositoryPort):
        self.session_repository = session_repository

    def execute(self, session_id: str) -> None:
        self.session_repository.get(session_id)
        self.session_repository.remove(session_id)
        BusinessMetrics.set_active_sessions(self.session_repository.count())
