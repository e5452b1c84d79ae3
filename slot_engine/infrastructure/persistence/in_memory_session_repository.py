"""In-process session repository implementation"""
import uuid
import logging
from typing import Dict

from slot_engine.domain.services.spin_engine import SpinEngine
from slot_engine.application.ports.session_repository_port import (
    SessionNotFoundError,
    SessionRepositoryPort
)

logger = logging.getLogger(__name__)


class InMemorySessionRepository(SessionRepositoryPort):
    """Dictionary-backed sessions; credits are lost when the process exits"""

    def __init__(self):
        self.sessions: Dict[str, SpinEngine] = {}

    def add(self, engine: SpinEngine) -> str:
        session_id = uuid.uuid4().hex
        self.sessions[session_id] = engine
        return session_id

    def get(self, session_id: str) -> SpinEngine:
        engine = self.sessions.get(session_id)
        if engine is None:
            raise SessionNotFoundError(session_id)
        return engine

    def remove(self, session_id: str) -> None:
        if self.sessions.pop(session_id, None) is not None:
            logger.info(f"Closed session {session_id}")

    def count(self) -> int:
        return len(self.sessions)
