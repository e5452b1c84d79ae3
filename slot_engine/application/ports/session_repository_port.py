"""Session repository port (interface)"""
from abc import ABC, abstractmethod

from slot_engine.domain.services.spin_engine import SpinEngine


class SessionNotFoundError(LookupError):
    """Raised when a session id does not match an open session"""

    def __init__(self, session_id: str):
        super().__init__(f"Unknown session: {session_id}")
        self.session_id = session_id


class SessionRepositoryPort(ABC):
    """Port for player session storage"""

    @abstractmethod
    def add(self, engine: SpinEngine) -> str:
        """Store an engine, returns its session id"""
        pass

    @abstractmethod
    def get(self, session_id: str) -> SpinEngine:
        """Get the engine for a session, raises SessionNotFoundError"""
        pass

    @abstractmethod
    def remove(self, session_id: str) -> None:
        """Close a session"""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of open sessions"""
        pass
