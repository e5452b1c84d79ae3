from .random_source_port import RandomSourcePort
from .session_repository_port import SessionRepositoryPort, SessionNotFoundError

__all__ = [
    'RandomSourcePort',
    'SessionRepositoryPort',
    'SessionNotFoundError'
]
