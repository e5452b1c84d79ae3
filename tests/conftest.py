import pytest

from slot_engine.domain.entities.paytable import Paytable
from slot_engine.infrastructure.persistence.in_memory_session_repository import InMemorySessionRepository


class ScriptedRandom:
    """Random source that replays fixed reel indices, then repeats the last one"""

    def __init__(self, indices):
        self.indices = list(indices)
        self.calls = []

    def randrange(self, n):
        value = self.indices.pop(0) if len(self.indices) > 1 else self.indices[0]
        assert 0 <= value < n
        self.calls.append(n)
        return value


@pytest.fixture
def paytable():
    return Paytable.classic()


@pytest.fixture
def session_repository():
    return InMemorySessionRepository()
