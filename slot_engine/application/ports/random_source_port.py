"""Random source port (interface)"""
from abc import ABC, abstractmethod


class RandomSourcePort(ABC):
    """Port for the uniform generator behind reel draws"""

    @abstractmethod
    def randrange(self, n: int) -> int:
        """Return a uniformly distributed int in [0, n)"""
        pass
