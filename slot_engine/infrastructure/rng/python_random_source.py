"""Mersenne Twister random source"""
import random
from typing import Optional

from slot_engine.application.ports.random_source_port import RandomSourcePort


class PythonRandomSource(RandomSourcePort):
    """random.Random implementation of the random source"""

    def __init__(self, seed: Optional[int] = None):
        self.generator = random.Random(seed)

    def randrange(self, n: int) -> int:
        return self.generator.randrange(n)
