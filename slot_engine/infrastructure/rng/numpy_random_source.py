"""NumPy PCG64 random source"""
from typing import Optional
import numpy as np

from slot_engine.application.ports.random_source_port import RandomSourcePort


class NumpyRandomSource(RandomSourcePort):
    """numpy Generator implementation of the random source"""

    def __init__(self, seed: Optional[int] = None):
        self.generator = np.random.default_rng(seed)

    def randrange(self, n: int) -> int:
        if n < 1:
            raise ValueError(f"empty range for randrange({n})")
        return int(self.generator.integers(n))
