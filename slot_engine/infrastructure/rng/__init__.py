"""Random source adapters selected by RNG_BACKEND"""
import itertools
from typing import Callable, Optional

from slot_engine.application.ports.random_source_port import RandomSourcePort
from .numpy_random_source import NumpyRandomSource
from .python_random_source import PythonRandomSource

BACKENDS = {
    'python': PythonRandomSource,
    'numpy': NumpyRandomSource,
}


def make_random_source_factory(
    backend: str = 'python',
    seed: Optional[int] = None
) -> Callable[[], RandomSourcePort]:
    """Build a factory producing one independent source per session.

    With a seed, the n-th session gets ``seed + n`` so a run is reproducible
    while sessions still draw different streams.
    """
    try:
        source_cls = BACKENDS[backend.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown RNG backend {backend!r}, expected one of {sorted(BACKENDS)}"
        ) from None

    if seed is None:
        return source_cls

    counter = itertools.count(seed)
    return lambda: source_cls(next(counter))


__all__ = [
    'BACKENDS',
    'NumpyRandomSource',
    'PythonRandomSource',
    'make_random_source_factory'
]
