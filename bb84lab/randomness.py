from __future__ import annotations

from typing import List, Union

from numpy.random import Generator, default_rng

RECTILINEAR = "+"
DIAGONAL = "x"
BASES = (RECTILINEAR, DIAGONAL)


class RandomSource:
    """Uniform draws of bits, bases and index samples.

    Wraps a numpy ``Generator``. Pass a seed or an existing generator to make a
    run reproducible; subclasses may override individual draws in tests.
    """

    def __init__(self, seed: Union[int, Generator, None] = None):
        if isinstance(seed, Generator):
            self._rng = seed
        else:
            self._rng = default_rng(seed)

    def bit(self) -> int:
        return int(self._rng.integers(0, 2))

    def basis(self) -> str:
        return DIAGONAL if self._rng.random() < 0.5 else RECTILINEAR

    def bits(self, n: int) -> List[int]:
        return [self.bit() for _ in range(n)]

    def bases(self, n: int) -> List[str]:
        return [self.basis() for _ in range(n)]

    def bernoulli(self, probability: float) -> bool:
        return bool(self._rng.random() < probability)

    def sample_indices(self, n: int, fraction: float) -> List[int]:
        if n <= 0:
            return []
        k = reveal_count(n, fraction)
        chosen = self._rng.choice(n, size=k, replace=False)
        return sorted(int(i) for i in chosen)


def reveal_count(n: int, fraction: float) -> int:
    """Number of sifted positions revealed for error estimation."""
    if n <= 0:
        return 0
    return min(n, max(1, int(n * fraction)))
