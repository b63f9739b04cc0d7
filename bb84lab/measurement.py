from __future__ import annotations

from .randomness import RandomSource


def measure(bit: int, preparation_basis: str, measurement_basis: str, source: RandomSource) -> int:
    """Outcome of measuring a photon.

    A matching basis recovers the prepared bit; a mismatched one collapses to a
    uniformly random bit.
    """
    if preparation_basis == measurement_basis:
        return bit
    return source.bit()
