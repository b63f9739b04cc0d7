from __future__ import annotations

from typing import Iterable, List

from .sifting import SiftedSet


def derive_key(sifted: SiftedSet, revealed_indices: Iterable[int]) -> List[int]:
    """Alice's sifted bits at every position that was not disclosed."""
    revealed = set(revealed_indices)
    if any(pos < 0 or pos >= len(sifted) for pos in revealed):
        raise ValueError("Revealed index outside the sifted set")
    return [bit for pos, bit in enumerate(sifted.alice_bits) if pos not in revealed]
