from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class SiftedSet:
    indices: Tuple[int, ...] = ()
    alice_bits: Tuple[int, ...] = ()
    bob_bits: Tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.indices)

    def mismatches(self) -> List[int]:
        """Local positions where Bob's result disagrees with Alice's bit."""
        return [pos for pos, (a, b) in enumerate(zip(self.alice_bits, self.bob_bits)) if a != b]


def sift(
    alice_bases: Sequence[str],
    bob_bases: Sequence[str],
    alice_bits: Sequence[int],
    bob_results: Sequence[int],
) -> SiftedSet:
    lengths = {len(alice_bases), len(bob_bases), len(alice_bits), len(bob_results)}
    if len(lengths) != 1:
        raise ValueError("Photon sequences must all have the same length")

    indices = [idx for idx, (a, b) in enumerate(zip(alice_bases, bob_bases)) if a == b]
    return SiftedSet(
        indices=tuple(indices),
        alice_bits=tuple(alice_bits[idx] for idx in indices),
        bob_bits=tuple(bob_results[idx] for idx in indices),
    )
