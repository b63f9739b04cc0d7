from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import DegenerateSiftError
from .randomness import RandomSource
from .sifting import SiftedSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QberEstimate:
    revealed_indices: Tuple[int, ...]
    mismatch_count: int
    qber: float

    @property
    def sample_size(self) -> int:
        return len(self.revealed_indices)


def score_sample(sifted: SiftedSet, revealed_indices: Sequence[int]) -> QberEstimate:
    """Error rate over the given revealed positions of the sifted set."""
    errors = set(sifted.mismatches())
    mismatches = sum(1 for pos in revealed_indices if pos in errors)
    qber = mismatches / len(revealed_indices) if revealed_indices else 0.0
    return QberEstimate(revealed_indices=tuple(revealed_indices), mismatch_count=mismatches, qber=qber)


def estimate_qber(
    sifted: SiftedSet,
    reveal_fraction: float,
    source: RandomSource,
    strict: bool = False,
) -> QberEstimate:
    """Publicly compare a random sample of the sifted bits.

    An empty sift has nothing to compare: the estimate is 0 with no revealed
    positions, unless ``strict`` asks for a ``DegenerateSiftError`` instead.
    """
    if len(sifted) == 0:
        if strict:
            raise DegenerateSiftError("No sifted bits available for error estimation")
        logger.debug("Empty sift, QBER defaults to 0")
        return QberEstimate(revealed_indices=(), mismatch_count=0, qber=0.0)

    estimate = score_sample(sifted, source.sample_indices(len(sifted), reveal_fraction))
    logger.debug(
        "Revealed %d of %d sifted bits, %d mismatched", estimate.sample_size, len(sifted), estimate.mismatch_count
    )
    return estimate
