from __future__ import annotations

from enum import Enum
from fractions import Fraction


class Decision(str, Enum):
    ACCEPT = "accept"
    ABORT = "abort"


def decide(qber_percent: float, threshold_percent: float) -> Decision:
    if qber_percent <= threshold_percent:
        return Decision.ACCEPT
    return Decision.ABORT


def decide_sample(mismatch_count: int, sample_size: int, threshold_percent: float) -> Decision:
    """Same rule as ``decide`` on the exact ratio ``mismatch_count / sample_size``.

    The threshold is read as the decimal it prints as, so a QBER of exactly 7%
    against a 7% threshold accepts. An empty sample accepts.
    """
    if sample_size == 0:
        return Decision.ACCEPT
    observed = Fraction(mismatch_count * 100, sample_size)
    if observed <= Fraction(str(float(threshold_percent))):
        return Decision.ACCEPT
    return Decision.ABORT
