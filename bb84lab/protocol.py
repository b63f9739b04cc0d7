from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .channel import ChannelModel
from .config import RunConfig
from .decision import Decision, decide_sample
from .errors import ExportError
from .estimation import estimate_qber, score_sample
from .keys import derive_key
from .measurement import measure
from .randomness import BASES, RandomSource, reveal_count
from .sifting import SiftedSet, sift

logger = logging.getLogger(__name__)

CAUSE_EVE = "eve"
CAUSE_NOISE = "noise"


@dataclass(frozen=True)
class PhotonEvent:
    index: int
    alice_bit: int
    alice_basis: str
    eve_intercepted: bool
    eve_basis: Optional[str]
    eve_bit: Optional[int]
    noise_flipped: bool
    transmitted_bit: int
    bob_basis: str
    bob_result: int
    sifted: bool
    cause: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "alice_bit": self.alice_bit,
            "alice_basis": self.alice_basis,
            "eve_intercepted": self.eve_intercepted,
            "eve_basis": self.eve_basis,
            "eve_bit": self.eve_bit,
            "noise_flipped": self.noise_flipped,
            "transmitted_bit": self.transmitted_bit,
            "bob_basis": self.bob_basis,
            "bob_result": self.bob_result,
            "sifted": self.sifted,
            "cause": self.cause,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "PhotonEvent":
        event = cls(**payload)
        if event.alice_basis not in BASES or event.bob_basis not in BASES:
            raise ExportError(f"Unknown basis in photon {event.index}")
        return event


@dataclass(frozen=True)
class RunResult:
    config: RunConfig
    events: Tuple[PhotonEvent, ...]
    sifted: SiftedSet
    revealed_indices: Tuple[int, ...]
    mismatch_count: int
    qber: float
    final_key: Tuple[int, ...]
    decision: Decision

    @property
    def alice_bits(self) -> List[int]:
        return [event.alice_bit for event in self.events]

    @property
    def alice_bases(self) -> List[str]:
        return [event.alice_basis for event in self.events]

    @property
    def transmitted_bits(self) -> List[int]:
        return [event.transmitted_bit for event in self.events]

    @property
    def bob_bases(self) -> List[str]:
        return [event.bob_basis for event in self.events]

    @property
    def bob_results(self) -> List[int]:
        return [event.bob_result for event in self.events]

    @property
    def sifted_count(self) -> int:
        return len(self.sifted)

    @property
    def qber_percent(self) -> float:
        return self.qber * 100.0

    @property
    def accepted(self) -> bool:
        return self.decision is Decision.ACCEPT

    @property
    def degenerate(self) -> bool:
        return self.sifted_count == 0

    def key_yield(self) -> float:
        if not self.sifted_count:
            return 0.0
        return len(self.final_key) / self.sifted_count

    def detection_probability(self, sample_size: int) -> float:
        """Chance that ``sample_size`` compared bits expose at least one error at the observed QBER."""
        if sample_size <= 0:
            return 0.0
        return 1.0 - (1.0 - self.qber) ** min(sample_size, self.sifted_count)

    def to_dataframe(self) -> "pandas.DataFrame":
        import pandas as pd

        revealed = {self.sifted.indices[pos] for pos in self.revealed_indices}
        rows: List[Dict[str, Any]] = []
        for event in self.events:
            rows.append(
                {
                    "index": event.index,
                    "alice_bit": event.alice_bit,
                    "alice_basis": event.alice_basis,
                    "bob_basis": event.bob_basis,
                    "bob_result": event.bob_result,
                    "sifted": event.sifted,
                    "revealed": event.index in revealed,
                    "in_key": event.sifted and event.index not in revealed,
                    "eve": event.eve_basis if event.eve_intercepted else None,
                    "noise_flipped": event.noise_flipped,
                    "cause": event.cause,
                }
            )
        return pd.DataFrame(rows)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "photons": [event.to_dict() for event in self.events],
            "sifted_count": self.sifted_count,
            "sifted_indices": list(self.sifted.indices),
            "revealed_indices": list(self.revealed_indices),
            "mismatch_count": self.mismatch_count,
            "qber": self.qber,
            "final_key": list(self.final_key),
            "decision": self.decision.value,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "RunResult":
        """Rebuild a run and check every derived field against the photon record."""
        try:
            config = RunConfig(**payload["config"])
            events = tuple(PhotonEvent.from_dict(item) for item in payload["photons"])
            sifted = sift(
                [e.alice_basis for e in events],
                [e.bob_basis for e in events],
                [e.alice_bit for e in events],
                [e.bob_result for e in events],
            )
            revealed = tuple(payload["revealed_indices"])
            final_key = tuple(payload["final_key"])
            expected_key = derive_key(sifted, revealed)
            sifted_count = payload["sifted_count"]
            sifted_indices = list(payload["sifted_indices"])
            result = cls(
                config=config,
                events=events,
                sifted=sifted,
                revealed_indices=revealed,
                mismatch_count=int(payload["mismatch_count"]),
                qber=float(payload["qber"]),
                final_key=final_key,
                decision=Decision(payload["decision"]),
            )
        except ExportError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise ExportError(f"Malformed run payload: {exc}") from exc

        if sifted_count != len(sifted) or sifted_indices != list(sifted.indices):
            raise ExportError("Sifted positions do not match the photon record")
        if list(revealed) != sorted(set(revealed)):
            raise ExportError("Revealed positions must be distinct and sorted")
        if len(revealed) != reveal_count(len(sifted), config.reveal_fraction):
            raise ExportError("Revealed sample size does not match the reveal fraction")
        if list(final_key) != expected_key:
            raise ExportError("Final key does not match the sifted bits and revealed positions")

        estimate = score_sample(sifted, revealed)
        if result.mismatch_count != estimate.mismatch_count or result.qber != estimate.qber:
            raise ExportError("QBER does not match the revealed sample")
        expected_decision = decide_sample(estimate.mismatch_count, estimate.sample_size, config.qber_threshold)
        if result.decision is not expected_decision:
            raise ExportError(f"Decision '{result.decision.value}' does not match the QBER and threshold")
        return result


class BB84Protocol:
    def __init__(self, config: RunConfig, source: Optional[RandomSource] = None):
        self.config = config
        self._source = source if source is not None else RandomSource(config.seed)

    def run(self) -> RunResult:
        config = self.config
        source = self._source
        n = config.num_photons

        alice_bits = source.bits(n)
        alice_bases = source.bases(n)

        channel = ChannelModel.from_config(config, source)
        transmissions = [channel.transmit(alice_bits[idx], alice_bases[idx]) for idx in range(n)]

        bob_bases = source.bases(n)
        bob_results = [
            measure(transmissions[idx].bit, alice_bases[idx], bob_bases[idx], source) for idx in range(n)
        ]

        sifted = sift(alice_bases, bob_bases, alice_bits, bob_results)
        logger.debug("Sifted %d of %d photons", len(sifted), n)

        estimate = estimate_qber(sifted, config.reveal_fraction, source)
        decision = decide_sample(estimate.mismatch_count, estimate.sample_size, config.qber_threshold)
        final_key = derive_key(sifted, estimate.revealed_indices)

        events: List[PhotonEvent] = []
        for idx in range(n):
            transmission = transmissions[idx]
            interception = transmission.interception
            matched = alice_bases[idx] == bob_bases[idx]

            cause: Optional[str] = None
            if matched and bob_results[idx] != alice_bits[idx]:
                if interception is not None and interception.bit != alice_bits[idx]:
                    cause = CAUSE_EVE
                elif transmission.flipped:
                    cause = CAUSE_NOISE

            events.append(
                PhotonEvent(
                    index=idx,
                    alice_bit=alice_bits[idx],
                    alice_basis=alice_bases[idx],
                    eve_intercepted=transmission.intercepted,
                    eve_basis=interception.basis if interception else None,
                    eve_bit=interception.bit if interception else None,
                    noise_flipped=transmission.flipped,
                    transmitted_bit=transmission.bit,
                    bob_basis=bob_bases[idx],
                    bob_result=bob_results[idx],
                    sifted=matched,
                    cause=cause,
                )
            )

        result = RunResult(
            config=config,
            events=tuple(events),
            sifted=sifted,
            revealed_indices=estimate.revealed_indices,
            mismatch_count=estimate.mismatch_count,
            qber=estimate.qber,
            final_key=tuple(final_key),
            decision=decision,
        )

        logger.info(
            "BB84 run: sifted=%d revealed=%d qber=%.4f key=%d decision=%s",
            result.sifted_count,
            len(result.revealed_indices),
            result.qber,
            len(result.final_key),
            decision.value,
        )
        if decision is Decision.ABORT:
            logger.warning(
                "Link aborted: QBER %.1f%% above threshold %.1f%%", result.qber_percent, config.qber_threshold
            )
        return result


def run_bb84(config: RunConfig, source: Optional[RandomSource] = None) -> RunResult:
    return BB84Protocol(config, source).run()
