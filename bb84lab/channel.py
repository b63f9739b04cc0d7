from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import RunConfig
from .measurement import measure
from .randomness import RandomSource


@dataclass(frozen=True)
class Interception:
    basis: str
    bit: int


@dataclass(frozen=True)
class Transmission:
    bit: int
    interception: Optional[Interception] = None
    flipped: bool = False

    @property
    def intercepted(self) -> bool:
        return self.interception is not None


class Eavesdropper:
    """Intercept-resend attacker acting on a fraction of the photons."""

    def __init__(self, rate: float, source: RandomSource):
        self.rate = rate
        self._source = source

    def attempts(self) -> bool:
        return self._source.bernoulli(self.rate)

    def intercept(self, bit: int, preparation_basis: str) -> Interception:
        basis = self._source.basis()
        measured = measure(bit, preparation_basis, basis, self._source)
        return Interception(basis=basis, bit=measured)


class ChannelModel:
    def __init__(self, source: RandomSource, noise: float = 0.0, eavesdropper: Optional[Eavesdropper] = None):
        self.noise = noise
        self.eavesdropper = eavesdropper
        self._source = source

    @classmethod
    def from_config(cls, config: RunConfig, source: RandomSource) -> "ChannelModel":
        eavesdropper = Eavesdropper(config.eve_rate, source) if config.eve_enabled else None
        return cls(source, noise=config.noise, eavesdropper=eavesdropper)

    def transmit(self, bit: int, basis: str) -> Transmission:
        carried = bit
        interception: Optional[Interception] = None

        if self.eavesdropper is not None and self.eavesdropper.attempts():
            interception = self.eavesdropper.intercept(bit, basis)
            carried = interception.bit

        # noise acts after any interception
        flipped = self._source.bernoulli(self.noise)
        if flipped:
            carried ^= 1

        return Transmission(bit=carried, interception=interception, flipped=flipped)
