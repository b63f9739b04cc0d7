from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Dict, Optional

from .errors import ConfigError


def _is_integer(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_real(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class RunConfig:
    num_photons: int = 64
    eve_enabled: bool = False
    eve_rate: float = 0.0
    noise: float = 0.0
    reveal_fraction: float = 0.25
    qber_threshold: float = 11.0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not _is_integer(self.num_photons):
            raise ConfigError("num_photons must be an integer")
        if self.num_photons <= 0:
            raise ConfigError("num_photons must be positive")
        if not isinstance(self.eve_enabled, bool):
            raise ConfigError("eve_enabled must be a boolean")
        for name in ("eve_rate", "noise", "reveal_fraction", "qber_threshold"):
            if not _is_real(getattr(self, name)):
                raise ConfigError(f"{name} must be a number")
        if not 0.0 <= self.eve_rate <= 1.0:
            raise ConfigError("eve_rate must be between 0 and 1")
        if not 0.0 <= self.noise <= 1.0:
            raise ConfigError("noise must be between 0 and 1")
        if not 0.0 < self.reveal_fraction <= 1.0:
            raise ConfigError("reveal_fraction must be in (0, 1]")
        if not 0.0 <= self.qber_threshold <= 100.0:
            raise ConfigError("qber_threshold must be a percentage between 0 and 100")
        if self.seed is not None and not _is_integer(self.seed):
            raise ConfigError("seed must be an integer or None")

    def to_dict(self) -> Dict[str, object]:
        return {
            "num_photons": self.num_photons,
            "eve_enabled": self.eve_enabled,
            "eve_rate": self.eve_rate,
            "noise": self.noise,
            "reveal_fraction": self.reveal_fraction,
            "qber_threshold": self.qber_threshold,
            "seed": self.seed,
        }


@dataclass(frozen=True)
class ScenarioPreset:
    note: str
    eve_enabled: bool
    eve_rate: float
    noise: float
    reveal_fraction: float


SCENARIOS: Dict[str, ScenarioPreset] = {
    "bank": ScenarioPreset("Metro fiber: low noise, no attacker expected.", False, 0.0, 0.02, 0.25),
    "smartgrid": ScenarioPreset("Access network: medium noise; small chance of interception.", True, 0.10, 0.08, 0.25),
    "hospital": ScenarioPreset("Privacy-sensitive link: low-medium noise; strict abort policy.", False, 0.0, 0.04, 0.25),
    "satellite": ScenarioPreset(
        "Free-space downlink: intermittent, higher noise; harvest during good windows.", False, 0.0, 0.12, 0.30
    ),
    "adversarial": ScenarioPreset("Hostile environment: active attacker likely.", True, 0.40, 0.03, 0.25),
}


def scenario_config(
    name: str,
    num_photons: int = 64,
    qber_threshold: float = 11.0,
    seed: Optional[int] = None,
) -> RunConfig:
    try:
        preset = SCENARIOS[name]
    except KeyError:
        raise ConfigError(f"Unknown scenario '{name}'") from None
    return RunConfig(
        num_photons=num_photons,
        eve_enabled=preset.eve_enabled,
        eve_rate=preset.eve_rate,
        noise=preset.noise,
        reveal_fraction=preset.reveal_fraction,
        qber_threshold=qber_threshold,
        seed=seed,
    )
