"""Many-run statistics for exploring how channel noise shows up in the QBER."""

from dataclasses import replace
from typing import Iterable, Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from .config import RunConfig
from .protocol import BB84Protocol
from .randomness import RandomSource


def sweep_noise(
    config: RunConfig,
    noise_values: Iterable[float],
    runs_per_value: int = 50,
    source: Optional[RandomSource] = None,
) -> pd.DataFrame:
    """Average QBER, key yield and accept rate over repeated runs per noise level."""
    if runs_per_value <= 0:
        raise ValueError("runs_per_value must be positive")
    source = source if source is not None else RandomSource(config.seed)

    rows = []
    for value in noise_values:
        protocol = BB84Protocol(replace(config, noise=value), source)
        results = [protocol.run() for _ in range(runs_per_value)]
        qber = np.array([r.qber for r in results])
        rows.append(
            {
                "noise": value,
                "mean_qber": float(qber.mean()),
                "std_qber": float(qber.std()),
                "mean_key_yield": float(np.mean([r.key_yield() for r in results])),
                "accept_rate": float(np.mean([r.accepted for r in results])),
            }
        )
    return pd.DataFrame(rows, columns=["noise", "mean_qber", "std_qber", "mean_key_yield", "accept_rate"])


def render_qber_curve(frame: pd.DataFrame, threshold_percent: Optional[float] = None):
    """Plot mean QBER and accept rate against the noise level."""
    if frame.empty:
        return None
    fig, ax = plt.subplots(figsize=(6, 3.5))
    ax.errorbar(frame["noise"], frame["mean_qber"], yerr=frame["std_qber"], marker="o", color="#1f77b4", label="QBER")
    if threshold_percent is not None:
        ax.axhline(threshold_percent / 100.0, color="#c62828", linestyle="--", label="Threshold")
    ax.set_xlabel("Channel noise")
    ax.set_ylabel("QBER")
    ax.grid(alpha=0.25)
    twin = ax.twinx()
    twin.plot(frame["noise"], frame["accept_rate"], marker="s", color="#2e7d32", label="Accept rate")
    twin.set_ylabel("Accept rate")
    twin.set_ylim(0.0, 1.05)
    lines, labels = ax.get_legend_handles_labels()
    lines2, labels2 = twin.get_legend_handles_labels()
    ax.legend(lines + lines2, labels + labels2, loc="upper left")
    plt.tight_layout()
    return fig
