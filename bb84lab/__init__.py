"""BB84 quantum key distribution simulator with a one-time-pad demo cipher."""

from .config import RunConfig, ScenarioPreset, SCENARIOS, scenario_config
from .decision import Decision, decide, decide_sample
from .errors import BB84Error, ConfigError, DegenerateSiftError, EmptyKeyError, ExportError
from .estimation import QberEstimate, estimate_qber, score_sample
from .keys import derive_key
from .measurement import measure
from .channel import ChannelModel, Eavesdropper, Interception, Transmission
from .otp import decrypt, decrypt_hex, encrypt, encrypt_text, xor_mask
from .protocol import BB84Protocol, PhotonEvent, RunResult, run_bb84
from .randomness import BASES, DIAGONAL, RECTILINEAR, RandomSource, reveal_count
from .sifting import SiftedSet, sift
from .export import dumps_run, load_run, loads_run, save_run
from .session import Session

__all__ = [
	"RunConfig",
	"ScenarioPreset",
	"SCENARIOS",
	"scenario_config",
	"Decision",
	"decide",
	"decide_sample",
	"BB84Error",
	"ConfigError",
	"DegenerateSiftError",
	"EmptyKeyError",
	"ExportError",
	"QberEstimate",
	"estimate_qber",
	"score_sample",
	"derive_key",
	"measure",
	"ChannelModel",
	"Eavesdropper",
	"Interception",
	"Transmission",
	"decrypt",
	"decrypt_hex",
	"encrypt",
	"encrypt_text",
	"xor_mask",
	"BB84Protocol",
	"PhotonEvent",
	"RunResult",
	"run_bb84",
	"BASES",
	"DIAGONAL",
	"RECTILINEAR",
	"RandomSource",
	"reveal_count",
	"SiftedSet",
	"sift",
	"dumps_run",
	"load_run",
	"loads_run",
	"save_run",
	"Session",
]
