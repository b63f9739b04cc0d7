from __future__ import annotations

import logging
from typing import Optional

from .config import RunConfig
from .errors import EmptyKeyError
from .otp import decrypt_hex, encrypt_text
from .protocol import RunResult, run_bb84
from .randomness import RandomSource

logger = logging.getLogger(__name__)


class Session:
    """Holds the most recent run for export and the cipher.

    A new run replaces the previous one; a run that fails validation leaves it
    untouched. The cipher accepts any non-empty key, including one from an
    aborted run.
    """

    def __init__(self, source: Optional[RandomSource] = None):
        self._source = source
        self._result: Optional[RunResult] = None

    @property
    def result(self) -> Optional[RunResult]:
        return self._result

    def run(self, config: RunConfig) -> RunResult:
        result = run_bb84(config, self._source)
        self._result = result
        return result

    def clear(self) -> None:
        self._result = None

    def encrypt_text(self, text: str) -> str:
        return encrypt_text(text, self._key())

    def decrypt_hex(self, hex_text: str) -> str:
        return decrypt_hex(hex_text, self._key())

    def _key(self):
        if self._result is None or not self._result.final_key:
            logger.warning("Cipher requested without a derived key")
            raise EmptyKeyError("No derived key available; run the simulation first")
        return self._result.final_key
