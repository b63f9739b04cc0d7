from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from .errors import ExportError
from .protocol import RunResult

logger = logging.getLogger(__name__)


def dumps_run(result: RunResult) -> str:
    return json.dumps(result.to_dict(), indent=2)


def loads_run(text: str) -> RunResult:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ExportError(f"Run export is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ExportError("Run export must be a JSON object")
    return RunResult.from_dict(payload)


def save_run(result: RunResult, path: Union[str, Path]) -> Path:
    target = Path(path)
    target.write_text(dumps_run(result), encoding="utf-8")
    logger.info("Saved BB84 run to %s", target)
    return target


def load_run(path: Union[str, Path]) -> RunResult:
    return loads_run(Path(path).read_text(encoding="utf-8"))
