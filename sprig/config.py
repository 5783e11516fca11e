from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

# Width of Number values; arithmetic wraps at this size.
INTEGER_BITS = 64
INTEGER_MIN = -(1 << (INTEGER_BITS - 1))
INTEGER_MAX = (1 << (INTEGER_BITS - 1)) - 1

_DEFAULT_LOG_LEVEL = "error"
_LOG_LEVELS = ("none", "error", "debug")


def get_log_level() -> str:
    raw = os.environ.get("SPRIG_LOG_LEVEL", "").strip().lower()
    if raw in _LOG_LEVELS:
        return raw
    return _DEFAULT_LOG_LEVEL


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get("SPRIG_PRELUDE_PATH", "").strip()
    if not raw:
        return None
    return Path(raw)
