"""Diagnostics sink for the reader and evaluator.

A Diagnostics value is created by the caller and passed explicitly into
`evaluate`, `Reader` and `Interpreter`. It carries its own verbosity, so two
interpreters in one process can log at different levels, and it records every
error it was handed so callers can inspect why an evaluation produced no
result.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Optional

from sprig import config
from sprig.errors import SprigError

logger = logging.getLogger(__name__)


class LogLevel(IntEnum):
    NONE = 0
    ERROR = 1
    DEBUG = 2

    @classmethod
    def from_name(cls, name: str) -> LogLevel:
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name!r}") from None


class Diagnostics:
    """Collects errors and debug traces for one interpreter or one call."""

    def __init__(
        self,
        level: LogLevel | str | None = None,
        log: Optional[logging.Logger] = None,
    ):
        if level is None:
            level = config.get_log_level()
        if isinstance(level, str):
            level = LogLevel.from_name(level)
        self.level: LogLevel = level
        self.log: logging.Logger = log if log is not None else logger
        self.errors: list[SprigError] = []

    @property
    def debug_enabled(self) -> bool:
        return self.level >= LogLevel.DEBUG

    @property
    def last_error(self) -> Optional[SprigError]:
        return self.errors[-1] if self.errors else None

    def debug(self, msg: str, *args) -> None:
        if self.level >= LogLevel.DEBUG:
            self.log.debug("Debug: " + msg, *args)

    def error(self, err: SprigError) -> None:
        """Record `err` and log it when the level allows."""
        self.errors.append(err)
        if self.level >= LogLevel.ERROR:
            self.log.error("Error: %s", err)

    def clear(self) -> None:
        self.errors.clear()

    def __repr__(self) -> str:
        return f"<Diagnostics level={self.level.name} errors={len(self.errors)}>"
