"""Lightweight leveled logger.

Writes `[HH:MM:SS] LEVEL name: message` lines to a stream (stderr by
default). The minimum level is read from `SHOOTER_LOG_LEVEL` when the
module is imported and can be overridden per logger.
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass, field
from typing import TextIO

LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_DEFAULT_LEVEL_NAME = os.environ.get("SHOOTER_LOG_LEVEL", "INFO").upper()
_MIN_LEVEL = LEVELS.get(_DEFAULT_LEVEL_NAME, LEVELS["INFO"])


@dataclass
class Logger:
    name: str
    stream: TextIO | None = field(default_factory=lambda: sys.stderr)
    min_level: int = _MIN_LEVEL

    def _log(self, level: str, *parts):
        if LEVELS[level] < self.min_level or self.stream is None:
            return
        ts = time.strftime("%H:%M:%S")
        msg = " ".join(str(p) for p in parts)
        try:
            self.stream.write(f"[{ts}] {level:<5} {self.name}: {msg}\n")
            self.stream.flush()
        except (OSError, ValueError):
            # Detached or closed stream (pythonw, redirected and closed pipes).
            return

    def set_level(self, level_name: str) -> None:
        self.min_level = LEVELS[level_name.upper()]

    def debug(self, *parts):
        self._log("DEBUG", *parts)

    def info(self, *parts):
        self._log("INFO", *parts)

    def warn(self, *parts):
        self._log("WARN", *parts)

    def error(self, *parts):
        self._log("ERROR", *parts)


def get_logger(name: str = "shooter") -> Logger:
    return Logger(name)


__all__ = ["get_logger", "Logger", "LEVELS"]
