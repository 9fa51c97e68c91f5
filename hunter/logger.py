"""Lightweight leveled logging.

Every module keeps a module-level ``log = get_logger("<area>")``. The
minimum level comes from ``HUNTER_LOG_LEVEL`` (DEBUG, INFO, WARN, ERROR).
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from typing import TextIO

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_DEFAULT_LEVEL_NAME = os.environ.get("HUNTER_LOG_LEVEL", "INFO").upper()
_MIN_LEVEL = _LEVELS.get(_DEFAULT_LEVEL_NAME, 20)


@dataclass
class Logger:
    name: str
    stream: TextIO | None = sys.stdout
    min_level: int = _MIN_LEVEL

    def _log(self, level: str, *parts):
        if _LEVELS[level] < self.min_level:
            return
        if self.stream is None:
            return
        ts = time.strftime("%H:%M:%S")
        msg = " ".join(str(p) for p in parts)
        line = f"[{ts}] {level:<5} {self.name}: {msg}\n"
        try:
            self.stream.write(line)
            self.stream.flush()
        except (OSError, ValueError):
            # Windowed launches may have no usable stdout.
            return

    def debug(self, *parts):
        self._log("DEBUG", *parts)

    def info(self, *parts):
        self._log("INFO", *parts)

    def warn(self, *parts):
        self._log("WARN", *parts)

    def error(self, *parts):
        self._log("ERROR", *parts)


_default_logger = Logger("hunter")


def get_logger(name: str = "hunter") -> Logger:
    return Logger(name)


info = _default_logger.info
debug = _default_logger.debug
warn = _default_logger.warn
error = _default_logger.error

__all__ = ["get_logger", "info", "debug", "warn", "error", "Logger"]
