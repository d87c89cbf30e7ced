"""Leveled logging for the simulation core and harness.

Each subsystem asks for a named logger (``get_logger("spawn")``). Lines go
to a text stream as ``[HH:MM:SS] LEVEL name: message``. The minimum level is
read from ``SKYRAID_LOG_LEVEL`` at import time and can be changed later with
``set_level`` (tests use it to silence or widen output).
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from typing import TextIO

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _resolve(name: str | None, default: int = 20) -> int:
    if not name:
        return default
    return _LEVELS.get(name.upper(), default)


_min_level = _resolve(os.environ.get("SKYRAID_LOG_LEVEL"), _LEVELS["INFO"])


def set_level(name: str) -> None:
    """Change the process-wide minimum level; unknown names keep the current one."""
    global _min_level
    _min_level = _resolve(name, _min_level)


@dataclass
class Logger:
    name: str
    stream: TextIO | None = None

    def _log(self, level: str, *parts) -> None:
        if _LEVELS[level] < _min_level:
            return
        stream = self.stream if self.stream is not None else sys.stderr
        if stream is None:
            return
        ts = time.strftime("%H:%M:%S")
        msg = " ".join(str(p) for p in parts)
        try:
            stream.write(f"[{ts}] {level:<5} {self.name}: {msg}\n")
            stream.flush()
        except (OSError, ValueError):
            # Closed or detached stream (pythonw, redirected test output).
            return

    def debug(self, *parts) -> None:
        self._log("DEBUG", *parts)

    def info(self, *parts) -> None:
        self._log("INFO", *parts)

    def warn(self, *parts) -> None:
        self._log("WARN", *parts)

    def error(self, *parts) -> None:
        self._log("ERROR", *parts)


def get_logger(name: str = "skyraid") -> Logger:
    return Logger(name)


__all__ = ["get_logger", "set_level", "Logger"]
