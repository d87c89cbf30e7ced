"""Abstract player commands consumed by the simulation.

The core never sees keys or touch events, only a ``CommandSet``: an
immutable snapshot of which abstract commands are held (or, for ``fire``,
pressed this step). The snapshot is taken once at the start of a step so
input toggled mid-step only affects the next one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from skyraid.logger import get_logger

log = get_logger("input")

COMMANDS = ("left", "right", "up", "down", "fire")


@dataclass(frozen=True)
class CommandSet:
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    fire: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, object] | None) -> "CommandSet":
        """Build from any ``{command: truthy}`` mapping; unrecognized keys are ignored."""
        if not data:
            return cls()
        flags = {}
        for key, value in data.items():
            if key in COMMANDS:
                flags[key] = bool(value)
            else:
                log.warn("Ignoring unknown command", repr(key))
        return cls(**flags)


IDLE_COMMANDS = CommandSet()

__all__ = ["CommandSet", "COMMANDS", "IDLE_COMMANDS"]
