"""Centralized input routing.

Turns raw pygame events (and on-screen touch buttons) into the abstract
command state the simulation reads, plus a few discrete system actions
for the harness:

- Held commands (``left``/``right``/``up``/``down``) follow KEYDOWN/KEYUP.
- ``fire`` is edge-triggered: a KEYDOWN latches it until the next
  ``snapshot()``, so one press fires exactly once.
- ``confirm`` (Return/Enter) and ``quit`` (Escape) are returned from
  ``process`` as system actions; they never reach the simulation.

``snapshot()`` is called once per frame, right before the step, and
returns a frozen ``CommandSet``.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Set

import pygame

from skyraid.input_commands import COMMANDS, CommandSet
from skyraid.logger import get_logger

log = get_logger("input")

Action = str

SYSTEM_KEYS: Dict[int, Action] = {
    pygame.K_RETURN: "confirm",
    pygame.K_KP_ENTER: "confirm",
    pygame.K_ESCAPE: "quit",
}


class InputRouter:
    """Maps pygame key events to held commands and system actions."""

    def __init__(self, bindings: Mapping[str, Iterable[int]] | None = None) -> None:
        if bindings is None:
            from skyraid.settings import Settings

            bindings = Settings.get().key_bindings
        self._key_to_command: Dict[int, str] = {}
        for command, keys in bindings.items():
            if command not in COMMANDS:
                log.warn("Ignoring binding for unknown command", command)
                continue
            for key in keys:
                self._key_to_command[key] = command
        self._held: Set[str] = set()
        self._fire_latched = False

    def process(self, events: Iterable[pygame.event.Event]) -> List[Action]:
        actions: List[Action] = []
        for e in events:
            if e.type == pygame.KEYDOWN:
                key = getattr(e, "key", None)
                system = SYSTEM_KEYS.get(key)
                if system:
                    if system not in actions:  # de-duplicate per frame
                        actions.append(system)
                    continue
                command = self._key_to_command.get(key)
                if command:
                    self.press(command)
            elif e.type == pygame.KEYUP:
                command = self._key_to_command.get(getattr(e, "key", None))
                if command:
                    self.release(command)
            elif e.type == pygame.QUIT:
                if "quit" not in actions:
                    actions.append("quit")
        return actions

    # Direct control (touch buttons, tests) --------------------------
    def press(self, command: str) -> None:
        if command not in COMMANDS:
            log.warn("Ignoring unknown command", repr(command))
            return
        if command == "fire":
            self._fire_latched = True
        else:
            self._held.add(command)

    def release(self, command: str) -> None:
        self._held.discard(command)

    def release_all(self) -> None:
        self._held.clear()
        self._fire_latched = False

    def snapshot(self) -> CommandSet:
        """Freeze the current command state for one step and clear the fire latch."""
        flags = {c: True for c in self._held}
        if self._fire_latched:
            flags["fire"] = True
            self._fire_latched = False
        return CommandSet.from_mapping(flags)


__all__ = ["InputRouter", "Action", "SYSTEM_KEYS"]
