"""Fuel & score economy.

Every mutation clamps at the point of change: score never drops below zero
and fuel always stays inside ``[0, max_fuel]``. Level only ever increases,
through ``advance_level``.
"""

from __future__ import annotations

from skyraid.logger import get_logger

log = get_logger("economy")


class Economy:
    def __init__(self, max_fuel: float, start_lives: int) -> None:
        self.max_fuel = float(max_fuel)
        self.start_lives = start_lives
        self._score = 0
        self._fuel = self.max_fuel
        self.lives = start_lives
        self._level = 1

    # Score ----------------------------------------------------------
    @property
    def score(self) -> int:
        return self._score

    @score.setter
    def score(self, value: int) -> None:
        self._score = max(0, value)

    def award(self, points: int) -> None:
        self.score = self._score + points

    def penalize(self, points: int) -> None:
        self.score = self._score - points

    # Fuel -----------------------------------------------------------
    @property
    def fuel(self) -> float:
        return self._fuel

    @fuel.setter
    def fuel(self, value: float) -> None:
        self._fuel = max(0.0, min(self.max_fuel, value))

    def refuel(self, amount: float) -> None:
        self.fuel = self._fuel + amount

    def drain(self, amount: float) -> bool:
        """Burn ``amount`` fuel. Returns True when the tank is empty (at or below zero)."""
        remaining = self._fuel - amount
        self.fuel = remaining
        return remaining <= 0

    # Level ----------------------------------------------------------
    @property
    def level(self) -> int:
        return self._level

    def advance_level(self) -> int:
        """Next level: level + 1, full tank. Score and lives carry over."""
        self._level += 1
        self._fuel = self.max_fuel
        log.debug("level advanced to", self._level)
        return self._level


__all__ = ["Economy"]
