from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FireResult:
    spawned: bool
    shots: int = 0


class Weapon:
    """Base weapon interface.

    Subclasses override `can_fire` and `fire`. ``ctx`` is the current
    ``StepContext`` (store, effects, services, config, weapon gate).
    """

    name: str = "weapon"

    def can_fire(self, shooter, ctx) -> bool:  # pragma: no cover - trivial
        return False

    def fire(self, shooter, ctx) -> FireResult:  # pragma: no cover - default
        return FireResult(spawned=False)


class NoneWeapon(Weapon):
    name = "none"

    def can_fire(self, shooter, ctx) -> bool:
        return False

    def fire(self, shooter, ctx) -> FireResult:
        return FireResult(spawned=False)
