"""World objects: entities (collidable) and particles (cosmetic).

Entities are plain mutable records owned by an ``EntityStore``. Setting
``active = False`` is a deletion mark: the store drops the entity at the
next ``compact()`` and nothing renders or collides with it in between.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

PLAYER = "player"
ENEMY_SHIP = "enemy_ship"
ENEMY_HELI = "enemy_heli"
ENEMY_TANK = "enemy_tank"
FUEL = "fuel"
BULLET = "bullet"
ENEMY_BULLET = "enemy_bullet"

ENEMY_KINDS = (ENEMY_SHIP, ENEMY_HELI, ENEMY_TANK)
PROJECTILE_KINDS = (BULLET, ENEMY_BULLET)


@dataclass(eq=False)
class Entity:
    x: float
    y: float
    width: float
    height: float
    kind: str
    color: str = "#ffffff"
    active: bool = True
    id: int = 0  # assigned by EntityStore.spawn

    @property
    def is_enemy(self) -> bool:
        return self.kind in ENEMY_KINDS

    @property
    def is_projectile(self) -> bool:
        return self.kind in PROJECTILE_KINDS

    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def bounds(self, inset: float = 0.0) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom), optionally shrunk by ``inset`` on every side."""
        return (
            self.x + inset,
            self.y + inset,
            self.x + self.width - inset,
            self.y + self.height - inset,
        )


@dataclass(eq=False)
class Player(Entity):
    kind: str = PLAYER
    bank: float = 0.0  # radians, negative leans left


@dataclass(eq=False)
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    color: str
    size: float
    life: float = 1.0

    @property
    def expired(self) -> bool:
        return self.life <= 0

    def update(self, decay: float) -> bool:
        """Advance one step. Returns True once the particle has expired."""
        self.x += self.vx
        self.y += self.vy
        self.life -= decay
        return self.expired


def overlaps(a: Entity, b: Entity, inset_a: float = 0.0) -> bool:
    """Axis-aligned overlap test with open intervals (touching edges do not hit).

    ``inset_a`` shrinks ``a`` on all four sides before testing; the player
    uses it as a forgiveness margin.
    """
    al, at, ar, ab = a.bounds(inset_a)
    bl, bt, br, bb = b.bounds()
    return al < br and ar > bl and at < bb and ab > bt


__all__ = [
    "Entity",
    "Player",
    "Particle",
    "overlaps",
    "PLAYER",
    "ENEMY_SHIP",
    "ENEMY_HELI",
    "ENEMY_TANK",
    "FUEL",
    "BULLET",
    "ENEMY_BULLET",
    "ENEMY_KINDS",
    "PROJECTILE_KINDS",
]
