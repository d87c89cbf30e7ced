from __future__ import annotations

from skyraid import constants as C
from skyraid.entities import BULLET, Entity

from .base import FireResult, Weapon


class TwinRailWeapon(Weapon):
    """Player gun: one tracer from each wingtip rail per trigger press."""

    name = "twin_rail"

    def can_fire(self, shooter, ctx) -> bool:
        return shooter.active

    def fire(self, shooter, ctx) -> FireResult:
        if not self.can_fire(shooter, ctx):
            return FireResult(spawned=False)
        w, h = C.BULLET_SIZE
        y = shooter.y + C.BULLET_WING_OFFSET_Y
        ctx.store.spawn(Entity(shooter.x + C.BULLET_WING_OFFSET_X, y, w, h, BULLET, C.BULLET_COLOR))
        ctx.store.spawn(Entity(shooter.x + shooter.width, y, w, h, BULLET, C.BULLET_COLOR))
        ctx.effects.shoot()
        return FireResult(spawned=True, shots=2)
