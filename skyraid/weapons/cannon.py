from __future__ import annotations

from skyraid import constants as C
from skyraid.entities import ENEMY_BULLET, Entity

from .base import FireResult, Weapon


class HostileCannon(Weapon):
    """Enemy gun: random single shots once the level's weapons are hot."""

    name = "hostile_cannon"

    def can_fire(self, shooter, ctx) -> bool:
        return (
            ctx.hostile_fire_enabled
            and shooter.active
            and shooter.is_enemy
            and 0 < shooter.y < ctx.config.world_height
        )

    def fire(self, shooter, ctx) -> FireResult:
        if not self.can_fire(shooter, ctx):
            return FireResult(spawned=False)
        if ctx.services.rng.random() >= ctx.config.enemy_fire_chance:
            return FireResult(spawned=False)
        w, h = C.ENEMY_BULLET_SIZE
        ctx.store.spawn(
            Entity(
                shooter.x + shooter.width / 2 - 2,
                shooter.y + shooter.height,
                w,
                h,
                ENEMY_BULLET,
                C.ENEMY_BULLET_COLOR,
            )
        )
        return FireResult(spawned=True, shots=1)
