"""Immutable render snapshots.

The presentation layer never reads live simulation objects. At the end of
each step ``SnapshotService.capture`` copies everything a frame needs
(active entities, particles, scroll, economy, phase) into frozen
dataclasses made of tuples, so a renderer cannot observe a half-updated
step or mutate the world.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from skyraid.config import GameConfig
from skyraid.entities import Entity, Particle, Player
from skyraid.run_state import Phase, RunState


@dataclass(frozen=True)
class EntityView:
    id: int
    kind: str
    x: float
    y: float
    width: float
    height: float
    color: str
    bank: float = 0.0


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    color: str
    size: float
    life: float


@dataclass(frozen=True)
class RenderSnapshot:
    phase: Phase
    step: int
    level: int
    score: int
    fuel: float
    max_fuel: float
    lives: int
    scroll_offset: float
    distance: float
    level_distance: float
    elapsed_ms: float
    weapons_hot: bool
    player: EntityView | None
    objects: Tuple[EntityView, ...] = ()
    projectiles: Tuple[EntityView, ...] = ()
    particles: Tuple[ParticleView, ...] = ()
    final_score: int | None = None

    @property
    def progress(self) -> float:
        """Fraction of the level distance covered, clamped to [0, 1]."""
        if self.level_distance <= 0:
            return 1.0
        return max(0.0, min(1.0, self.distance / self.level_distance))


def _entity_view(e: Entity) -> EntityView:
    bank = e.bank if isinstance(e, Player) else 0.0
    return EntityView(e.id, e.kind, e.x, e.y, e.width, e.height, e.color, bank)


def _particle_view(p: Particle) -> ParticleView:
    return ParticleView(p.x, p.y, p.color, p.size, max(0.0, min(1.0, p.life)))


class SnapshotService:
    @staticmethod
    def capture(run: RunState, config: GameConfig) -> RenderSnapshot:
        level = run.level
        economy = run.economy
        player = level.player
        return RenderSnapshot(
            phase=run.phase,
            step=run.steps,
            level=economy.level,
            score=economy.score,
            fuel=economy.fuel,
            max_fuel=economy.max_fuel,
            lives=economy.lives,
            scroll_offset=level.scroll_offset,
            distance=level.distance,
            level_distance=config.level_distance,
            elapsed_ms=level.elapsed_ms,
            weapons_hot=level.weapons_hot(config),
            player=_entity_view(player) if player.active and run.phase is not Phase.IDLE else None,
            objects=tuple(_entity_view(o) for o in level.store.active_objects()),
            projectiles=tuple(_entity_view(p) for p in level.store.active_projectiles()),
            particles=tuple(_particle_view(p) for p in level.particles if not p.expired),
            final_score=run.final_score,
        )


__all__ = ["RenderSnapshot", "EntityView", "ParticleView", "SnapshotService"]
