"""One simulation step, start to finish.

``Simulation.step`` runs the whole per-step pipeline synchronously on a
``RunState`` that is already in the ``PLAYING`` phase:

    steer player -> fire -> engine trail -> fuel drain (may end the run)
    -> scroll (may complete the level) -> spawn -> move world / hostile fire
    -> collisions -> compact

The two early exits (fuel exhausted, level complete) still compact the
store, so every step ends with exactly one compaction.

It never changes ``run.phase`` itself. It reports what happened in a
``StepOutcome`` and the lifecycle machine applies the transition, so every
effect of step N is in place before step N+1 starts.

Per-step values shared between phases travel in a ``StepContext`` rather
than as attributes on the simulation object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from skyraid.collision import CollisionResolver
from skyraid.config import GameConfig
from skyraid.effects_util import EffectsEmitter
from skyraid.entity_store import EntityStore
from skyraid.input_commands import CommandSet
from skyraid.logger import get_logger
from skyraid.motion import MotionIntegrator
from skyraid.run_state import RunState
from skyraid.services import ServiceContainer
from skyraid.spawn_director import SpawnDirector
from skyraid.weapons import get_weapon

log = get_logger("simulation")

FUEL_EXHAUSTED = "fuel_exhausted"
PLAYER_DESTROYED = "player_destroyed"
LEVEL_COMPLETE = "level_complete"


@dataclass
class StepContext:
    commands: CommandSet
    config: GameConfig
    services: ServiceContainer
    effects: EffectsEmitter
    store: EntityStore
    hostile_fire_enabled: bool = False


@dataclass
class StepOutcome:
    terminal: str | None = None
    cause: str | None = None
    shots: int = 0
    hostile_shots: int = 0
    collisions: Dict[str, Any] = field(default_factory=dict)


class Simulation:
    def __init__(self, config: GameConfig, services: ServiceContainer):
        self.config = config
        self.services = services
        self.motion = MotionIntegrator(config)
        self.spawner = SpawnDirector(config, services.rng)
        self.player_weapon = get_weapon("twin_rail")
        self.hostile_weapon = get_weapon("hostile_cannon")

    def effects_for(self, run: RunState) -> EffectsEmitter:
        return EffectsEmitter(run.level.particles, self.services, self.config.explosion_particle_count)

    def seed_level(self, run: RunState) -> None:
        self.spawner.seed_opening(run.level.store)

    def step(self, run: RunState, commands: CommandSet, dt_ms: float) -> StepOutcome:
        cfg = self.config
        level = run.level
        economy = run.economy
        player = level.player
        effects = self.effects_for(run)
        ctx = StepContext(commands, cfg, self.services, effects, level.store)
        outcome = StepOutcome()

        level.elapsed_ms += dt_ms
        level.steps += 1
        run.steps += 1
        ctx.hostile_fire_enabled = level.weapons_hot(cfg)

        self.motion.steer_player(player, commands)
        if commands.fire:
            outcome.shots = self.player_weapon.fire(player, ctx).shots
        if cfg.engine_trail:
            effects.engine_trail((player.x + player.width / 2, player.y + player.height))

        # Fuel check pre-empts everything else in the step
        if economy.drain(cfg.fuel_drain_per_step):
            effects.explosion(player.center(), "player")
            player.active = False
            outcome.terminal = FUEL_EXHAUSTED
            outcome.cause = FUEL_EXHAUSTED
            self._compact(level.store)
            log.info("fuel exhausted at step", run.steps)
            return outcome

        speed = self.motion.scroll_speed(economy.level, commands)
        level.scroll_offset += speed
        level.distance += speed
        if level.distance > cfg.level_distance:
            outcome.terminal = LEVEL_COMPLETE
            self._compact(level.store)
            log.info("level", economy.level, "distance reached at step", level.steps)
            return outcome

        self.spawner.update(level.store, level.scroll_offset, speed, economy.level)

        self.motion.advance_objects(level.store, speed)
        for obj in list(level.store.active_objects()):
            outcome.hostile_shots += self.hostile_weapon.fire(obj, ctx).shots
        if outcome.hostile_shots:
            log.debug("hostile shots", outcome.hostile_shots, "at step", run.steps)
        self.motion.advance_particles(level.particles)
        self.motion.advance_projectiles(level.store)

        resolver = CollisionResolver(cfg, economy, effects)
        outcome.collisions = resolver.resolve(level.store, player)
        self._compact(level.store)

        if outcome.collisions["player_destroyed"]:
            outcome.terminal = PLAYER_DESTROYED
            outcome.cause = outcome.collisions["cause"]
        return outcome

    def _compact(self, store: EntityStore) -> None:
        cfg = self.config
        store.compact(cfg.world_height, cfg.object_cull_margin, cfg.projectile_cull_margin)


__all__ = ["Simulation", "StepContext", "StepOutcome", "FUEL_EXHAUSTED", "PLAYER_DESTROYED", "LEVEL_COMPLETE"]
