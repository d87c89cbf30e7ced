"""SpawnDirector: procedural enemy and fuel placement ahead of the player.

Spawning is tied to scroll distance, not time. Each step the director asks
whether the scroll crossed a spawn tick:

    floor(scroll_offset) % interval < scroll_speed

and, if so, rolls independently for an enemy (default 70%) and a fuel
pickup (default 25%). The interval shrinks by level down to a floor so
later levels get denser without becoming impassable.

A fresh level is seeded with an "opening ladder": entities at fixed
distances above the top edge so the first seconds are never empty.
"""

from __future__ import annotations

import math
from typing import List

from skyraid.config import GameConfig
from skyraid.constants import FUEL_COLOR, FUEL_SIZE
from skyraid.entities import FUEL, Entity
from skyraid.entity_store import EntityStore
from skyraid.logger import get_logger
from skyraid.rng_service import RNGService

log = get_logger("spawn")


class SpawnDirector:
    def __init__(self, config: GameConfig, rng: RNGService):
        self.config = config
        self.rng = rng

    # --- Placement -----------------------------------------------------------
    def spawn_enemy(self, store: EntityStore, y_offset: float) -> Entity:
        cfg = self.config
        kind = self.rng.weighted_choice({k: v[0] for k, v in cfg.enemy_variants.items()})
        _, width, height, color = cfg.enemy_variants[kind]
        x = cfg.enemy_lane_margin + self.rng.random() * (cfg.world_width - 2 * cfg.enemy_lane_margin)
        enemy = store.spawn(Entity(x, -y_offset, width, height, kind, color))
        log.debug("enemy", kind, f"x={x:.1f}", f"y={-y_offset}")
        return enemy

    def spawn_fuel(self, store: EntityStore, y_offset: float) -> Entity:
        cfg = self.config
        x = cfg.fuel_lane_margin + self.rng.random() * (cfg.world_width - 2 * cfg.fuel_lane_margin)
        width, height = FUEL_SIZE
        pickup = store.spawn(Entity(x, -y_offset, width, height, FUEL, FUEL_COLOR))
        log.debug("fuel", f"x={x:.1f}", f"y={-y_offset}")
        return pickup

    def seed_opening(self, store: EntityStore) -> List[Entity]:
        """Populate a fresh level with the fixed-offset opening ladder."""
        cfg = self.config
        placed: List[Entity] = []
        for rung in range(1, cfg.ladder_rungs + 1):
            placed.append(self.spawn_enemy(store, rung * cfg.ladder_spacing))
            if cfg.ladder_fuel_every and rung % cfg.ladder_fuel_every == 0:
                placed.append(self.spawn_fuel(store, rung * cfg.ladder_spacing + cfg.ladder_fuel_offset))
        return placed

    # --- Per-step scheduling -------------------------------------------------
    def tick_crossed(self, scroll_offset: float, scroll_speed: float, level: int) -> bool:
        interval = self.config.spawn_interval(level)
        return math.floor(scroll_offset) % interval < scroll_speed

    def update(self, store: EntityStore, scroll_offset: float, scroll_speed: float, level: int) -> List[Entity]:
        """Run the spawn roll for this step; returns whatever was introduced."""
        if not self.tick_crossed(scroll_offset, scroll_speed, level):
            return []
        cfg = self.config
        spawned: List[Entity] = []
        if self.rng.random() < cfg.enemy_spawn_chance:
            spawned.append(self.spawn_enemy(store, cfg.enemy_spawn_offset))
        if self.rng.random() < cfg.fuel_spawn_chance:
            spawned.append(self.spawn_fuel(store, cfg.fuel_spawn_offset))
        return spawned


__all__ = ["SpawnDirector"]
