"""Run-time tuning configuration.

``GameConfig`` is an immutable bundle of every number the simulation
consults. Defaults come from ``skyraid.constants``; a JSON file can
override any subset of fields:

    {"level_distance": 3000, "fuel_drain_per_step": 0.1}

Unknown keys are logged and dropped so an old tuning file never prevents
the game from starting.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Tuple

from skyraid import constants as C
from skyraid.logger import get_logger

log = get_logger("config")

DEFAULT_TUNING_FILE = "data/tuning.json"


@dataclass(frozen=True)
class GameConfig:
    world_width: float = C.WORLD_WIDTH
    world_height: float = C.WORLD_HEIGHT
    frame_ms: float = C.FRAME_MS

    player_width: float = C.PLAYER_WIDTH
    player_height: float = C.PLAYER_HEIGHT
    player_speed: float = C.PLAYER_SPEED
    player_vertical_divisor: float = C.PLAYER_VERTICAL_DIVISOR
    player_edge_inset: float = C.PLAYER_EDGE_INSET
    player_bottom_inset: float = C.PLAYER_BOTTOM_INSET

    bank_limit: float = C.BANK_LIMIT
    bank_step: float = C.BANK_STEP
    bank_decay: float = C.BANK_DECAY
    bank_deadzone: float = C.BANK_DEADZONE

    scroll_base_speed: float = C.SCROLL_BASE_SPEED
    scroll_level_increment: float = C.SCROLL_LEVEL_INCREMENT
    scroll_forward_factor: float = C.SCROLL_FORWARD_FACTOR
    scroll_reverse_factor: float = C.SCROLL_REVERSE_FACTOR
    level_distance: float = C.LEVEL_DISTANCE

    max_fuel: float = C.MAX_FUEL
    fuel_drain_per_step: float = C.FUEL_DRAIN_PER_STEP
    fuel_pickup_amount: float = C.FUEL_PICKUP_AMOUNT
    fuel_pickup_score: int = C.FUEL_PICKUP_SCORE
    enemy_kill_score: int = C.ENEMY_KILL_SCORE
    fuel_destroy_penalty: int = C.FUEL_DESTROY_PENALTY
    start_lives: int = C.START_LIVES

    spawn_interval_base: int = C.SPAWN_INTERVAL_BASE
    spawn_interval_level_step: int = C.SPAWN_INTERVAL_LEVEL_STEP
    spawn_interval_min: int = C.SPAWN_INTERVAL_MIN
    enemy_spawn_chance: float = C.ENEMY_SPAWN_CHANCE
    fuel_spawn_chance: float = C.FUEL_SPAWN_CHANCE
    enemy_spawn_offset: float = C.ENEMY_SPAWN_OFFSET
    fuel_spawn_offset: float = C.FUEL_SPAWN_OFFSET
    enemy_lane_margin: float = C.ENEMY_LANE_MARGIN
    fuel_lane_margin: float = C.FUEL_LANE_MARGIN
    ladder_rungs: int = C.LADDER_RUNGS
    ladder_spacing: float = C.LADDER_SPACING
    ladder_fuel_every: int = C.LADDER_FUEL_EVERY
    ladder_fuel_offset: float = C.LADDER_FUEL_OFFSET
    enemy_variants: Mapping[str, Tuple[float, float, float, str]] = field(
        default_factory=lambda: dict(C.ENEMY_VARIANTS)
    )

    bullet_speed: float = C.BULLET_SPEED
    enemy_bullet_speed: float = C.ENEMY_BULLET_SPEED
    enemy_fire_chance: float = C.ENEMY_FIRE_CHANCE
    weapons_unlock_ms: float = C.WEAPONS_UNLOCK_MS
    projectile_hit_margin: float = C.PROJECTILE_HIT_MARGIN
    contact_hit_margin: float = C.CONTACT_HIT_MARGIN

    object_cull_margin: float = C.OBJECT_CULL_MARGIN
    projectile_cull_margin: float = C.PROJECTILE_CULL_MARGIN

    explosion_particle_count: int = C.EXPLOSION_PARTICLE_COUNT
    particle_decay: float = C.PARTICLE_DECAY
    engine_trail: bool = True

    # Derived values -------------------------------------------------
    def spawn_interval(self, level: int) -> int:
        return max(self.spawn_interval_min, self.spawn_interval_base - level * self.spawn_interval_level_step)

    def base_scroll_speed(self, level: int) -> float:
        return self.scroll_base_speed + level * self.scroll_level_increment

    def player_start(self) -> Tuple[float, float]:
        return (
            self.world_width / 2 + C.PLAYER_START_OFFSET_X,
            self.world_height - C.PLAYER_START_OFFSET_Y,
        )

    def next_level_start(self) -> Tuple[float, float]:
        """Player placement after a level advance: centred and lower than a new run."""
        return (
            self.world_width / 2 + C.NEXT_LEVEL_OFFSET_X,
            self.world_height - C.NEXT_LEVEL_OFFSET_Y,
        )

    # Construction ---------------------------------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        accepted: Dict[str, Any] = {}
        for key, value in data.items():
            if key in known:
                accepted[key] = value
            else:
                log.warn("Ignoring unknown tuning key", key)
        return cls(**accepted)


def load_config(path: str | None = None) -> GameConfig:
    """Build a ``GameConfig`` from defaults plus an optional JSON override file."""
    path = path or os.environ.get("SKYRAID_TUNING_FILE", DEFAULT_TUNING_FILE)
    if not os.path.exists(path):
        return GameConfig()
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        log.warn("Error loading tuning file; using defaults", path, e)
        return GameConfig()
    if not isinstance(data, dict):
        log.warn("Tuning file is not a JSON object; using defaults", path)
        return GameConfig()
    log.info("Loaded tuning overrides from", path)
    return GameConfig.from_dict(data)


__all__ = ["GameConfig", "load_config", "DEFAULT_TUNING_FILE"]
