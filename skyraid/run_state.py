"""Explicit run and level state.

``RunState`` is the single value the lifecycle machine owns and threads
through every step: the phase, the economy, and the current
``LevelState`` (store, particles, player, scroll and level clock). A level
advance replaces ``LevelState`` wholesale; a new run replaces both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from skyraid.config import GameConfig
from skyraid.constants import PLAYER_COLOR
from skyraid.economy import Economy
from skyraid.entities import Player
from skyraid.entity_store import EntityStore
from skyraid.particle_system import ParticleSystem


class Phase(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    LEVEL_COMPLETE = "level_complete"
    GAME_OVER = "game_over"


@dataclass
class LevelState:
    store: EntityStore
    particles: ParticleSystem
    player: Player
    scroll_offset: float = 0.0
    distance: float = 0.0
    elapsed_ms: float = 0.0
    started_at_ms: float = 0.0
    steps: int = 0

    @classmethod
    def fresh(
        cls, config: GameConfig, started_at_ms: float = 0.0, start: Tuple[float, float] | None = None
    ) -> "LevelState":
        """New level with an empty store. ``start`` defaults to the new-run position."""
        x, y = start or config.player_start()
        player = Player(x, y, config.player_width, config.player_height, color=PLAYER_COLOR)
        return cls(
            store=EntityStore(),
            particles=ParticleSystem(config.particle_decay),
            player=player,
            started_at_ms=started_at_ms,
        )

    def weapons_hot(self, config: GameConfig) -> bool:
        return self.elapsed_ms > config.weapons_unlock_ms


@dataclass
class RunState:
    economy: Economy
    level: LevelState
    phase: Phase = Phase.IDLE
    started_at_ms: float = 0.0
    steps: int = 0
    final_score: int | None = None
    shots_fired: int = 0
    kills: int = 0
    game_over_cause: str | None = None
    notified: bool = field(default=False, repr=False)

    @classmethod
    def idle(cls, config: GameConfig) -> "RunState":
        return cls(economy=Economy(config.max_fuel, config.start_lives), level=LevelState.fresh(config))


__all__ = ["Phase", "LevelState", "RunState"]
