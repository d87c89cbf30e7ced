"""Motion & scroll integration.

Split into granular phases so tests can drive each one on its own:

1. ``steer_player``   held commands -> position, bank, boundary clamp
2. ``scroll_speed``   level base speed modulated by forward/reverse
3. ``advance_world``  objects ride the scroll, projectiles fly, particles drift

Banking is state that eases: a held lateral command leans by a fixed step
toward the limit, releasing it decays the angle back toward zero, and any
horizontal wall clamp levels the wings immediately.
"""

from __future__ import annotations

import math

from skyraid.config import GameConfig
from skyraid.entities import BULLET, ENEMY_BULLET, Player
from skyraid.entity_store import EntityStore
from skyraid.input_commands import CommandSet
from skyraid.particle_system import ParticleSystem


class MotionIntegrator:
    def __init__(self, config: GameConfig):
        self.config = config

    # --- Player ---------------------------------------------------------------
    def steer_player(self, player: Player, commands: CommandSet) -> None:
        cfg = self.config
        moved_x = False
        if commands.left:
            player.x -= cfg.player_speed
            player.bank = max(player.bank - cfg.bank_step, -cfg.bank_limit)
            moved_x = True
        if commands.right:
            player.x += cfg.player_speed
            player.bank = min(player.bank + cfg.bank_step, cfg.bank_limit)
            moved_x = True
        if not moved_x:
            self.level_wings(player)

        vertical = cfg.player_speed / cfg.player_vertical_divisor
        if commands.up:
            player.y -= vertical
        if commands.down:
            player.y += vertical

        self.clamp_player(player)

    def level_wings(self, player: Player) -> None:
        if abs(player.bank) <= self.config.bank_deadzone:
            player.bank = 0.0
            return
        player.bank -= math.copysign(min(self.config.bank_decay, abs(player.bank)), player.bank)

    def clamp_player(self, player: Player) -> None:
        cfg = self.config
        min_x = cfg.player_edge_inset
        max_x = cfg.world_width - cfg.player_edge_inset - player.width
        if player.x < min_x:
            player.x = min_x
            player.bank = 0.0
        elif player.x > max_x:
            player.x = max_x
            player.bank = 0.0
        min_y = cfg.player_edge_inset
        max_y = cfg.world_height - cfg.player_bottom_inset
        player.y = max(min_y, min(max_y, player.y))

    # --- Scroll ---------------------------------------------------------------
    def scroll_speed(self, level: int, commands: CommandSet) -> float:
        base = self.config.base_scroll_speed(level)
        if commands.up:
            return base * self.config.scroll_forward_factor
        if commands.down:
            return base * self.config.scroll_reverse_factor
        return base

    # --- World ----------------------------------------------------------------
    def advance_objects(self, store: EntityStore, scroll_speed: float) -> None:
        for obj in store.objects:
            obj.y += scroll_speed

    def advance_projectiles(self, store: EntityStore) -> None:
        for proj in store.projectiles:
            if proj.kind == ENEMY_BULLET:
                proj.y += self.config.enemy_bullet_speed
            elif proj.kind == BULLET:
                proj.y -= self.config.bullet_speed

    def advance_particles(self, particles: ParticleSystem) -> int:
        return particles.update()


__all__ = ["MotionIntegrator"]
