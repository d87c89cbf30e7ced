"""CollisionResolver: overlap detection plus its economy consequences.

Runs once per step, after movement and before the store is compacted,
over four interaction sets in a fixed order:

1. player shot x enemy      both removed, +kill score, "enemy" explosion
2. player shot x fuel       both removed, -penalty (floored), "penalty" explosion
3. hostile shot x player    player destroyed (hit-box shrunk by 10 per side)
4. player x object          enemy contact destroys the player; fuel contact
                            refuels, awards a bonus and plays the refuel cue
                            (hit-box shrunk by 5 per side)

Sets 1 and 2 share one pass over the player's shots. Every pair resolves
independently, so two shots hitting two enemies both score; a shot that
already hit something is not tested against anything else. Once the player
is destroyed set 4 is skipped.

Destroying a fuel pickup by gunfire costs score only. Fuel is untouched.
"""

from __future__ import annotations

from typing import Any, Dict

from skyraid.config import GameConfig
from skyraid.economy import Economy
from skyraid.effects_util import EffectsEmitter
from skyraid.entities import BULLET, ENEMY_BULLET, FUEL, Player, overlaps
from skyraid.entity_store import EntityStore
from skyraid.logger import get_logger

log = get_logger("collision")


class CollisionResolver:
    def __init__(self, config: GameConfig, economy: Economy, effects: EffectsEmitter):
        self.config = config
        self.economy = economy
        self.effects = effects

    def resolve(self, store: EntityStore, player: Player) -> Dict[str, Any]:
        """Resolve all collisions for this step.

        Returns a summary dict for the lifecycle machine and for tests.
        """
        summary: Dict[str, Any] = {
            "kills": 0,
            "fuel_destroyed": 0,
            "refuels": 0,
            "player_destroyed": False,
            "cause": None,
        }
        self._resolve_shots(store, summary)
        self._resolve_hostile_fire(store, player, summary)
        if not summary["player_destroyed"]:
            self._resolve_contact(store, player, summary)
        return summary

    # --- Interaction sets ----------------------------------------------------
    def _resolve_shots(self, store: EntityStore, summary: Dict[str, Any]) -> None:
        cfg = self.config
        for shot in list(store.active_projectiles(BULLET)):
            for target in store.objects:
                if not shot.active:
                    break
                if not target.active or not overlaps(shot, target):
                    continue
                shot.active = False
                target.active = False
                if target.kind == FUEL:
                    self.effects.explosion(target.center(), "penalty")
                    self.economy.penalize(cfg.fuel_destroy_penalty)
                    summary["fuel_destroyed"] += 1
                    log.debug("fuel pickup destroyed", target.id, "score", self.economy.score)
                else:
                    self.effects.explosion(target.center(), "enemy")
                    self.economy.award(cfg.enemy_kill_score)
                    summary["kills"] += 1
                    log.debug("enemy destroyed", target.kind, target.id, "score", self.economy.score)

    def _resolve_hostile_fire(self, store: EntityStore, player: Player, summary: Dict[str, Any]) -> None:
        for shot in store.active_projectiles(ENEMY_BULLET):
            if overlaps(player, shot, inset_a=self.config.projectile_hit_margin):
                shot.active = False
                self._destroy_player(player, summary, "shot_down")
                return

    def _resolve_contact(self, store: EntityStore, player: Player, summary: Dict[str, Any]) -> None:
        cfg = self.config
        for obj in store.objects:
            if not obj.active or not overlaps(player, obj, inset_a=cfg.contact_hit_margin):
                continue
            if obj.kind == FUEL:
                obj.active = False
                self.effects.refuel()
                self.economy.refuel(cfg.fuel_pickup_amount)
                self.economy.award(cfg.fuel_pickup_score)
                summary["refuels"] += 1
                log.debug("refuel", obj.id, "fuel", round(self.economy.fuel, 2))
            else:
                self._destroy_player(player, summary, "collision")
                return

    def _destroy_player(self, player: Player, summary: Dict[str, Any], cause: str) -> None:
        self.effects.explosion(player.center(), "player")
        player.active = False
        summary["player_destroyed"] = True
        summary["cause"] = cause


__all__ = ["CollisionResolver"]
