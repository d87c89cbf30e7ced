"""EntityStore: the live world objects and projectiles of one level.

Two insertion-ordered collections share one identity counter:

* ``objects``     enemies and fuel pickups (scroll with the world)
* ``projectiles`` player shots and hostile shots (own velocities)

The store never removes anything mid-step. Collision resolution only marks
entities inactive; ``compact()`` runs once at the end of the step and drops
inactive entities plus anything that has left the visible area.
"""

from __future__ import annotations

import itertools
from typing import Iterator, List

from skyraid.entities import Entity
from skyraid.logger import get_logger

log = get_logger("store")


class EntityStore:
    def __init__(self) -> None:
        self.objects: List[Entity] = []
        self.projectiles: List[Entity] = []
        self._ids = itertools.count(1)

    # --- Collection Protocol -------------------------------------------------
    def __len__(self) -> int:
        return len(self.objects) + len(self.projectiles)

    # --- API -----------------------------------------------------------------
    def spawn(self, entity: Entity) -> Entity:
        """Append ``entity`` with a fresh identity and return it."""
        entity.id = next(self._ids)
        if entity.is_projectile:
            self.projectiles.append(entity)
        else:
            self.objects.append(entity)
        return entity

    def active_objects(self) -> Iterator[Entity]:
        return (o for o in self.objects if o.active)

    def active_projectiles(self, kind: str | None = None) -> Iterator[Entity]:
        return (p for p in self.projectiles if p.active and (kind is None or p.kind == kind))

    def compact(self, world_height: float, object_margin: float, projectile_margin: float) -> int:
        """Drop inactive and off-screen entities. Returns how many were removed."""
        before = len(self)
        self.objects = [o for o in self.objects if o.active and o.y < world_height + object_margin]
        self.projectiles = [
            p
            for p in self.projectiles
            if p.active and -projectile_margin < p.y < world_height + projectile_margin
        ]
        removed = before - len(self)
        if removed:
            log.debug("compact removed", removed, "remaining", len(self))
        return removed


__all__ = ["EntityStore"]
