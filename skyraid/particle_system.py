"""Central ParticleSystem.

Owns every live cosmetic particle (explosion debris, engine trail) behind a
spawn + update API. Particles never take part in collision or economy; the
system only moves them, decays their life and purges the expired ones.
"""

from __future__ import annotations

from typing import Iterator, List

from skyraid.entities import Particle


class ParticleSystem:
    def __init__(self, decay: float) -> None:
        self.decay = decay
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    # ---- Spawn helpers ----
    def spawn(self, x: float, y: float, vx: float, vy: float, color: str, size: float, life: float = 1.0) -> Particle:
        p = Particle(x, y, vx, vy, color, size, life)
        self.particles.append(p)
        return p

    # ---- Update ----
    def update(self) -> int:
        """Advance all particles one step and drop expired ones. Returns the purge count."""
        alive = [p for p in self.particles if not p.update(self.decay)]
        purged = len(self.particles) - len(alive)
        self.particles = alive
        return purged


__all__ = ["ParticleSystem"]
