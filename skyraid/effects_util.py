"""Effects emitter: particle bursts and audio cues.

Collision resolution and the fuel check call into one ``EffectsEmitter``
so every explosion has the same particle count, spray and cue. Each
public call raises exactly one audio cue (the engine trail raises none);
cues are fire-and-forget and never block the step.
"""

from __future__ import annotations

from typing import Tuple

from skyraid import constants as C
from skyraid.logger import get_logger
from skyraid.particle_system import ParticleSystem
from skyraid.services import ServiceContainer

log = get_logger("effects")


class EffectsEmitter:
    def __init__(self, particles: ParticleSystem, services: ServiceContainer, count: int = C.EXPLOSION_PARTICLE_COUNT):
        self.particles = particles
        self.services = services
        self.count = count

    def explosion(self, center: Tuple[float, float], palette: str) -> None:
        """Spray ``count`` particles from ``center`` in alternating palette colours."""
        colors = C.PALETTES.get(palette)
        if colors is None:
            log.warn("Unknown palette, falling back to 'enemy':", palette)
            colors = C.PALETTES["enemy"]
        rng = self.services.rng
        x, y = center
        for i in range(self.count):
            self.particles.spawn(
                x,
                y,
                (rng.random() - 0.5) * C.EXPLOSION_SPEED,
                (rng.random() - 0.5) * C.EXPLOSION_SPEED,
                colors[i % len(colors)],
                rng.random() * C.EXPLOSION_SIZE_SPREAD + C.EXPLOSION_SIZE_MIN,
            )
        self.services.cue(C.CUE_EXPLOSION)

    def shoot(self) -> None:
        self.services.cue(C.CUE_SHOOT)

    def refuel(self) -> None:
        self.services.cue(C.CUE_REFUEL)

    def engine_trail(self, tail: Tuple[float, float]) -> None:
        """Single afterburner puff just below the player's tail."""
        rng = self.services.rng
        self.particles.spawn(
            tail[0],
            tail[1] + 8,
            (rng.random() - 0.5) * 0.5,
            C.TRAIL_SPEED_MIN + rng.random() * C.TRAIL_SPEED_SPREAD,
            C.PALETTES["trail"][0],
            rng.random() * C.TRAIL_SIZE_SPREAD + C.TRAIL_SIZE_MIN,
            life=C.TRAIL_LIFE,
        )


__all__ = ["EffectsEmitter"]
