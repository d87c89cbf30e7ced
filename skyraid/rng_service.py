"""Seedable random source shared by spawning, combat and effects.

Every random decision in the simulation goes through an ``RNGService``
so a seeded run reproduces the exact same spawn sequence, enemy variants
and particle spray. The harness builds one instance from
``SKYRAID_SEED``; tests create their own seeded instances.
"""

from __future__ import annotations

import random
from typing import Any, Mapping

from skyraid.logger import get_logger

log = get_logger("rng")


class RNGService:
    def __init__(self, seed: int | float | str | bytes | bytearray | None = None):
        self._generator = random.Random(seed)
        log.debug(f"RNG initialized with seed: {seed!r}")

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._generator.random()

    def weighted_choice(self, weights: Mapping[Any, float]) -> Any:
        """Pick a key of ``weights`` with probability proportional to its value.

        Uses a single ``random()`` draw walked over the cumulative weights in
        mapping order, so the outcome for a given draw is stable.
        """
        total = float(sum(weights.values()))
        if total <= 0:
            raise ValueError("weighted_choice needs at least one positive weight")
        roll = self._generator.random() * total
        acc = 0.0
        last = None
        for key, weight in weights.items():
            acc += weight
            last = key
            if roll < acc:
                return key
        return last


__all__ = ["RNGService"]
