"""Service interfaces handed to the simulation core.

The core depends on narrow protocol-style ports instead of concrete
back-ends, which keeps every step runnable headless:

- AudioPort    -> receives discrete cue names (fire-and-forget)
- Clock        -> monotonically increasing wall-clock milliseconds
- RNGService   -> seedable random source

``ServiceContainer`` bundles them; ``build_headless_services`` wires an
in-memory ``CueRecorder`` and a seeded RNG for tests and batch runs.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, List, Protocol

from skyraid.constants import AUDIO_CUES
from skyraid.logger import get_logger
from skyraid.rng_service import RNGService

log = get_logger("services")

Clock = Callable[[], float]


class AudioPort(Protocol):
    def cue(self, name: str) -> None: ...  # noqa: D401


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class CueRecorder:
    """Audio sink that only remembers which cues were raised, in order."""

    def __init__(self) -> None:
        self.cues: List[str] = []

    def cue(self, name: str) -> None:
        if name not in AUDIO_CUES:
            log.warn("Ignoring unknown audio cue", name)
            return
        self.cues.append(name)


@dataclass
class ServiceContainer:
    audio: AudioPort
    rng: RNGService
    clock: Clock = field(default=monotonic_ms)

    def cue(self, name: str) -> None:
        self.audio.cue(name)

    def now_ms(self) -> float:
        return self.clock()


def build_headless_services(seed=0, clock: Clock | None = None) -> ServiceContainer:
    return ServiceContainer(audio=CueRecorder(), rng=RNGService(seed), clock=clock or monotonic_ms)


__all__ = [
    "AudioPort",
    "Clock",
    "CueRecorder",
    "ServiceContainer",
    "build_headless_services",
    "monotonic_ms",
]
