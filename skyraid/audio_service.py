"""AudioService

pygame.mixer-backed sink for the simulation's audio cues.

- ``cue(name)`` plays the sound registered for a cue and returns at once.
- ``engine-start`` loops the engine sound on a reserved channel and
  ``engine-stop`` stops it; repeated starts do not stack.
- A missing file or an unavailable mixer is logged once per cue and the cue
  is then skipped. Audio failures never propagate into a step.

Volumes come from ``Settings`` (``sound_volume`` scaled per cue).

No sound files ship with the game. Until WAVs named in ``CUE_FILES`` are
placed under ``data/sfx/`` (or ``SKYRAID_SFX_ROOT``) the harness runs
silent, logging one warning per missing cue.
"""

from __future__ import annotations

import os
from typing import Dict, Set

import pygame

from skyraid.asset_manager import AssetManager
from skyraid.constants import (
    AUDIO_CUES,
    CUE_ENGINE_START,
    CUE_ENGINE_STOP,
    CUE_EXPLOSION,
    CUE_REFUEL,
    CUE_SHOOT,
)
from skyraid.logger import get_logger
from skyraid.settings import Settings

log = get_logger("audio")

CUE_FILES = {
    CUE_SHOOT: "shoot.wav",
    CUE_EXPLOSION: "explosion.wav",
    CUE_REFUEL: "refuel.wav",
    CUE_ENGINE_START: "engine.wav",
}

CUE_VOLUME = {
    CUE_SHOOT: 0.4,
    CUE_EXPLOSION: 0.9,
    CUE_REFUEL: 0.6,
    CUE_ENGINE_START: 0.5,
}

ENGINE_CHANNEL = 0


class AudioService:
    _instance: "AudioService | None" = None

    def __init__(self, settings: Settings | None = None, assets: AssetManager | None = None) -> None:
        self.settings = settings or Settings.get()
        self._am = assets or AssetManager.get()
        self._sfx: Dict[str, pygame.mixer.Sound] = {}
        self._unavailable: Set[str] = set()
        self._engine_running = False
        self.enabled = self._init_mixer()

    @classmethod
    def get(cls) -> "AudioService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _init_mixer(self) -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error:
            # No audio device (CI, headless): retry on the dummy driver
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
            try:
                pygame.mixer.init()
            except pygame.error as e:
                log.warn("Audio disabled; mixer unavailable:", e)
                return False
        pygame.mixer.set_reserved(ENGINE_CHANNEL + 1)
        return True

    # Loading -------------------------------------------------------
    def _sound(self, cue: str) -> pygame.mixer.Sound | None:
        if cue in self._unavailable:
            return None
        snd = self._sfx.get(cue)
        if snd is None:
            try:
                snd = self._am.get_sound(CUE_FILES[cue])
            except (FileNotFoundError, pygame.error) as e:
                log.warn("No sound for cue", cue, "-", e)
                self._unavailable.add(cue)
                return None
            snd.set_volume(self.settings.sound_volume * CUE_VOLUME.get(cue, 1.0))
            self._sfx[cue] = snd
        return snd

    # Cue sink ------------------------------------------------------
    def cue(self, name: str) -> None:
        if name not in AUDIO_CUES:
            log.warn("Ignoring unknown audio cue", name)
            return
        if not self.enabled:
            return
        if name == CUE_ENGINE_START:
            self._start_engine()
        elif name == CUE_ENGINE_STOP:
            self._stop_engine()
        else:
            snd = self._sound(name)
            if snd is not None:
                snd.play()

    def _start_engine(self) -> None:
        if self._engine_running:
            return
        snd = self._sound(CUE_ENGINE_START)
        if snd is None:
            return
        pygame.mixer.Channel(ENGINE_CHANNEL).play(snd, loops=-1, fade_ms=2000)
        self._engine_running = True

    def _stop_engine(self) -> None:
        if not self._engine_running:
            return
        pygame.mixer.Channel(ENGINE_CHANNEL).fadeout(300)
        self._engine_running = False

    def shutdown(self) -> None:
        self._stop_engine()
        if self.enabled:
            pygame.mixer.stop()


__all__ = ["AudioService", "CUE_FILES"]
