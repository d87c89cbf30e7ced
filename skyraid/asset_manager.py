"""AssetManager

Lazy loading and caching for sound assets under ``data/sfx/``. The
simulation draws flat shapes, so sounds are the only files it loads.
The root directory can be moved with ``SKYRAID_SFX_ROOT``.
"""

from __future__ import annotations

import os
from typing import Dict

import pygame

SFX_ROOT = os.environ.get("SKYRAID_SFX_ROOT", "data/sfx/")


class AssetManager:
    _instance: "AssetManager | None" = None

    def __init__(self, sfx_root: str = SFX_ROOT) -> None:
        self.sfx_root = sfx_root
        self._sounds: Dict[str, pygame.mixer.Sound] = {}

    @classmethod
    def get(cls) -> "AssetManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_sound(self, rel_path: str) -> pygame.mixer.Sound:
        """Return the cached Sound, loading it on first request.

        Raises FileNotFoundError or pygame.error when the file is missing or
        the mixer cannot decode it.
        """
        snd = self._sounds.get(rel_path)
        if snd is None:
            full = os.path.join(self.sfx_root, rel_path)
            if not os.path.exists(full):
                raise FileNotFoundError(full)
            snd = pygame.mixer.Sound(full)
            self._sounds[rel_path] = snd
        return snd


__all__ = ["AssetManager", "SFX_ROOT"]
