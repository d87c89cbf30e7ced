"""Persistent user preferences (sound volume, display mode, key bindings).

Only preferences are stored; a run is never saved. The file location is
``data/settings.json`` unless ``SKYRAID_SETTINGS_FILE`` points elsewhere.
The volume setter clamps and flushes immediately so a crash never loses a
change. Loaded values go through the same clamp.
"""

from __future__ import annotations

import json
import os
from typing import Dict, List

import pygame

from skyraid.input_commands import COMMANDS
from skyraid.logger import get_logger

log = get_logger("settings")

DEFAULT_SETTINGS_FILE = "data/settings.json"


def default_key_bindings() -> Dict[str, List[int]]:
    return {
        "left": [pygame.K_LEFT, pygame.K_a],
        "right": [pygame.K_RIGHT, pygame.K_d],
        "up": [pygame.K_UP, pygame.K_w],
        "down": [pygame.K_DOWN, pygame.K_s],
        "fire": [pygame.K_SPACE],
    }


def clamp_volume(value: float) -> float:
    return max(0.0, min(1.0, round(float(value) * 10) / 10))


class Settings:
    _instance: "Settings | None" = None

    def __init__(self, path: str | None = None):
        self.path = path or os.environ.get("SKYRAID_SETTINGS_FILE", DEFAULT_SETTINGS_FILE)
        self._sound_volume = 0.5
        self.fullscreen = False
        self.show_fps = False
        self._dirty = False
        self.key_bindings = default_key_bindings()
        self.load_settings()

    @classmethod
    def get(cls) -> "Settings":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def sound_volume(self) -> float:
        return self._sound_volume

    @sound_volume.setter
    def sound_volume(self, value: float) -> None:
        new_val = clamp_volume(value)
        if new_val != self._sound_volume:
            self._sound_volume = new_val
            self._dirty = True
            self.flush()

    def load_settings(self) -> None:
        """Load settings from the JSON file, regenerating it when missing or corrupt."""
        if not os.path.exists(self.path):
            self._regenerate()
            return
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                log.warn("Settings file is not a JSON object; regenerating", self.path)
                self._regenerate()
                return
            self._sound_volume = clamp_volume(data.get("sound_volume", self._sound_volume))
            self.fullscreen = bool(data.get("fullscreen", self.fullscreen))
            self.show_fps = bool(data.get("show_fps", self.show_fps))
            # Merge so commands missing from an older file keep their defaults
            for command, keys in dict(data.get("key_bindings", {})).items():
                if command in COMMANDS:
                    self.key_bindings[command] = [int(k) for k in keys]
                else:
                    log.warn("Dropping binding for unknown command", command)
        except (json.JSONDecodeError, IOError, TypeError, ValueError) as e:
            log.warn("Error loading settings; regenerating", e)
            self._sound_volume = 0.5
            self.key_bindings = default_key_bindings()
            self._regenerate()

    def _regenerate(self) -> None:
        self._dirty = True
        self.flush()

    def save_settings(self) -> None:
        if self._dirty:
            self.flush()

    def flush(self) -> None:
        """Write settings to disk if dirty and clear dirty flag."""
        if not self._dirty:
            return
        data = {
            "sound_volume": self._sound_volume,
            "fullscreen": self.fullscreen,
            "show_fps": self.show_fps,
            "key_bindings": self.key_bindings,
        }
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(data, f, indent=4)
            self._dirty = False
            log.debug("Settings flushed to", self.path)
        except IOError as e:
            log.error("Error saving settings", e)


__all__ = ["Settings", "default_key_bindings", "clamp_volume", "DEFAULT_SETTINGS_FILE"]
