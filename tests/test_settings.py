import json

import pygame
import pytest

from skyraid.settings import Settings


def test_defaults_written_on_first_load(tmp_path):
    path = tmp_path / "prefs" / "settings.json"
    s = Settings(str(path))
    assert path.exists()
    data = json.loads(path.read_text())
    assert data["sound_volume"] == 0.5
    assert data["key_bindings"]["fire"] == [pygame.K_SPACE]
    assert s.fullscreen is False


def test_volume_setter_clamps_and_persists(tmp_path):
    path = tmp_path / "settings.json"
    s = Settings(str(path))
    s.sound_volume = 1.7
    assert s.sound_volume == 1.0
    s.sound_volume = -0.2
    assert s.sound_volume == 0.0
    assert Settings(str(path)).sound_volume == 0.0


@pytest.mark.parametrize("stored, expected", [(5.0, 1.0), (-3, 0.0), (0.34, 0.3)])
def test_loaded_volume_is_clamped(tmp_path, stored, expected):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"sound_volume": stored}))
    assert Settings(str(path)).sound_volume == expected


def test_bindings_merge_and_unknown_commands(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"key_bindings": {"fire": [pygame.K_f], "jump": [pygame.K_j]}}))
    s = Settings(str(path))
    assert s.key_bindings["fire"] == [pygame.K_f]
    assert "jump" not in s.key_bindings
    assert s.key_bindings["left"] == [pygame.K_LEFT, pygame.K_a]


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '"loud"', '{"sound_volume": "max"}', '{"key_bindings": [1]}'])
def test_corrupt_file_is_regenerated(tmp_path, content):
    path = tmp_path / "settings.json"
    path.write_text(content)
    s = Settings(str(path))
    assert s.sound_volume == 0.5
    assert s.key_bindings["fire"] == [pygame.K_SPACE]
    data = json.loads(path.read_text())
    assert data["sound_volume"] == 0.5


def test_singleton_uses_env_path(tmp_path):
    s = Settings.get()
    assert s is Settings.get()
    assert s.path == str(tmp_path / "settings.json")
