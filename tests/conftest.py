import os
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module imports (app, skyraid)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless pygame for every test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SKYRAID_LOG_LEVEL", "WARN")

from skyraid.config import GameConfig  # noqa: E402
from skyraid.services import build_headless_services  # noqa: E402
from skyraid.state_manager import Lifecycle  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the real data/settings.json."""
    from skyraid.settings import Settings

    monkeypatch.setenv("SKYRAID_SETTINGS_FILE", str(tmp_path / "settings.json"))
    Settings._instance = None
    yield
    Settings._instance = None


@pytest.fixture
def quiet_config():
    """No random spawns, no opening ladder, no engine trail: an empty sky."""
    return GameConfig(enemy_spawn_chance=0.0, fuel_spawn_chance=0.0, ladder_rungs=0, engine_trail=False)


@pytest.fixture
def services():
    return build_headless_services(seed=1234, clock=lambda: 0.0)


@pytest.fixture
def core(quiet_config, services):
    return Lifecycle(quiet_config, services)
