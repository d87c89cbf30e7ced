import pygame
import pytest

from skyraid import audio_service
from skyraid.asset_manager import AssetManager
from skyraid.audio_service import AudioService
from skyraid.settings import Settings


class DummySound:
    def __init__(self):
        self.last_volume = None
        self.play_calls = 0

    def set_volume(self, v):
        self.last_volume = v

    def play(self, loops=0):
        self.play_calls += 1


class DummyChannel:
    plays = []
    fades = []

    def __init__(self, index):
        self.index = index

    def play(self, snd, loops=0, fade_ms=0):
        DummyChannel.plays.append((self.index, loops, fade_ms))

    def fadeout(self, ms):
        DummyChannel.fades.append((self.index, ms))


class FakeAssets(AssetManager):
    def __init__(self, missing=()):
        super().__init__("unused/")
        self.missing = set(missing)
        self.sound = DummySound()
        self.requests = []

    def get_sound(self, rel_path):
        self.requests.append(rel_path)
        if rel_path in self.missing:
            raise FileNotFoundError(rel_path)
        return self.sound


@pytest.fixture
def make_service(monkeypatch):
    DummyChannel.plays = []
    DummyChannel.fades = []
    monkeypatch.setattr(audio_service.pygame.mixer, "Channel", DummyChannel)

    def build(missing=()):
        assets = FakeAssets(missing)
        svc = AudioService(Settings.get(), assets)
        svc.enabled = True  # independent of the host's audio device
        return svc, assets

    yield build
    pygame.mixer.quit()


def test_cue_plays_sound_with_scaled_volume(make_service):
    svc, assets = make_service()
    Settings.get().sound_volume = 0.5
    svc.cue("shoot")
    assert assets.sound.play_calls == 1
    assert assets.sound.last_volume == pytest.approx(0.5 * 0.4)
    svc.cue("shoot")
    assert assets.requests == ["shoot.wav"]


def test_unknown_cue_is_ignored(make_service):
    svc, assets = make_service()
    svc.cue("fanfare")
    assert assets.requests == []


def test_missing_sound_logged_once_then_skipped(make_service):
    svc, assets = make_service(missing={"explosion.wav"})
    svc.cue("explosion")
    svc.cue("explosion")
    assert assets.requests == ["explosion.wav"]
    assert assets.sound.play_calls == 0


def test_engine_loops_on_reserved_channel(make_service):
    svc, _ = make_service()
    svc.cue("engine-start")
    svc.cue("engine-start")
    assert DummyChannel.plays == [(0, -1, 2000)]
    svc.cue("engine-stop")
    svc.cue("engine-stop")
    assert DummyChannel.fades == [(0, 300)]
    svc.cue("engine-start")
    assert len(DummyChannel.plays) == 2


def test_disabled_service_is_silent(make_service):
    svc, assets = make_service()
    svc.enabled = False
    svc.cue("refuel")
    assert assets.requests == []


def test_every_playable_cue_names_a_sound_file():
    playable = set(audio_service.AUDIO_CUES) - {audio_service.CUE_ENGINE_STOP}
    assert set(audio_service.CUE_FILES) == playable
    assert set(audio_service.CUE_VOLUME) == playable


def test_harness_without_sound_files_stays_silent(make_service):
    svc, assets = make_service(missing=set(audio_service.CUE_FILES.values()))
    for cue in audio_service.AUDIO_CUES:
        svc.cue(cue)
    assert assets.sound.play_calls == 0
    assert DummyChannel.plays == []
