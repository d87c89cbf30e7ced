"""Application entry harness.

Wires the simulation core to pygame: one central event poll per frame,
InputRouter -> CommandSet snapshot -> Lifecycle step (via FrameDriver)
-> Renderer. ENTER starts a run, advances after a cleared sector and
redeploys after game over; ESC quits.

Environment:
    SKYRAID_SEED        fixed RNG seed (default: random)
    SKYRAID_LOG_LEVEL   DEBUG | INFO | WARN | ERROR
    SKYRAID_TUNING_FILE JSON tuning overrides (default data/tuning.json)
"""

from __future__ import annotations

import os

import pygame

from skyraid.audio_service import AudioService
from skyraid.config import load_config
from skyraid.frame_driver import FrameDriver
from skyraid.input_router import InputRouter
from skyraid.logger import get_logger
from skyraid.renderer import Renderer
from skyraid.rng_service import RNGService
from skyraid.run_state import Phase
from skyraid.services import ServiceContainer
from skyraid.settings import Settings
from skyraid.state_manager import Lifecycle

log = get_logger("app")


def handle_confirm(core: Lifecycle) -> None:
    if core.phase is Phase.IDLE:
        core.start()
    elif core.phase is Phase.LEVEL_COMPLETE:
        core.advance()
    elif core.phase is Phase.GAME_OVER:
        core.restart()


def main():
    pygame.init()
    settings = Settings.get()
    config = load_config()
    width, height = int(config.world_width), int(config.world_height)
    if settings.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption("Sky Raid")
    world = pygame.Surface((width, height))
    clock = pygame.time.Clock()

    seed = os.environ.get("SKYRAID_SEED")
    rng = RNGService(int(seed) if seed else None)
    services = ServiceContainer(audio=AudioService.get(), rng=rng, clock=pygame.time.get_ticks)
    core = Lifecycle(config, services, on_game_over=lambda score: log.info("final score", score))
    router = InputRouter(settings.key_bindings)
    renderer = Renderer(width, height)
    driver = FrameDriver(config.frame_ms)

    latest = {"snap": core.snapshot()}

    def step(dt_ms: float):
        # Commands are frozen here, before the step begins
        latest["snap"] = core.step(router.snapshot(), dt_ms)
        return latest["snap"]

    driver.attach(step)
    while driver.attached:
        events = pygame.event.get()
        for action in router.process(events):
            if action == "quit":
                driver.detach()
            elif action == "confirm":
                handle_confirm(core)
                router.release_all()
        if not driver.attached:
            break

        clock.tick(60)
        driver.on_frame(pygame.time.get_ticks())

        renderer.render(latest["snap"], world)
        if settings.show_fps:
            renderer.draw_fps(world, clock.get_fps())
        current = pygame.display.get_surface()
        if current is not None:
            screen = current
        pygame.transform.scale(world, screen.get_size(), screen)
        pygame.display.flip()

    services.audio.shutdown()
    settings.save_settings()
    pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
