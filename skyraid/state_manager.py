"""Lifecycle state machine for a run.

Four phases, exactly one active at a time:

    IDLE --start--> PLAYING --fuel/fatal hit--> GAME_OVER --restart--> PLAYING
                       |                                        ^
                       +--distance--> LEVEL_COMPLETE --advance--+

Only ``PLAYING`` does work when stepped; every other phase returns the
current snapshot unchanged. Entering ``PLAYING`` from ``IDLE`` or
``GAME_OVER`` is a full reset (level 1, score 0, full tank, fresh store
seeded with the opening ladder). ``advance`` from ``LEVEL_COMPLETE`` bumps
the level, refills the tank and rebuilds the level while score and lives
carry over.

Usage (see ``app.py`` for the pygame harness):

    core = Lifecycle(config, services, on_game_over=print)
    core.start()
    while core.phase is Phase.PLAYING:
        snap = core.step(router.snapshot())
"""

from __future__ import annotations

from typing import Callable, FrozenSet, Tuple

from skyraid.config import GameConfig
from skyraid.constants import CUE_ENGINE_START, CUE_ENGINE_STOP
from skyraid.input_commands import IDLE_COMMANDS, CommandSet
from skyraid.logger import get_logger
from skyraid.run_state import LevelState, Phase, RunState
from skyraid.services import ServiceContainer, build_headless_services
from skyraid.simulation import LEVEL_COMPLETE, Simulation
from skyraid.snapshot import RenderSnapshot, SnapshotService

_state_log = get_logger("state")

GameOverListener = Callable[[int], None]

TRANSITIONS: FrozenSet[Tuple[Phase, Phase]] = frozenset(
    {
        (Phase.IDLE, Phase.PLAYING),
        (Phase.PLAYING, Phase.GAME_OVER),
        (Phase.PLAYING, Phase.LEVEL_COMPLETE),
        (Phase.LEVEL_COMPLETE, Phase.PLAYING),
        (Phase.GAME_OVER, Phase.PLAYING),
    }
)


class LifecycleError(RuntimeError):
    """Raised for a transition that is not in ``TRANSITIONS``."""


class Lifecycle:
    def __init__(
        self,
        config: GameConfig | None = None,
        services: ServiceContainer | None = None,
        on_game_over: GameOverListener | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.services = services or build_headless_services()
        self.simulation = Simulation(self.config, self.services)
        self.run = RunState.idle(self.config)
        self.on_game_over = on_game_over
        _state_log.debug("Lifecycle init (idle)")

    # Introspection -------------------------------------------------
    @property
    def phase(self) -> Phase:
        return self.run.phase

    def snapshot(self) -> RenderSnapshot:
        return SnapshotService.capture(self.run, self.config)

    # Explicit actions ----------------------------------------------
    def start(self) -> RenderSnapshot:
        """Begin a new run from IDLE (or GAME_OVER, which is the same as ``restart``)."""
        self._check(Phase.PLAYING)
        now = self.services.now_ms()
        run = RunState.idle(self.config)
        run.started_at_ms = now
        run.level = LevelState.fresh(self.config, started_at_ms=now)
        self.run = run
        self.simulation.seed_level(run)
        self._enter(Phase.PLAYING)
        _state_log.info("run started")
        return self.snapshot()

    def restart(self) -> RenderSnapshot:
        if self.run.phase is not Phase.GAME_OVER:
            self._reject("restart")
        return self.start()

    def advance(self) -> RenderSnapshot:
        """LEVEL_COMPLETE -> PLAYING on the next level."""
        if self.run.phase is not Phase.LEVEL_COMPLETE:
            self._reject("advance")
        level = self.run.economy.advance_level()
        self.run.level = LevelState.fresh(
            self.config, started_at_ms=self.services.now_ms(), start=self.config.next_level_start()
        )
        self.simulation.seed_level(self.run)
        self._enter(Phase.PLAYING)
        _state_log.info("advanced to level", level, "score", self.run.economy.score)
        return self.snapshot()

    # Stepping ------------------------------------------------------
    def step(self, commands: CommandSet | None = None, dt_ms: float | None = None) -> RenderSnapshot:
        """Advance one frame. A no-op outside PLAYING."""
        if self.run.phase is not Phase.PLAYING:
            return self.snapshot()
        commands = commands if commands is not None else IDLE_COMMANDS
        dt = self.config.frame_ms if dt_ms is None else dt_ms
        outcome = self.simulation.step(self.run, commands, dt)
        self.run.shots_fired += outcome.shots
        self.run.kills += outcome.collisions.get("kills", 0)
        if outcome.terminal == LEVEL_COMPLETE:
            self._enter(Phase.LEVEL_COMPLETE)
        elif outcome.terminal is not None:
            self._game_over(outcome.cause or outcome.terminal)
        return self.snapshot()

    # Transitions ---------------------------------------------------
    def _check(self, target: Phase) -> None:
        if (self.run.phase, target) not in TRANSITIONS:
            _state_log.warn("rejected transition", self.run.phase.value, "->", target.value)
            raise LifecycleError(f"no transition {self.run.phase.value} -> {target.value}")

    def _reject(self, action: str) -> None:
        _state_log.warn("rejected", action, "while", self.run.phase.value)
        raise LifecycleError(f"{action} is not valid while {self.run.phase.value}")

    def _enter(self, target: Phase) -> None:
        self._check(target)
        previous = self.run.phase
        self.run.phase = target
        if target is Phase.PLAYING:
            self.services.cue(CUE_ENGINE_START)
        elif previous is Phase.PLAYING:
            self.services.cue(CUE_ENGINE_STOP)
        _state_log.info("transition", previous.value, "->", target.value)

    def _game_over(self, cause: str) -> None:
        run = self.run
        run.final_score = run.economy.score
        run.game_over_cause = cause
        self._enter(Phase.GAME_OVER)
        if run.notified:
            return
        run.notified = True
        _state_log.info(
            "game over:", cause, "final score", run.final_score, "kills", run.kills, "shots fired", run.shots_fired
        )
        if self.on_game_over is not None:
            self.on_game_over(run.final_score)


__all__ = ["Lifecycle", "LifecycleError", "TRANSITIONS", "GameOverListener"]
