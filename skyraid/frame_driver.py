"""FrameDriver: one simulation step per display frame.

The host loop (pygame clock, a test, a batch runner) calls ``on_frame``
once per refresh with the current wall-clock time. The driver turns that
into a step delta and invokes the subscribed step callback exactly once.
Steps are never interleaved: a step finishes before ``on_frame`` returns,
and ``detach()`` requested from inside a step only takes effect after that
step completes.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from skyraid.logger import get_logger

log = get_logger("frames")

StepCallback = Callable[[float], Any]


class FrameDriver:
    def __init__(self, nominal_ms: float, max_delta_ms: float = 250.0) -> None:
        self.nominal_ms = nominal_ms
        self.max_delta_ms = max_delta_ms
        self._callback: StepCallback | None = None
        self._last_ms: float | None = None
        self._in_step = False
        self._detach_requested = False
        self.frames = 0

    @property
    def attached(self) -> bool:
        return self._callback is not None

    def attach(self, callback: StepCallback) -> None:
        self._callback = callback
        self._last_ms = None
        self._detach_requested = False
        log.debug("frame driver attached")

    def detach(self) -> None:
        if self._in_step:
            self._detach_requested = True
            return
        self._callback = None
        log.debug("frame driver detached after", self.frames, "frames")

    def on_frame(self, now_ms: float) -> Any:
        """Run one step for the frame at ``now_ms``. Returns the step result or None."""
        if self._callback is None:
            return None
        if self._last_ms is None:
            dt = self.nominal_ms
        else:
            dt = max(0.0, min(self.max_delta_ms, now_ms - self._last_ms))
        self._last_ms = now_ms
        self._in_step = True
        try:
            result = self._callback(dt)
        finally:
            self._in_step = False
            self.frames += 1
        if self._detach_requested:
            self._detach_requested = False
            self.detach()
        return result

    def run(self, frame_times: Iterable[float]) -> int:
        """Drive frames from an iterable of timestamps until it ends or the driver detaches."""
        ran = 0
        for now in frame_times:
            if not self.attached:
                break
            self.on_frame(now)
            ran += 1
        return ran


__all__ = ["FrameDriver", "StepCallback"]
