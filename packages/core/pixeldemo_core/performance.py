"""Frame rate bookkeeping for the GUI frame timer."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class FrameSample:
    frames: int
    fps: float
    below_target: bool


class FrameStats:
    def __init__(self, target_fps: int = 60, clock: Callable[[], float] = time.perf_counter) -> None:
        self.target_fps = target_fps
        self.frames = 0
        self._clock = clock
        self._last: float | None = None
        self._ewma_fps = 0.0

    @property
    def fps(self) -> float:
        return self._ewma_fps

    def tick(self) -> FrameSample:
        now = self._clock()
        if self._last is not None:
            elapsed = max(now - self._last, 1e-9)
            fps = 1.0 / elapsed
            self._ewma_fps = fps if self._ewma_fps == 0 else (0.9 * self._ewma_fps + 0.1 * fps)
        self._last = now
        self.frames += 1
        return FrameSample(
            frames=self.frames,
            fps=self._ewma_fps,
            below_target=0 < self._ewma_fps < self.target_fps * 0.8,
        )
