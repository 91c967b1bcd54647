"""Per-frame orchestration: animate, render, sample input, dispatch, present."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from pixeldemo_renderer import DEFAULT_PALETTE, FrameBuffer, Palette

from .clicks import ClickDetector
from .logging_setup import frame_extra, get_logger
from .screens import ButtonLayout, ScreenId, handle_click, visible_buttons
from .window import Key, MouseButton, MouseMode, Window, round_position

PHASE_DIVISOR_MS = 90
PHASE_MODULUS = 255


def animation_phase(elapsed_ms: int, divisor_ms: int = PHASE_DIVISOR_MS) -> int:
    return (elapsed_ms // divisor_ms) % PHASE_MODULUS


@dataclass
class AppState:
    screen: ScreenId = ScreenId.MAIN
    left_click: ClickDetector = field(default_factory=ClickDetector)
    phase: int = 0
    running: bool = True


class FrameLoop:
    def __init__(
        self,
        width: int,
        height: int,
        palette: Palette = DEFAULT_PALETTE,
        phase_divisor_ms: int = PHASE_DIVISOR_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.width = width
        self.height = height
        self.palette = palette
        self.phase_divisor_ms = phase_divisor_ms
        self.layout = ButtonLayout.for_window(width, height)
        self.buffer = FrameBuffer(width, height)
        self.state = AppState()
        self.logger = get_logger()
        self._clock = clock
        self._start = clock()

    def elapsed_ms(self) -> int:
        return int((self._clock() - self._start) * 1000)

    def render(self) -> None:
        self.buffer.clear(self.palette.background)
        for rect, color in visible_buttons(self.state.screen, self.layout, self.state.phase, self.palette):
            self.buffer.draw_rect(rect, color)

    def _advance_phase(self) -> None:
        phase = animation_phase(self.elapsed_ms(), self.phase_divisor_ms)
        if phase != self.state.phase:
            self.logger.debug(f"phase = {phase}", extra=frame_extra("phase_change", self.state.screen, phase=phase))
        self.state.phase = phase

    def _dispatch_click(self, window: Window) -> None:
        pos = window.get_mouse_pos(MouseMode.DISCARD)
        if pos is None:
            return
        point = round_position(pos)
        transition = handle_click(self.state.screen, point, self.layout)
        self.state.screen = transition.screen
        if transition.exit_requested:
            self.state.running = False

    def step(self, window: Window) -> bool:
        """Run one frame. Returns False once the loop should stop."""
        if not self.state.running:
            return False
        if not window.is_open() or window.is_key_down(Key.ESCAPE):
            self.state.running = False
            return False

        self._advance_phase()
        self.render()

        if self.state.left_click.sample(window.get_mouse_down(MouseButton.LEFT)):
            self._dispatch_click(window)
            if not self.state.running:
                return False

        window.update_with_buffer(self.buffer)
        return True

    def run(self, window: Window) -> None:
        while self.step(window):
            pass
