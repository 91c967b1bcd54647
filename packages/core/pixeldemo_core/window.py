"""Toolkit-neutral window interface consumed by the frame loop."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from pixeldemo_renderer import FrameBuffer


class Key(str, Enum):
    ESCAPE = "Escape"


class MouseButton(str, Enum):
    LEFT = "Left"
    MIDDLE = "Middle"
    RIGHT = "Right"


class MouseMode(str, Enum):
    PASS = "Pass"
    CLAMP = "Clamp"
    DISCARD = "Discard"


class Window(Protocol):
    def is_open(self) -> bool: ...

    def is_key_down(self, key: Key) -> bool: ...

    def get_mouse_down(self, button: MouseButton) -> bool: ...

    def get_mouse_pos(self, mode: MouseMode) -> tuple[float, float] | None: ...

    def update_with_buffer(self, buffer: FrameBuffer) -> None: ...

    def set_target_fps(self, fps: int) -> None: ...


def round_position(pos: tuple[float, float]) -> tuple[int, int]:
    """Round a client-area position to the nearest pixel."""
    return int(pos[0] + 0.5), int(pos[1] + 0.5)
