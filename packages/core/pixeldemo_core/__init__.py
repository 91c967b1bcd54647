"""Core demo logic: screens, click handling, frame loop, settings and logging."""

from .clicks import ClickDetector
from .config import AppConfig, load_config, save_config
from .diagnostics import build_doctor_payload
from .errors import PixelDemoError, PresentError, WindowCreationError
from .frame_loop import AppState, FrameLoop, animation_phase
from .performance import FrameSample, FrameStats
from .screens import ButtonLayout, ScreenId, Transition, handle_click, visible_buttons
from .window import Key, MouseButton, MouseMode, Window, round_position

__all__ = [
    "AppConfig",
    "AppState",
    "ButtonLayout",
    "ClickDetector",
    "FrameLoop",
    "FrameSample",
    "FrameStats",
    "Key",
    "MouseButton",
    "MouseMode",
    "PixelDemoError",
    "PresentError",
    "ScreenId",
    "Transition",
    "Window",
    "WindowCreationError",
    "animation_phase",
    "build_doctor_payload",
    "handle_click",
    "load_config",
    "round_position",
    "save_config",
    "visible_buttons",
]
