"""Virtual screens, button layout and click transitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pixeldemo_renderer import DEFAULT_PALETTE, Color, Palette, Point, Rect

from .logging_setup import frame_extra, get_logger


class ScreenId(str, Enum):
    MAIN = "Main"
    OPTIONS = "Options"


@dataclass(frozen=True)
class ButtonLayout:
    options: Rect
    exit: Rect

    @classmethod
    def for_window(cls, width: int, height: int) -> "ButtonLayout":
        return cls(
            options=Rect(0, 0, width // 10, height // 10),
            exit=Rect(width - width // 10, 0, width, height // 10),
        )


@dataclass(frozen=True)
class Transition:
    screen: ScreenId
    exit_requested: bool = False


def handle_click(screen: ScreenId, point: Point, layout: ButtonLayout) -> Transition:
    logger = get_logger()
    if screen is ScreenId.MAIN:
        if layout.exit.contains(point):
            logger.info("exit button clicked", extra=frame_extra("exit_requested", screen, point=list(point)))
            return Transition(screen, exit_requested=True)
        if layout.options.contains(point):
            logger.info("entering options menu", extra=frame_extra("screen_change", ScreenId.OPTIONS, point=list(point)))
            return Transition(ScreenId.OPTIONS)
    elif screen is ScreenId.OPTIONS:
        # The exit button doubles as "back" here.
        if layout.exit.contains(point):
            logger.info("leaving options menu", extra=frame_extra("screen_change", ScreenId.MAIN, point=list(point)))
            return Transition(ScreenId.MAIN)
    return Transition(screen)


def visible_buttons(
    screen: ScreenId,
    layout: ButtonLayout,
    phase: int,
    palette: Palette = DEFAULT_PALETTE,
) -> list[tuple[Rect, Color]]:
    buttons: list[tuple[Rect, Color]] = []
    if screen is ScreenId.MAIN:
        buttons.append((layout.options, palette.options_button))
    buttons.append((layout.exit, palette.exit_button_at(phase)))
    return buttons
