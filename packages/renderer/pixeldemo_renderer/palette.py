"""Built-in colors for the demo screens."""

from __future__ import annotations

from dataclasses import dataclass

from .color import Color


@dataclass(frozen=True)
class Palette:
    background: Color
    options_button: Color
    exit_button: Color

    def exit_button_at(self, phase: int) -> Color:
        """Exit button color with its first channel pulsed by the animation phase."""
        base = self.exit_button
        return Color(phase % 255, base.r, base.g, base.b)


DEFAULT_PALETTE = Palette(
    background=Color(255, 0, 0, 0),
    options_button=Color(0, 255, 255, 0),
    exit_button=Color(0, 255, 0, 0),
)
