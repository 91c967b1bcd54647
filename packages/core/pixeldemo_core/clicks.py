"""Mouse button edge detection."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ClickDetector:
    """Reports a click when a held button is released."""

    down: bool = False
    armed: bool = False

    def sample(self, pressed: bool) -> bool:
        self.down = pressed
        if pressed:
            self.armed = True
            return False
        if self.armed:
            self.armed = False
            return True
        return False
