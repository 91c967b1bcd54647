"""Fatal error types raised at the window boundary."""

from __future__ import annotations


class PixelDemoError(Exception):
    pass


class WindowCreationError(PixelDemoError):
    pass


class PresentError(PixelDemoError):
    pass
