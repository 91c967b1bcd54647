"""Renderer package for packed ARGB pixel buffers."""

from .color import Color, as_packed, blend, pack_argb, unpack_argb
from .framebuffer import FrameBuffer
from .geometry import InvalidRectError, Point, Rect
from .palette import DEFAULT_PALETTE, Palette

__all__ = [
    "Color",
    "DEFAULT_PALETTE",
    "FrameBuffer",
    "InvalidRectError",
    "Palette",
    "Point",
    "Rect",
    "as_packed",
    "blend",
    "pack_argb",
    "unpack_argb",
]
