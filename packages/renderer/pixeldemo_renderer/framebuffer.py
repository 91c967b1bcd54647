"""Packed ARGB framebuffer with rectangle fill and blend helpers."""

from __future__ import annotations

import numpy as np
from PIL import Image

from .color import Color, as_packed, unpack_argb
from .geometry import Rect


class FrameBuffer:
    """Row-major grid of packed ARGB pixels, index = y * width + x."""

    def __init__(self, width: int, height: int, fill: Color | int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("FrameBuffer dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = np.full((height, width), as_packed(fill), dtype=np.uint32)

    def __len__(self) -> int:
        return self.width * self.height

    def clear(self, color: Color | int) -> None:
        self.pixels.fill(as_packed(color))

    def _clipped(self, rect: Rect) -> tuple[slice, slice] | None:
        # Edges are inclusive; anything at or past the buffer edge is dropped.
        x1 = min(rect.right + 1, self.width)
        y1 = min(rect.bottom + 1, self.height)
        if rect.left >= x1 or rect.top >= y1:
            return None
        return slice(rect.top, y1), slice(rect.left, x1)

    def draw_rect(self, rect: Rect, color: Color | int) -> None:
        area = self._clipped(rect)
        if area is None:
            return
        rows, cols = area
        self.pixels[rows, cols] = as_packed(color)

    def blend_rect(self, rect: Rect, color: Color | int) -> None:
        area = self._clipped(rect)
        if area is None:
            return
        rows, cols = area
        src = unpack_argb(as_packed(color))
        dst = self.pixels[rows, cols]

        alpha = np.uint32(src.a)
        inv = np.uint32(255 - src.a)
        out = np.uint32(0xFF000000)
        for shift, channel in ((16, src.r), (8, src.g), (0, src.b)):
            under = (dst >> np.uint32(shift)) & np.uint32(0xFF)
            mixed = (np.uint32(channel) * alpha + under * inv) // np.uint32(255)
            out = out | (mixed << np.uint32(shift))
        self.pixels[rows, cols] = out

    def pixel(self, x: int, y: int) -> int:
        return int(self.pixels[y, x])

    def flat(self) -> np.ndarray:
        return self.pixels.reshape(-1)

    def tobytes(self) -> bytes:
        """Native-endian u32 stream, the layout Qt's RGB32 images expect."""
        return self.pixels.tobytes()

    def to_image(self) -> Image.Image:
        rgb = np.empty((self.height, self.width, 3), dtype=np.uint8)
        rgb[:, :, 0] = (self.pixels >> 16) & 0xFF
        rgb[:, :, 1] = (self.pixels >> 8) & 0xFF
        rgb[:, :, 2] = self.pixels & 0xFF
        return Image.fromarray(rgb)
