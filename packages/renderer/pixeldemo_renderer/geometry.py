"""Axis-aligned rectangles in buffer pixel space."""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[int, int]


class InvalidRectError(ValueError):
    pass


@dataclass(frozen=True)
class Rect:
    """Rectangle with inclusive edges on all four sides."""

    left: int
    top: int
    right: int
    bottom: int

    def __post_init__(self) -> None:
        if min(self.left, self.top, self.right, self.bottom) < 0:
            raise InvalidRectError(f"coordinates must be non-negative: {self}")
        if self.left >= self.right:
            raise InvalidRectError("left coordinate must be less than right coordinate")
        if self.top >= self.bottom:
            raise InvalidRectError("top coordinate must be less than bottom coordinate")

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    def contains(self, point: Point) -> bool:
        x, y = point
        return self.left <= x <= self.right and self.top <= y <= self.bottom
