"""ARGB color model, u32 packing and alpha compositing."""

from __future__ import annotations

from dataclasses import dataclass

_U32_MAX = 0xFFFFFFFF


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} channel out of range: {value}")


def pack_argb(a: int, r: int, g: int, b: int) -> int:
    return (a << 24) | (r << 16) | (g << 8) | b


def unpack_argb(value: int) -> "Color":
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"packed pixel out of u32 range: {value}")
    return Color(
        a=(value >> 24) & 0xFF,
        r=(value >> 16) & 0xFF,
        g=(value >> 8) & 0xFF,
        b=value & 0xFF,
    )


@dataclass(frozen=True)
class Color:
    a: int
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_channel("alpha", self.a)
        _check_channel("red", self.r)
        _check_channel("green", self.g)
        _check_channel("blue", self.b)

    @property
    def packed(self) -> int:
        return pack_argb(self.a, self.r, self.g, self.b)

    def to_bytes(self) -> bytes:
        return bytes((self.a, self.r, self.g, self.b))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Color":
        if len(data) != 4:
            raise ValueError("ARGB data must be exactly 4 bytes")
        return cls(data[0], data[1], data[2], data[3])


def as_packed(color: Color | int) -> int:
    if isinstance(color, Color):
        return color.packed
    return unpack_argb(color).packed


def blend(dst: int, src: int) -> int:
    """Composite ``src`` over ``dst`` using the source alpha as weight.

    The result is always fully opaque.
    """
    under = unpack_argb(dst)
    over = unpack_argb(src)
    alpha = over.a
    if alpha == 255:
        return pack_argb(255, over.r, over.g, over.b)

    inv = 255 - alpha
    r = (over.r * alpha + under.r * inv) // 255
    g = (over.g * alpha + under.g * inv) // 255
    b = (over.b * alpha + under.b * inv) // 255
    return pack_argb(255, r, g, b)
