from __future__ import annotations

from dataclasses import dataclass
import numbers
import operator
from typing import Sequence, TypeAlias

import numpy as np


def _check_channel(obj: object, name: str) -> None:
    value = getattr(obj, name)
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValueError(f"channel `{name}` must be an int, got {type(value).__name__}")
    value = operator.index(value)
    if value < 0 or value > 255:
        raise ValueError(f"channel `{name}` must be in [0, 255], got {value}")
    # numpy scalars are stored as plain ints
    object.__setattr__(obj, name, value)


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_channel(self, "r")
        _check_channel(self, "g")
        _check_channel(self, "b")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def with_alpha(self, a: int = 255) -> RGBA:
        return RGBA(self.r, self.g, self.b, a)

    def lerp(self, other: RGB, t: float) -> RGB:
        """Mix towards ``other`` by ``t`` in [0, 1]; channels are truncated."""
        t = min(1.0, max(0.0, t))
        return RGB(
            int((1.0 - t) * self.r + t * other.r),
            int((1.0 - t) * self.g + t * other.g),
            int((1.0 - t) * self.b + t * other.b),
        )

    def add_rgba(self, other: RGBA) -> RGB:
        """Color of ``other`` laid over this one with its alpha as weight."""
        rgb, alpha = other.to_rgb()
        return self.lerp(rgb, alpha / 255.0)


@dataclass(frozen=True)
class RGBA:
    """Color with an alpha channel. Canvases store only the RGB part."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        _check_channel(self, "r")
        _check_channel(self, "g")
        _check_channel(self, "b")
        _check_channel(self, "a")

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_rgb(self) -> tuple[RGB, int]:
        return RGB(self.r, self.g, self.b), self.a

    def scale_alpha(self, factor: float) -> RGBA:
        a = int(min(255.0, max(0.0, self.a * factor)))
        return RGBA(self.r, self.g, self.b, a)


ColorLike: TypeAlias = RGB | RGBA | Sequence[int] | np.ndarray


def to_rgb(color: ColorLike) -> RGB:
    if isinstance(color, RGB):
        return color
    if isinstance(color, RGBA):
        return RGB(color.r, color.g, color.b)
    if isinstance(color, np.ndarray) and color.shape in ((3,), (4,)):
        return RGB(color[0], color[1], color[2])
    if isinstance(color, (tuple, list)) and len(color) in (3, 4):
        return RGB(color[0], color[1], color[2])
    raise TypeError(f"expected RGB, RGBA, a 3/4-item sequence or array, got {color!r}")


BLACK = RGB(0, 0, 0)
WHITE = RGB(255, 255, 255)
RED = RGB(255, 0, 0)
GREEN = RGB(0, 255, 0)
BLUE = RGB(0, 0, 255)
YELLOW = RGB(255, 255, 0)
CYAN = RGB(0, 255, 255)
MAGENTA = RGB(255, 0, 255)
TRANSPARENT = RGBA(0, 0, 0, 0)
