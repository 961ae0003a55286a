from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

import numpy as np

from .color import BLACK, RGB, ColorLike, to_rgb
from .raster import (
    draw_circle,
    draw_circle_solid,
    draw_line,
    draw_polygon,
    draw_polygon_solid,
    draw_polyline,
    draw_polyline_capped,
)

if TYPE_CHECKING:
    from .config import CanvasSettings
    from .drawables import Drawable

LOGGER = logging.getLogger(__name__)


class Canvas:
    """Fixed-size RGB pixel buffer with clipped drawing primitives.

    Pixels live in a ``(height, width, 3)`` uint8 array, so pixel ``(x, y)``
    is at flat index ``y * width + x``. Writes outside the canvas are dropped
    and reads outside it return the background color.
    """

    def __init__(self, width: int, height: int, background: ColorLike = BLACK) -> None:
        for size in (width, height):
            if isinstance(size, bool) or not isinstance(size, int):
                raise ValueError("width and height must be ints")
        if width < 0 or height < 0:
            raise ValueError("width and height must be >= 0")
        self._width = width
        self._height = height
        self._background = to_rgb(background)
        self._buffer = np.empty((height, width, 3), dtype=np.uint8)
        self._buffer[:, :] = self._background.as_tuple()
        LOGGER.debug("allocated %dx%d canvas", width, height)

    @classmethod
    def from_settings(cls, settings: CanvasSettings) -> Canvas:
        return cls(settings.width, settings.height, background=settings.background)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def background(self) -> RGB:
        return self._background

    @property
    def buffer(self) -> np.ndarray:
        return self._buffer

    def pixels(self) -> np.ndarray:
        return self._buffer.reshape(self._width * self._height, 3)

    def buffer_u32(self) -> np.ndarray:
        buf = self._buffer.astype(np.uint32)
        packed = (buf[:, :, 0] << 16) | (buf[:, :, 1] << 8) | buf[:, :, 2]
        return packed.reshape(-1)

    def copy(self) -> Canvas:
        clone = Canvas(self._width, self._height, background=self._background)
        clone._buffer[:] = self._buffer
        return clone

    def pixel_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> RGB:
        if not self.pixel_inside(x, y):
            return self._background
        r, g, b = self._buffer[y, x]
        return RGB(int(r), int(g), int(b))

    def set(self, x: int, y: int, color: ColorLike) -> None:
        if not self.pixel_inside(x, y):
            return
        self._buffer[y, x] = to_rgb(color).as_tuple()

    def draw_hline(self, x0: int, x1: int, y: int, color: ColorLike) -> None:
        if y < 0 or y >= self._height:
            return
        xa = max(0, min(x0, x1))
        xb = min(self._width - 1, max(x0, x1))
        if xa > xb:
            return
        self._buffer[y, xa : xb + 1] = to_rgb(color).as_tuple()

    def fill(self, color: ColorLike) -> None:
        self._buffer[:, :] = to_rgb(color).as_tuple()

    def clear(self) -> None:
        self.fill(self._background)

    def draw(self, drawable: Drawable) -> None:
        drawable.draw(self)

    def draw_pixel(self, x: int, y: int, color: ColorLike) -> None:
        self.set(x, y, color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: ColorLike) -> None:
        draw_line(self, x0, y0, x1, y1, color)

    def draw_polyline(self, x0: int, y0: int, x1: int, y1: int, width: int, color: ColorLike) -> None:
        draw_polyline(self, x0, y0, x1, y1, width, color)

    def draw_polyline_capped(self, x0: int, y0: int, x1: int, y1: int, width: int, color: ColorLike) -> None:
        draw_polyline_capped(self, x0, y0, x1, y1, width, color)

    def draw_circle(self, cx: int, cy: int, radius: int, color: ColorLike) -> None:
        draw_circle(self, cx, cy, radius, color)

    def draw_circle_solid(self, cx: int, cy: int, radius: int, color: ColorLike) -> None:
        draw_circle_solid(self, cx, cy, radius, color)

    def draw_polygon(self, vertices: Iterable[tuple[int, int]], color: ColorLike) -> None:
        draw_polygon(self, vertices, color)

    def draw_polygon_solid(self, vertices: Iterable[tuple[int, int]], closed: bool, color: ColorLike) -> None:
        draw_polygon_solid(self, vertices, closed, color)

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height}, background={self._background!r})"
