from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Iterator

from rasterkit.color import ColorLike, to_rgb

if TYPE_CHECKING:
    from rasterkit.canvas import Canvas

LOGGER = logging.getLogger(__name__)


def iter_circle(radius: int) -> Iterator[tuple[int, int]]:
    """Yield one octant of midpoint-circle offsets as ``(x_offset, y_offset)``.

    Offsets start at ``(radius, 0)`` and stop once ``y_offset`` passes
    ``x_offset``; mirroring them eight ways gives the full outline.
    """
    if radius < 0:
        return
    e = -radius
    x_off = radius
    y_off = 0
    while y_off <= x_off:
        yield (x_off, y_off)
        e += 2 * y_off + 1
        y_off += 1
        if e >= 0:
            e -= 2 * x_off - 1
            x_off -= 1


def half_width(radius: int, dy: int) -> int:
    """Widest outline x-offset on row ``dy`` of a midpoint circle, ``|dy| <= radius``.

    Equal to the ``x_offset`` that ``iter_circle`` pairs with ``y_offset ==
    dy`` inside the octant, and to the largest mirrored offset beyond it: the
    largest ``x`` with ``x*x + dy*dy < radius*radius + radius``.
    """
    if dy == 0:
        return radius
    return math.isqrt(radius * radius + radius - dy * dy - 1)


def draw_circle(canvas: Canvas, cx: int, cy: int, radius: int, color: ColorLike) -> None:
    rgb = to_rgb(color)
    if radius < 0:
        LOGGER.debug("skipping circle with negative radius %d", radius)
        return
    for yo in _visible_octant_rows(canvas, cx, cy, radius):
        xo = half_width(radius, yo)
        if yo > xo:
            continue
        canvas.set(cx + xo, cy + yo, rgb)
        canvas.set(cx + xo, cy - yo, rgb)
        canvas.set(cx - xo, cy + yo, rgb)
        canvas.set(cx - xo, cy - yo, rgb)
        canvas.set(cx + yo, cy + xo, rgb)
        canvas.set(cx + yo, cy - xo, rgb)
        canvas.set(cx - yo, cy + xo, rgb)
        canvas.set(cx - yo, cy - xo, rgb)


def draw_circle_solid(canvas: Canvas, cx: int, cy: int, radius: int, color: ColorLike) -> None:
    rgb = to_rgb(color)
    if radius < 0:
        LOGGER.debug("skipping solid circle with negative radius %d", radius)
        return
    for dy in range(max(-radius, -cy), min(radius, canvas.height - 1 - cy) + 1):
        half = half_width(radius, abs(dy))
        canvas.draw_hline(cx - half, cx + half, cy + dy, rgb)


def _visible_octant_rows(canvas: Canvas, cx: int, cy: int, radius: int) -> list[int]:
    # y_offsets whose mirrored points can land on a canvas row or column
    offsets: set[int] = set()
    for y in range(max(0, cy - radius), min(canvas.height, cy + radius + 1)):
        offsets.add(abs(y - cy))
    for x in range(max(0, cx - radius), min(canvas.width, cx + radius + 1)):
        offsets.add(abs(x - cx))
    return sorted(offsets)
