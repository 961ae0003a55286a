from __future__ import annotations

import math
from typing import TYPE_CHECKING

from rasterkit.color import ColorLike
from rasterkit.raster.circles import draw_circle_solid
from rasterkit.raster.lines import draw_line
from rasterkit.raster.polygons import draw_polygon_solid

if TYPE_CHECKING:
    from rasterkit.canvas import Canvas


def draw_polyline(canvas: Canvas, x0: int, y0: int, x1: int, y1: int, width: int, color: ColorLike) -> None:
    """Draw a segment ``width`` pixels thick as a filled rectangle.

    The rectangle is the segment swept half the width to each side of its
    normal, corners snapped to the pixel grid.
    """
    if width <= 0:
        return
    if width == 1:
        draw_line(canvas, x0, y0, x1, y1, color)
        return

    dx = x1 - x0
    dy = y1 - y0
    length = math.hypot(dx, dy)
    if length == 0:
        canvas.set(x0, y0, color)
        return

    # unit normal scaled to half the stroke width
    nx = -dy / length * width / 2.0
    ny = dx / length * width / 2.0
    vertices = [
        (_snap(x0 + nx), _snap(y0 + ny)),
        (_snap(x0 - nx), _snap(y0 - ny)),
        (_snap(x1 - nx), _snap(y1 - ny)),
        (_snap(x1 + nx), _snap(y1 + ny)),
    ]
    draw_polygon_solid(canvas, vertices, True, color)


def draw_polyline_capped(
    canvas: Canvas, x0: int, y0: int, x1: int, y1: int, width: int, color: ColorLike
) -> None:
    draw_polyline(canvas, x0, y0, x1, y1, width, color)
    if width <= 1:
        return
    draw_circle_solid(canvas, x0, y0, width // 2, color)
    draw_circle_solid(canvas, x1, y1, width // 2, color)


def _snap(v: float) -> int:
    return math.floor(v + 0.5)
