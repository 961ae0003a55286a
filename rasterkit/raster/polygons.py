from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from rasterkit.color import ColorLike, to_rgb
from rasterkit.raster.lines import draw_line

if TYPE_CHECKING:
    from rasterkit.canvas import Canvas

LOGGER = logging.getLogger(__name__)

Vertex = tuple[int, int]
Edge = tuple[Vertex, Vertex]


def draw_polygon(canvas: Canvas, vertices: Iterable[Vertex], color: ColorLike) -> None:
    pts = _as_points(vertices)
    if len(pts) < 2:
        return
    rgb = to_rgb(color)
    for (x0, y0), (x1, y1) in zip(pts, pts[1:]):
        draw_line(canvas, x0, y0, x1, y1, rgb)
    x0, y0 = pts[-1]
    x1, y1 = pts[0]
    draw_line(canvas, x0, y0, x1, y1, rgb)


def draw_polygon_solid(canvas: Canvas, vertices: Iterable[Vertex], closed: bool, color: ColorLike) -> None:
    """Fill a polygon with the even-odd rule, one scanline at a time.

    ``closed`` decides whether the last-to-first edge takes part in the
    crossing test. A pixel ``x`` on row ``y`` is filled when it lies in
    ``[left, right)`` for a pair of sorted crossings, and an edge crosses row
    ``y`` when ``top <= y < bottom``.
    """
    pts = _as_points(vertices)
    if len(pts) < 3:
        LOGGER.debug("skipping fill of %d-vertex polygon", len(pts))
        return
    rgb = to_rgb(color)

    edges = scanline_edges(pts, closed)
    if not edges:
        LOGGER.debug("skipping fill of polygon without non-horizontal edges")
        return

    y_start = max(0, min(top[1] for top, _ in edges))
    y_stop = min(canvas.height, max(bottom[1] for _, bottom in edges))
    for y in range(y_start, y_stop):
        crossings = row_crossings(edges, y)
        for left, right in zip(crossings[0::2], crossings[1::2]):
            if left < right:
                canvas.draw_hline(left, right - 1, y, rgb)


def scanline_edges(pts: list[Vertex], closed: bool) -> list[Edge]:
    """Non-horizontal edges of the chain, each ordered top vertex first."""
    pairs = list(zip(pts, pts[1:]))
    if closed:
        pairs.append((pts[-1], pts[0]))
    edges: list[Edge] = []
    for a, b in pairs:
        if a[1] == b[1]:
            continue
        edges.append((a, b) if a[1] < b[1] else (b, a))
    return edges


def row_crossings(edges: list[Edge], y: int) -> list[int]:
    """Sorted first pixel columns at or right of each edge crossing on row ``y``."""
    xs: list[int] = []
    for (xa, ya), (xb, yb) in edges:
        if ya <= y < yb:
            num = xa * (yb - ya) + (y - ya) * (xb - xa)
            xs.append(-(-num // (yb - ya)))
    xs.sort()
    return xs


def _as_points(vertices: Iterable[Vertex]) -> list[Vertex]:
    return [(int(x), int(y)) for x, y in vertices]
