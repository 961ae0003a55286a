from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

from .color import WHITE, ColorLike

if TYPE_CHECKING:
    from .canvas import Canvas


@runtime_checkable
class Drawable(Protocol):
    """Anything that can render itself onto a canvas.

    Implementations only need a ``draw(canvas)`` method; they can be drawn
    with ``canvas.draw(shape)`` or ``shape.draw(canvas)``.
    """

    def draw(self, canvas: Canvas) -> None:
        ...


class AnchorType(Enum):
    CENTER = "center"
    CORNER = "corner"  # top-left


@dataclass(frozen=True)
class Line:
    end1: tuple[float, float]
    end2: tuple[float, float]
    width: float = 1.0
    capped: bool = False
    color: ColorLike = WHITE

    def draw(self, canvas: Canvas) -> None:
        width = round(self.width)
        if width <= 0:
            return
        x0, y0 = round(self.end1[0]), round(self.end1[1])
        x1, y1 = round(self.end2[0]), round(self.end2[1])
        if width == 1:
            canvas.draw_line(x0, y0, x1, y1, self.color)
        elif self.capped:
            canvas.draw_polyline_capped(x0, y0, x1, y1, width, self.color)
        else:
            canvas.draw_polyline(x0, y0, x1, y1, width, self.color)


@dataclass(frozen=True)
class Circle:
    center: tuple[float, float]
    radius: float
    solid: bool = False
    color: ColorLike = WHITE

    def draw(self, canvas: Canvas) -> None:
        cx, cy = round(self.center[0]), round(self.center[1])
        radius = round(self.radius)
        if self.solid:
            canvas.draw_circle_solid(cx, cy, radius, self.color)
        else:
            canvas.draw_circle(cx, cy, radius, self.color)


@dataclass(frozen=True)
class Rectangle:
    anchor: tuple[int, int]
    width: int
    height: int
    anchor_type: AnchorType = AnchorType.CORNER
    solid: bool = False
    color: ColorLike = WHITE

    def vertices(self) -> list[tuple[int, int]]:
        return _box_vertices(self.anchor, self.width, self.height, self.anchor_type)

    def draw(self, canvas: Canvas) -> None:
        _draw_box(canvas, self.vertices(), self.solid, self.color)


@dataclass(frozen=True)
class Square:
    anchor: tuple[int, int]
    length: int
    anchor_type: AnchorType = AnchorType.CORNER
    solid: bool = False
    color: ColorLike = WHITE

    def vertices(self) -> list[tuple[int, int]]:
        return _box_vertices(self.anchor, self.length, self.length, self.anchor_type)

    def draw(self, canvas: Canvas) -> None:
        _draw_box(canvas, self.vertices(), self.solid, self.color)


@dataclass(frozen=True)
class Polygon:
    vertices: Sequence[tuple[int, int]]
    closed: bool = True
    solid: bool = False
    color: ColorLike = WHITE

    def draw(self, canvas: Canvas) -> None:
        if self.solid:
            canvas.draw_polygon_solid(self.vertices, self.closed, self.color)
        else:
            canvas.draw_polygon(self.vertices, self.color)


def _box_vertices(anchor: tuple[int, int], width: int, height: int, anchor_type: AnchorType) -> list[tuple[int, int]]:
    ax, ay = anchor
    if anchor_type is AnchorType.CENTER:
        hw = width // 2
        hh = height // 2
        return [(ax - hw, ay - hh), (ax + hw, ay - hh), (ax + hw, ay + hh), (ax - hw, ay + hh)]
    return [(ax, ay), (ax + width, ay), (ax + width, ay + height), (ax, ay + height)]


def _draw_box(canvas: Canvas, vertices: list[tuple[int, int]], solid: bool, color: ColorLike) -> None:
    if solid:
        canvas.draw_polygon_solid(vertices, True, color)
    else:
        canvas.draw_polygon(vertices, color)
