"""Rasterize pixels, lines, circles and polygons onto an in-memory RGB canvas."""

from .canvas import Canvas
from .color import BLACK, BLUE, CYAN, GREEN, MAGENTA, RED, RGB, RGBA, TRANSPARENT, WHITE, YELLOW, ColorLike, to_rgb
from .config import CanvasSettings, load_canvas_settings
from .drawables import AnchorType, Circle, Drawable, Line, Polygon, Rectangle, Square
from .errors import CanvasConfigError

__all__ = [
    "AnchorType",
    "BLACK",
    "BLUE",
    "CYAN",
    "Canvas",
    "CanvasConfigError",
    "CanvasSettings",
    "Circle",
    "ColorLike",
    "Drawable",
    "GREEN",
    "Line",
    "MAGENTA",
    "Polygon",
    "RED",
    "RGB",
    "RGBA",
    "Rectangle",
    "Square",
    "TRANSPARENT",
    "WHITE",
    "YELLOW",
    "load_canvas_settings",
    "to_rgb",
]
