from .circles import draw_circle, draw_circle_solid, half_width, iter_circle
from .lines import draw_line, iter_line
from .polygons import draw_polygon, draw_polygon_solid
from .polylines import draw_polyline, draw_polyline_capped

__all__ = [
    "draw_circle",
    "draw_circle_solid",
    "draw_line",
    "draw_polygon",
    "draw_polygon_solid",
    "draw_polyline",
    "draw_polyline_capped",
    "half_width",
    "iter_circle",
    "iter_line",
]
