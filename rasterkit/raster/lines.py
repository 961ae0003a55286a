from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from rasterkit.color import ColorLike, to_rgb

if TYPE_CHECKING:
    from rasterkit.canvas import Canvas


def iter_line(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the Bresenham pixels from (x0, y0) to (x1, y1), both ends included.

    Endpoints are ordered before stepping (by x for shallow slopes, by y for
    steep ones) so both directions produce the same pixels.
    """
    seg = _Segment(x0, y0, x1, y1)
    return seg.points(range(seg.major_len + 1))


def draw_line(canvas: Canvas, x0: int, y0: int, x1: int, y1: int, color: ColorLike) -> None:
    rgb = to_rgb(color)
    seg = _Segment(x0, y0, x1, y1)
    for x, y in seg.points(seg.visible_steps(canvas.width, canvas.height)):
        canvas.set(x, y, rgb)


class _Segment:
    """A line in major/minor axis form.

    Step ``i`` sits at ``major0 + i`` on the major axis and moves
    ``(2 * minor_len * i + major_len) // (2 * major_len)`` pixels along the
    minor axis, the closed form of the Bresenham decision variable.
    """

    def __init__(self, x0: int, y0: int, x1: int, y1: int) -> None:
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        self.steep = dy > dx
        if self.steep:
            if y1 < y0:
                x0, y0, x1, y1 = x1, y1, x0, y0
            self.major0, self.minor0 = y0, x0
            self.major_len, self.minor_len = dy, dx
            self.step = 1 if x1 >= x0 else -1
        else:
            if x1 < x0:
                x0, y0, x1, y1 = x1, y1, x0, y0
            self.major0, self.minor0 = x0, y0
            self.major_len, self.minor_len = dx, dy
            self.step = 1 if y1 >= y0 else -1

    def offset(self, i: int) -> int:
        if self.major_len == 0:
            return 0
        return (2 * self.minor_len * i + self.major_len) // (2 * self.major_len)

    def points(self, steps: range) -> Iterator[tuple[int, int]]:
        for i in steps:
            major = self.major0 + i
            minor = self.minor0 + self.step * self.offset(i)
            yield (minor, major) if self.steep else (major, minor)

    def visible_steps(self, width: int, height: int) -> range:
        major_size, minor_size = (height, width) if self.steep else (width, height)
        lo = max(0, -self.major0)
        hi = min(self.major_len, major_size - 1 - self.major0)

        # offsets that keep the minor coordinate on the canvas
        if self.step > 0:
            k_lo, k_hi = -self.minor0, minor_size - 1 - self.minor0
        else:
            k_lo, k_hi = self.minor0 - minor_size + 1, self.minor0
        k_lo = max(k_lo, 0)
        k_hi = min(k_hi, self.minor_len)
        if k_lo > k_hi:
            return range(0)

        if self.minor_len > 0:
            two_m = 2 * self.major_len
            two_n = 2 * self.minor_len
            lo = max(lo, _ceil_div(two_m * k_lo - self.major_len, two_n))
            hi = min(hi, _ceil_div(two_m * (k_hi + 1) - self.major_len, two_n) - 1)
        return range(lo, hi + 1)


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)
