from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np

from rasterkit import BLUE, RED, WHITE, Canvas, Circle, Line, Rectangle


@dataclass(frozen=True)
class Target:
    """Composite shape built only from the canvas primitives."""

    center: tuple[int, int]
    radius: int

    def draw(self, canvas: Canvas) -> None:
        cx, cy = self.center
        canvas.draw_circle_solid(cx, cy, self.radius, RED)
        canvas.draw_circle_solid(cx, cy, self.radius * 2 // 3, WHITE)
        canvas.draw_circle_solid(cx, cy, self.radius // 3, RED)
        canvas.draw_circle(cx, cy, self.radius + 2, BLUE)


def _ascii_preview(canvas: Canvas) -> str:
    lit = np.any(canvas.buffer, axis=2)
    return "\n".join("".join("#" if v else "." for v in row) for row in lit)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    canvas = Canvas(48, 32)
    canvas.draw(Rectangle(anchor=(1, 1), width=45, height=29))
    canvas.draw(Target(center=(16, 15), radius=9))
    canvas.draw(Line(end1=(30, 5), end2=(44, 26), width=3, capped=True, color=BLUE))
    canvas.draw(Circle(center=(38, 10), radius=3, solid=True))
    print(_ascii_preview(canvas))


if __name__ == "__main__":
    main()
