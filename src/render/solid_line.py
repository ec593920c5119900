"""Hard-edged line rasterizer: visited pixels are overwritten, not blended."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from render.blend import Color, set_pixel
from shared.numeric import round_half_away

if TYPE_CHECKING:
    from collections.abc import Iterator

    import numpy as np

Point = tuple[float, float]


def solid_line_pixels(p0: Point, p1: Point) -> Iterator[tuple[int, int]]:
    """
    Yield pixels visited by a straight step walk from p0 to p1.

    Endpoints are truncated to integer pixels first. The walk takes
    ``round(distance)`` steps and may visit the same pixel more than once.
    """
    x1, y1 = int(p0[0]), int(p0[1])
    x2, y2 = int(p1[0]), int(p1[1])
    steps = int(round_half_away(math.hypot(x2 - x1, y2 - y1)))

    if steps == 0:
        yield x1, y1
        return

    for t in range(steps + 1):
        yield x1 + int((x2 - x1) * t / steps), y1 + int((y2 - y1) * t / steps)


def draw_solid_line(color: Color, p0: Point, p1: Point, buffer: np.ndarray) -> None:
    """Overwrite every pixel on the walk from p0 to p1 with ``color``."""
    for x, y in solid_line_pixels(p0, p1):
        set_pixel(buffer, x, y, color)
