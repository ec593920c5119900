"""
Anti-aliased line rasterizer (Xiaolin Wu).

Lines are swept along their major axis; each step splits coverage between
the two pixels straddling the exact minor-axis intersection. Endpoints get
partial coverage proportional to how much of their pixel the segment spans.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from render.blend import Color, blend_pixel
from shared.numeric import fpart, ipart, rfpart, round_half_away

if TYPE_CHECKING:
    from collections.abc import Iterator

    import numpy as np

logger = logging.getLogger(__name__)

Point = tuple[float, float]
CoverageSample = tuple[int, int, float]


def line_coverage(p0: Point, p1: Point) -> Iterator[CoverageSample]:
    """
    Yield ``(x, y, coverage)`` samples for the segment p0 -> p1.

    Samples come in drawing order: first endpoint cap, second endpoint cap,
    then the interior sweep. Swapping p0 and p1 yields the same samples.
    A zero-length segment yields its single pixel at full coverage.
    """
    x0, y0 = float(p0[0]), float(p0[1])
    x1, y1 = float(p1[0]), float(p1[1])

    if x0 == x1 and y0 == y1:
        yield int(x0), int(y0), 1.0
        return

    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = y1 - y0
    gradient = 1.0 if dx == 0.0 else dy / dx

    def sample(major: int, minor: int, coverage: float) -> CoverageSample:
        if steep:
            return minor, major, coverage
        return major, minor, coverage

    # первый конец
    xend = round_half_away(x0)
    yend = y0 + gradient * (xend - x0)
    xgap = rfpart(x0 + 0.5)
    xpxl1 = int(xend)
    ypxl1 = ipart(yend)
    yield sample(xpxl1, ypxl1, rfpart(yend) * xgap)
    yield sample(xpxl1, ypxl1 + 1, fpart(yend) * xgap)
    intery = yend + gradient

    # второй конец
    xend = round_half_away(x1)
    yend = y1 + gradient * (xend - x1)
    xgap = fpart(x1 + 0.5)
    xpxl2 = int(xend)
    ypxl2 = ipart(yend)
    yield sample(xpxl2, ypxl2, rfpart(yend) * xgap)
    yield sample(xpxl2, ypxl2 + 1, fpart(yend) * xgap)

    for x in range(xpxl1 + 1, xpxl2):
        y = ipart(intery)
        yield sample(x, y, rfpart(intery))
        yield sample(x, y + 1, fpart(intery))
        intery += gradient


def draw_line(color: Color, p0: Point, p1: Point, buffer: np.ndarray) -> None:
    """
    Blend an anti-aliased segment into ``buffer`` in place.

    Every touched pixel moves toward ``color`` by its coverage. All pixels
    must lie inside the buffer; clamp pixel-space coordinates beforehand
    (see contours.clamp_segment).
    """
    for x, y, coverage in line_coverage(p0, p1):
        blend_pixel(buffer, x, y, color, coverage)
