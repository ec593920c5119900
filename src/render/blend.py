"""Per-pixel colour blending on an RGB uint8 buffer."""

from __future__ import annotations

import numpy as np

Color = tuple[int, int, int]


def check_pixel(buffer: np.ndarray, x: int, y: int) -> None:
    """Raise IndexError if (x, y) lies outside ``buffer``."""
    h, w = buffer.shape[:2]
    if not (0 <= x < w and 0 <= y < h):
        msg = f'Pixel ({x}, {y}) is outside the {w}x{h} buffer'
        raise IndexError(msg)


def blend_pixel(
    buffer: np.ndarray, x: int, y: int, color: Color, coverage: float
) -> None:
    """
    Paint pixel (x, y) toward ``color`` by ``coverage``.

    Per channel: ``new = old + (target - old) * coverage``, truncated toward
    zero. Repeated calls on the same pixel compound.
    """
    check_pixel(buffer, x, y)
    old = buffer[y, x].astype(np.int64)
    target = np.asarray(color, dtype=np.int64)
    buffer[y, x] = (old + (target - old) * coverage).astype(np.uint8)


def set_pixel(buffer: np.ndarray, x: int, y: int, color: Color) -> None:
    check_pixel(buffer, x, y)
    buffer[y, x] = color
