"""Small numeric helpers shared by the sampler and the rasterizers."""

from __future__ import annotations

import math

import numpy as np


def linspace(a: float, b: float, count: int) -> np.ndarray:
    """
    Return ``count`` evenly spaced values from ``a`` to ``b``, both included.

    ``linspace(1, 3, 3)`` gives ``[1.0, 2.0, 3.0]``.
    """
    if count < 1:
        msg = f'count must be positive, got {count}'
        raise ValueError(msg)
    return np.linspace(float(a), float(b), int(count), endpoint=True)


def ipart(x: float) -> float:
    """Integer part of x (floor)."""
    return math.floor(x)


def fpart(x: float) -> float:
    """Fractional part of x, always in [0, 1)."""
    return x - math.floor(x)


def rfpart(x: float) -> float:
    return 1.0 - fpart(x)


def round_half_away(x: float) -> float:
    """
    Round to the nearest integer, ties away from zero.

    Python's round() rounds ties to even, which would shift endpoint pixels
    of lines that start exactly between two pixel centres.
    """
    return math.copysign(math.floor(abs(x) + 0.5), x)
