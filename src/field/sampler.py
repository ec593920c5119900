"""Evaluation of a scalar function over an evenly spaced grid."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from shared.constants import MIN_GRID_SIZE
from shared.numeric import linspace

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def sample_grid(
    func: Callable,
    x_range: tuple[float, float],
    y_range: tuple[float, float],
    width: int,
    height: int,
    *,
    vectorized: bool = True,
) -> np.ndarray:
    """
    Sample ``func(x, y)`` on a ``width`` x ``height`` grid.

    Args:
        func: Scalar field. With ``vectorized=True`` it receives 2-D numpy
            arrays of coordinates and must return an array of the same shape;
            otherwise it is called once per node with floats.
        x_range: (xmin, xmax), both ends sampled
        y_range: (ymin, ymax), both ends sampled
        width: Number of nodes along X
        height: Number of nodes along Y

    Returns:
        Array of shape (height, width), row ``j`` holding samples at ``ys[j]``.

    """
    if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
        msg = f'Grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {width}x{height}'
        raise ValueError(msg)

    xs = linspace(x_range[0], x_range[1], width)
    ys = linspace(y_range[0], y_range[1], height)

    if vectorized:
        gx, gy = np.meshgrid(xs, ys)
        grid = np.asarray(func(gx, gy), dtype=np.float64)
        if grid.shape != (height, width):
            msg = f'Field returned shape {grid.shape}, expected {(height, width)}'
            raise ValueError(msg)
    else:
        grid = np.empty((height, width), dtype=np.float64)
        for j, y in enumerate(ys):
            for i, x in enumerate(xs):
                grid[j, i] = func(float(x), float(y))

    if not np.isfinite(grid).all():
        bad = int(np.count_nonzero(~np.isfinite(grid)))
        msg = f'Field produced {bad} non-finite samples'
        raise ValueError(msg)

    logger.debug(
        'Sampled %dx%d grid: min=%.4g max=%.4g', width, height, grid.min(), grid.max()
    )
    return grid
