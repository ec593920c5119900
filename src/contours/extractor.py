"""
Извлечение изолиний из регулярной сетки (marching squares).

Каждая ячейка (x, y)–(x+1, y+1) обрабатывается независимо: маска углов
выбирает запись в CASE_TABLE, концы отрезков интерполируются линейно вдоль
пересекаемых рёбер. Координаты отрезков локальны для ячейки ([0, 1]²);
перевод в пиксели выполняет extract_scaled().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from contours.cases import cell_mask, edges_for_mask
from shared.constants import (
    MIN_GRID_SIZE,
    MS_BIT_BL,
    MS_BIT_BR,
    MS_BIT_TL,
    MS_BIT_TR,
    MS_MASK_EMPTY,
    MS_MASK_FULL,
    RASTER_SAFE_MARGIN_PX,
    Edge,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

GRID_NDIM = 2

Point = tuple[float, float]
CellIndex = tuple[int, int]


@dataclass(frozen=True)
class Segment:
    """Line segment between two points."""

    a: Point
    b: Point

    def translated(self, dx: float, dy: float) -> Segment:
        return Segment(
            (self.a[0] + dx, self.a[1] + dy),
            (self.b[0] + dx, self.b[1] + dy),
        )

    def scaled(self, scale: float, offset: float = 0.0) -> Segment:
        return Segment(
            (self.a[0] * scale + offset, self.a[1] * scale + offset),
            (self.b[0] * scale + offset, self.b[1] * scale + offset),
        )


class ContourKind(Enum):
    NONE = 0
    ONE = 1
    TWO = 2


@dataclass(frozen=True)
class ContourResult:
    """Outcome of classifying a single cell: zero, one or two segments."""

    kind: ContourKind
    segments: tuple[Segment, ...] = ()

    @classmethod
    def from_segments(cls, segments: tuple[Segment, ...]) -> ContourResult:
        return cls(ContourKind(len(segments)), segments)

    def lines(self) -> Iterator[Segment]:
        yield from self.segments


NO_CONTOUR = ContourResult(ContourKind.NONE)


def interpolate(target: float, a: float, b: float) -> float:
    """
    Parameter t at which the linear ramp from ``a`` to ``b`` reaches ``target``.

    Callers only pass corner pairs on opposite sides of ``target``, so the
    denominator is never zero and t stays in [0, 1].
    """
    da = target - a
    db = b - target
    return da / (da + db)


def _edge_point(
    edge: Edge, threshold: float, tl: float, tr: float, bl: float, br: float
) -> Point:
    if edge is Edge.TOP:
        return interpolate(threshold, tl, tr), 0.0
    if edge is Edge.BOTTOM:
        return interpolate(threshold, bl, br), 1.0
    if edge is Edge.LEFT:
        return 0.0, interpolate(threshold, tl, bl)
    return 1.0, interpolate(threshold, tr, br)


def classify_cell(
    threshold: float, tl: float, tr: float, bl: float, br: float
) -> ContourResult:
    """
    Classify one cell against ``threshold``.

    Args:
        threshold: Isoline level
        tl, tr, bl, br: Corner values (top-left, top-right, bottom-left,
            bottom-right)

    Returns:
        ContourResult with segments in cell-local coordinates

    """
    pairs = edges_for_mask(cell_mask(tl, tr, bl, br, threshold))
    if not pairs:
        return NO_CONTOUR
    segments = tuple(
        Segment(
            _edge_point(ea, threshold, tl, tr, bl, br),
            _edge_point(eb, threshold, tl, tr, bl, br),
        )
        for ea, eb in pairs
    )
    return ContourResult.from_segments(segments)


def validate_grid(grid: np.ndarray) -> np.ndarray:
    """Return ``grid`` as a float array, raising ValueError if it is malformed."""
    arr = np.asarray(grid, dtype=np.float64)
    if arr.ndim != GRID_NDIM:
        msg = f'Scalar grid must be 2-D, got shape {arr.shape}'
        raise ValueError(msg)
    h, w = arr.shape
    if h < MIN_GRID_SIZE or w < MIN_GRID_SIZE:
        msg = f'Scalar grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {w}x{h}'
        raise ValueError(msg)
    if not np.isfinite(arr).all():
        msg = 'Scalar grid contains non-finite values'
        raise ValueError(msg)
    return arr


def _cell_masks(arr: np.ndarray, threshold: float) -> np.ndarray:
    inside = (arr > threshold).astype(np.uint8)
    return (
        inside[:-1, :-1] * MS_BIT_TL
        | inside[:-1, 1:] * MS_BIT_TR
        | inside[1:, :-1] * MS_BIT_BL
        | inside[1:, 1:] * MS_BIT_BR
    )


def extract(
    grid: np.ndarray, threshold: float
) -> Iterator[tuple[CellIndex, Segment]]:
    """
    Lazily extract isoline segments from every cell of ``grid``.

    Cells are visited row by row; cells with no crossing produce nothing.
    Each item is ``((x, y), segment)`` with the segment in cell-local
    coordinates.
    """
    arr = validate_grid(grid)
    masks = _cell_masks(arr, threshold)
    crossing = (masks != MS_MASK_EMPTY) & (masks != MS_MASK_FULL)
    ys, xs = np.nonzero(crossing)
    for y, x in zip(ys.tolist(), xs.tolist(), strict=True):
        result = classify_cell(
            threshold,
            float(arr[y, x]),
            float(arr[y, x + 1]),
            float(arr[y + 1, x]),
            float(arr[y + 1, x + 1]),
        )
        for seg in result.lines():
            yield (x, y), seg


def extract_scaled(
    grid: np.ndarray,
    threshold: float,
    scale: float,
    offset: float = 0.0,
) -> Iterator[Segment]:
    """
    Extract segments and map them into pixel space.

    Every local point p of cell (x, y) becomes ``(p + (x, y)) * scale + offset``.
    """
    for (x, y), seg in extract(grid, threshold):
        yield seg.translated(x, y).scaled(scale, offset)


def clamp_segment(
    segment: Segment,
    width: int,
    height: int,
    margin: float = RASTER_SAFE_MARGIN_PX,
) -> Segment:
    """
    Clamp pixel-space endpoints into ``[margin, size - 1 - margin]``.

    Both rasterizers stay inside a ``width`` x ``height`` buffer for segments
    clamped this way.
    """
    x_hi = width - 1 - margin
    y_hi = height - 1 - margin
    if x_hi < margin or y_hi < margin:
        msg = f'Buffer {width}x{height} is too small for margin {margin}'
        raise ValueError(msg)

    def clamp(p: Point) -> Point:
        return min(max(p[0], margin), x_hi), min(max(p[1], margin), y_hi)

    return Segment(clamp(segment.a), clamp(segment.b))
