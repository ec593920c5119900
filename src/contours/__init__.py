"""Isoline extraction (marching squares) over regular scalar grids."""

from contours.cases import CASE_TABLE, cell_mask, edges_for_mask
from contours.extractor import (
    NO_CONTOUR,
    ContourKind,
    ContourResult,
    Segment,
    clamp_segment,
    classify_cell,
    extract,
    extract_scaled,
    interpolate,
    validate_grid,
)

__all__ = [
    'CASE_TABLE',
    'NO_CONTOUR',
    'ContourKind',
    'ContourResult',
    'Segment',
    'cell_mask',
    'clamp_segment',
    'classify_cell',
    'edges_for_mask',
    'extract',
    'extract_scaled',
    'interpolate',
    'validate_grid',
]
