"""
Модуль рендеринга кадра.

Кадр: затухание буфера → выборка поля → извлечение изолинии → отрисовка
отрезков. Буфер переживает кадры, поэтому старые изолинии постепенно
выцветают к белому.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from contours.extractor import clamp_segment, extract_scaled
from field.blobs import energy, step_blobs
from field.sampler import sample_grid
from render.aa_line import draw_line
from render.solid_line import draw_solid_line
from shared.constants import CHANNEL_MAX, LineStyle

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from domain.models import RenderSettings
    from field.blobs import Blob
    from render.blend import Color

logger = logging.getLogger(__name__)

_DRAWERS: dict[LineStyle, Callable] = {
    LineStyle.ANTIALIASED: draw_line,
    LineStyle.SOLID: draw_solid_line,
}


def new_buffer(width: int, height: int, color: Color) -> np.ndarray:
    """Allocate a (height, width, 3) uint8 buffer filled with ``color``."""
    buf = np.empty((height, width, 3), dtype=np.uint8)
    buf[:, :] = color
    return buf


def fade_buffer(buffer: np.ndarray, step: int) -> None:
    """Add ``step`` to every channel in place, saturating at 255."""
    if step <= 0:
        return
    widened = buffer.astype(np.uint16)
    widened += step
    np.minimum(widened, CHANNEL_MAX, out=widened)
    buffer[...] = widened


def render_frame(
    grid: np.ndarray, buffer: np.ndarray, settings: RenderSettings
) -> int:
    """
    Draw the isoline of ``grid`` at ``settings.threshold`` into ``buffer``.

    Segment endpoints are mapped to pixels as
    ``(local + cell) * scale + scale / 2`` and clamped to the buffer's safe
    area before rasterizing.

    Returns:
        Number of segments drawn

    """
    h, w = buffer.shape[:2]
    draw = _DRAWERS[settings.line_style]
    color = settings.line_color
    count = 0
    for seg in extract_scaled(
        grid, settings.threshold, settings.scale, settings.pixel_offset
    ):
        px_seg = clamp_segment(seg, w, h)
        draw(color, px_seg.a, px_seg.b, buffer)
        count += 1
    return count


def sample_blob_field(settings: RenderSettings, blobs: list[Blob]) -> np.ndarray:
    return sample_grid(
        lambda x, y: energy(x, y, blobs),
        settings.x_range,
        settings.y_range,
        settings.grid_width,
        settings.grid_height,
    )


def render_animation(
    settings: RenderSettings,
    blobs: list[Blob] | None = None,
    on_frame: Callable[[int, int], None] | None = None,
) -> Iterator[np.ndarray]:
    """
    Lazily render the animation frame by frame.

    Each frame is faded, sampled, drawn and then the blobs are stepped.
    Yields a copy of the buffer per frame; ``on_frame(index, segments)`` is
    called after each frame is drawn.
    """
    if blobs is None:
        blobs = settings.make_blobs()
    buffer = new_buffer(
        settings.image_width, settings.image_height, settings.background_color
    )
    for index in range(settings.frames):
        fade_buffer(buffer, settings.fade_step)
        grid = sample_blob_field(settings, blobs)
        segments = render_frame(grid, buffer, settings)
        logger.debug('Frame %d: %d segments', index, segments)
        if on_frame is not None:
            on_frame(index, segments)
        step_blobs(settings.field_bounds, blobs)
        yield buffer.copy()
