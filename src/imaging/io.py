"""Conversion of pixel buffers to Pillow images and PNG / APNG output."""

from __future__ import annotations

import contextlib
import logging
import os
from typing import TYPE_CHECKING, Any

import numpy as np
from PIL import Image

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)

RGB_CHANNELS = 3


def buffer_to_image(buffer: np.ndarray) -> Image.Image:
    """Wrap an (H, W, 3) uint8 buffer into a new RGB image (data is copied)."""
    arr = np.asarray(buffer)
    if arr.ndim != RGB_CHANNELS or arr.shape[2] != RGB_CHANNELS:
        msg = f'Expected an (H, W, 3) buffer, got shape {arr.shape}'
        raise ValueError(msg)
    return Image.fromarray(np.ascontiguousarray(arr, dtype=np.uint8))


def build_save_kwargs(*, optimize: bool = False, compress_level: int = 6) -> dict[str, Any]:
    """Build PIL.Image.save kwargs for PNG output."""
    level = max(0, min(9, int(compress_level)))
    return {
        'format': 'PNG',
        'optimize': optimize,
        'compress_level': level,
    }


def _fsync(path: Path) -> None:
    fd = os.open(path, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def save_png(buffer: np.ndarray, out_path: Path, **save_kwargs: Any) -> None:
    """Save a single frame as a still PNG and fsync it."""
    kwargs = build_save_kwargs() | save_kwargs
    img = buffer_to_image(buffer)
    try:
        img.save(out_path, **kwargs)
    finally:
        with contextlib.suppress(Exception):
            img.close()
    _fsync(out_path)
    logger.info('Saved still image %s (%dx%d)', out_path, img.width, img.height)


def save_animation(
    frames: Iterable[np.ndarray],
    out_path: Path,
    *,
    duration_ms: int,
    loop: int = 0,
) -> int:
    """
    Save frames as an animated PNG.

    Args:
        frames: Pixel buffers of identical size, in display order
        out_path: Target .png path
        duration_ms: Display time of each frame
        loop: Number of repetitions, 0 — forever

    Returns:
        Number of frames written

    """
    images = [buffer_to_image(f) for f in frames]
    if not images:
        msg = 'Animation needs at least one frame'
        raise ValueError(msg)
    first, rest = images[0], images[1:]
    try:
        first.save(
            out_path,
            **build_save_kwargs(),
            save_all=True,
            append_images=rest,
            duration=duration_ms,
            loop=loop,
            default_image=False,
        )
    finally:
        for img in images:
            with contextlib.suppress(Exception):
                img.close()
    _fsync(out_path)
    logger.info('Saved animation %s: %d frames', out_path, len(images))
    return len(images)
