"""
Diagnostic utilities.

Memory usage logging and a rough memory estimate for animations, which keep
every frame in memory until the APNG is written.
"""

import logging
from typing import Any

import psutil

from shared.constants import BYTES_PER_PX_RGB, MEMORY_SAFETY_RATIO

logger = logging.getLogger(__name__)

_MB = 1024 * 1024


def get_memory_info() -> dict[str, Any]:
    """Get process and system memory usage."""
    try:
        process = psutil.Process()
        memory_info = process.memory_info()
        system_memory = psutil.virtual_memory()

        return {
            'process_rss_mb': round(memory_info.rss / _MB, 2),
            'process_vms_mb': round(memory_info.vms / _MB, 2),
            'system_total_mb': round(system_memory.total / _MB, 2),
            'system_available_mb': round(system_memory.available / _MB, 2),
            'system_used_percent': system_memory.percent,
        }
    except Exception as e:
        return {'error': f'Failed to get memory info: {e}'}


def log_memory_usage(context: str = '') -> None:
    """Quick memory usage logging."""
    memory_info = get_memory_info()
    context_label = f' ({context})' if context else ''
    logger.info(
        'Memory usage%s: RSS=%sMB, Available=%sMB',
        context_label,
        memory_info.get('process_rss_mb', 'N/A'),
        memory_info.get('system_available_mb', 'N/A'),
    )


def estimate_animation_memory_mb(width: int, height: int, frames: int) -> float:
    """
    Estimate peak memory of an animation held in memory before encoding.

    Each frame is kept twice: as a numpy copy and as a PIL image.
    """
    frame_mb = width * height * BYTES_PER_PX_RGB / _MB
    return round(frame_mb * frames * 2, 2)


def check_animation_memory(width: int, height: int, frames: int) -> bool:
    """Log a warning and return False if the animation may not fit in memory."""
    needed_mb = estimate_animation_memory_mb(width, height, frames)
    available = get_memory_info().get('system_available_mb')
    if not isinstance(available, (int, float)):
        logger.debug('Animation needs ~%.1fMB; available memory unknown', needed_mb)
        return True
    budget_mb = available * MEMORY_SAFETY_RATIO
    if needed_mb > budget_mb:
        logger.warning(
            'Animation needs ~%.1fMB but only %.1fMB is within budget; '
            'reduce frames or scale',
            needed_mb,
            budget_mb,
        )
        return False
    logger.info('Animation memory estimate: ~%.1fMB (budget %.1fMB)', needed_mb, budget_mb)
    return True
