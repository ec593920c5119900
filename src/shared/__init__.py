"""Shared utilities and helpers."""
from shared.diagnostics import log_memory_usage
from shared.progress import FrameProgress

__all__ = [
    'FrameProgress',
    'log_memory_usage',
]
