"""Tests for shared.diagnostics module."""

import logging
from unittest.mock import patch

from shared.diagnostics import (
    check_animation_memory,
    estimate_animation_memory_mb,
    get_memory_info,
    log_memory_usage,
)


class TestMemoryInfo:
    """Tests for memory info helpers."""

    def test_get_memory_info_keys(self):
        info = get_memory_info()
        assert 'process_rss_mb' in info
        assert 'system_available_mb' in info

    def test_psutil_failure_reported_as_error(self):
        with patch(
            'shared.diagnostics.psutil.virtual_memory',
            side_effect=OSError('denied'),
        ):
            info = get_memory_info()
        assert info == {'error': 'Failed to get memory info: denied'}

    def test_log_memory_usage(self, caplog):
        with caplog.at_level(logging.INFO, logger='shared.diagnostics'):
            log_memory_usage('unit test')
        assert 'Memory usage (unit test)' in caplog.text


class TestAnimationMemory:
    """Tests for animation memory estimation."""

    def test_estimate(self):
        # 1024x1024 RGB = 3MB per frame, two copies, 10 frames
        assert estimate_animation_memory_mb(1024, 1024, 10) == 60.0

    def test_fits(self):
        with patch(
            'shared.diagnostics.get_memory_info',
            return_value={'system_available_mb': 10_000.0},
        ):
            assert check_animation_memory(100, 100, 10) is True

    def test_does_not_fit(self, caplog):
        with patch(
            'shared.diagnostics.get_memory_info',
            return_value={'system_available_mb': 1.0},
        ), caplog.at_level(logging.WARNING, logger='shared.diagnostics'):
            assert check_animation_memory(1024, 1024, 100) is False
        assert 'Animation needs' in caplog.text

    def test_unknown_memory_is_allowed(self):
        with patch(
            'shared.diagnostics.get_memory_info',
            return_value={'error': 'Failed to get memory info: denied'},
        ):
            assert check_animation_memory(1024, 1024, 100) is True
