"""Tests for render.blend module."""

import numpy as np
import pytest

from render.blend import blend_pixel, check_pixel, set_pixel


class TestBlendPixel:
    """Tests for blend_pixel function."""

    def test_full_coverage_sets_color(self):
        buf = np.zeros((4, 4, 3), dtype=np.uint8)
        blend_pixel(buf, 1, 2, (10, 20, 30), 1.0)
        assert tuple(buf[2, 1]) == (10, 20, 30)

    def test_zero_coverage_keeps_pixel(self):
        buf = np.full((4, 4, 3), 77, dtype=np.uint8)
        blend_pixel(buf, 0, 0, (255, 0, 0), 0.0)
        assert tuple(buf[0, 0]) == (77, 77, 77)

    def test_partial_coverage_truncates(self):
        buf = np.zeros((2, 2, 3), dtype=np.uint8)
        blend_pixel(buf, 0, 0, (255, 200, 3), 0.5)
        assert tuple(buf[0, 0]) == (127, 100, 1)

    def test_repeated_blends_compound(self):
        buf = np.zeros((2, 2, 3), dtype=np.uint8)
        blend_pixel(buf, 1, 1, (200, 200, 200), 0.5)
        blend_pixel(buf, 1, 1, (200, 200, 200), 0.5)
        assert tuple(buf[1, 1]) == (150, 150, 150)

    def test_blend_toward_darker_color(self):
        buf = np.full((2, 2, 3), 200, dtype=np.uint8)
        blend_pixel(buf, 0, 1, (0, 100, 200), 0.25)
        assert tuple(buf[1, 0]) == (150, 175, 200)

    def test_only_target_pixel_changes(self):
        buf = np.zeros((3, 3, 3), dtype=np.uint8)
        blend_pixel(buf, 1, 1, (255, 255, 255), 1.0)
        assert np.count_nonzero(buf.any(axis=2)) == 1

    @pytest.mark.parametrize('coverage', [0.1, 0.33, 0.5, 0.77, 0.999])
    def test_matches_per_channel_formula(self, coverage):
        """Every channel follows int(old + (target - old) * coverage)."""
        old = (0, 128, 255)
        color = (255, 3, 17)
        buf = np.empty((1, 1, 3), dtype=np.uint8)
        buf[0, 0] = old
        blend_pixel(buf, 0, 0, color, coverage)
        expected = tuple(int(o + (c - o) * coverage) for o, c in zip(old, color))
        assert tuple(int(v) for v in buf[0, 0]) == expected


class TestBounds:
    """Tests for bounds checking."""

    @pytest.mark.parametrize('xy', [(-1, 0), (0, -1), (4, 0), (0, 3)])
    def test_out_of_bounds_raises(self, xy):
        buf = np.zeros((3, 4, 3), dtype=np.uint8)
        with pytest.raises(IndexError):
            check_pixel(buf, *xy)
        with pytest.raises(IndexError):
            blend_pixel(buf, *xy, (1, 1, 1), 1.0)

    def test_set_pixel_overwrites(self):
        buf = np.full((3, 4, 3), 9, dtype=np.uint8)
        set_pixel(buf, 3, 2, (1, 2, 3))
        assert tuple(buf[2, 3]) == (1, 2, 3)
