"""Tests for domain.models module."""

import numpy as np
import pytest
from pydantic import ValidationError

from domain.models import BlobSettings, RenderSettings
from field.blobs import Blob
from render.frame import new_buffer, render_frame
from shared.constants import LineStyle


class TestRenderSettingsDefaults:
    """Tests for default values."""

    def test_defaults(self):
        settings = RenderSettings()
        assert settings.grid_width == 50
        assert settings.grid_height == 50
        assert settings.threshold == 1.0
        assert settings.line_style is LineStyle.ANTIALIASED
        assert settings.line_color == (0, 0, 255)
        assert settings.background_color == (255, 255, 255)
        assert len(settings.blobs) == 4

    def test_image_size(self):
        settings = RenderSettings(grid_width=20, grid_height=30, scale=4)
        assert settings.image_width == 80
        assert settings.image_height == 120

    def test_pixel_offset_is_half_scale(self):
        assert RenderSettings(scale=10).pixel_offset == 5.0

    def test_field_bounds(self):
        settings = RenderSettings(x_range=(0.0, 8.0), y_range=(0.0, 6.0))
        assert settings.field_bounds == (8.0, 6.0)

    def test_extra_fields_ignored(self):
        settings = RenderSettings.model_validate({'unknown_field': 1})
        assert not hasattr(settings, 'unknown_field')


class TestRenderSettingsValidation:
    """Tests for field validators."""

    @pytest.mark.parametrize('field', ['grid_width', 'grid_height'])
    def test_grid_too_small(self, field):
        with pytest.raises(ValidationError):
            RenderSettings(**{field: 1})

    def test_empty_range_rejected(self):
        with pytest.raises(ValidationError):
            RenderSettings(x_range=(5.0, 5.0))

    def test_reversed_range_rejected(self):
        with pytest.raises(ValidationError):
            RenderSettings(y_range=(10.0, 0.0))

    @pytest.mark.parametrize('color', [(256, 0, 0), (0, -1, 0)])
    def test_color_out_of_range(self, color):
        with pytest.raises(ValidationError):
            RenderSettings(line_color=color)

    @pytest.mark.parametrize('field', ['scale', 'frames'])
    def test_positive_fields(self, field):
        with pytest.raises(ValidationError):
            RenderSettings(**{field: 0})

    def test_fade_step_clamped(self):
        assert RenderSettings(fade_step=300).fade_step == 255
        assert RenderSettings(fade_step=-5).fade_step == 0

    def test_negative_duration_clamped(self):
        assert RenderSettings(frame_duration_ms=-10).frame_duration_ms == 0

    def test_line_style_from_string(self):
        assert RenderSettings(line_style='solid').line_style is LineStyle.SOLID

    def test_unknown_line_style_rejected(self):
        with pytest.raises(ValidationError):
            RenderSettings(line_style='dashed')

    def test_image_too_small_for_raster_margin(self):
        """2x2 grid at scale 1 leaves no pixel inside the raster margin."""
        with pytest.raises(ValidationError, match='слишком мало'):
            RenderSettings(grid_width=2, grid_height=2, scale=1)

    def test_smallest_image_renders(self):
        """The smallest accepted settings render a frame without errors."""
        settings = RenderSettings(grid_width=3, grid_height=2, scale=2, frames=1)
        assert (settings.image_width, settings.image_height) == (6, 4)
        buffer = new_buffer(6, 4, settings.background_color)
        grid = np.array([[2.0, 0.0, 0.0], [0.0, 0.0, 0.0]])
        assert render_frame(grid, buffer, settings) == 1

    def test_override_to_small_image_rejected(self):
        settings = RenderSettings(grid_width=2, grid_height=2, scale=4)
        with pytest.raises(ValidationError):
            RenderSettings.model_validate(settings.model_dump() | {'scale': 1})


class TestBlobSettings:
    """Tests for BlobSettings model."""

    def test_round_trip_with_blob(self):
        blob = Blob(center=(1.0, 2.0), velocity=(0.5, -0.5), size=0.3)
        settings = BlobSettings.from_blob(blob)
        assert settings.to_blob() == blob

    def test_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            BlobSettings(center=(0.0, 0.0), size=0.0)

    def test_make_blobs_returns_fresh_objects(self):
        settings = RenderSettings()
        a = settings.make_blobs()
        b = settings.make_blobs()
        assert a == b
        assert a[0] is not b[0]
