"""
Tests for images.resampler

Test Coverage:
- contain_size(): Host default contain-fit
- apply_crop_plan(): Crop and scale per plan
- render_rendition(): Cover crop vs contain fit
- resolve_resample(): Filter lookup
"""
import pytest
from PIL import Image

from image_formats.core.models import CropPlan, RenditionDefinition, UNBOUNDED
from image_formats.images import (
    apply_crop_plan,
    contain_size,
    render_rendition,
    resolve_resample,
)


class TestContainSize:
    """Tests for contain_size()."""

    def test_contain_when_width_limited_then_height_floats(self):
        assert contain_size(1000, 500, 300, UNBOUNDED) == (300, 150)

    def test_contain_when_box_limits_height_then_scales_by_height(self):
        assert contain_size(800, 600, 1920, 300) == (400, 300)

    def test_contain_when_source_smaller_then_not_upscaled(self):
        assert contain_size(200, 100, 300, UNBOUNDED) == (200, 100)

    def test_contain_when_extreme_aspect_then_at_least_one_pixel(self):
        assert contain_size(10000, 2, 100, UNBOUNDED) == (100, 1)


class TestApplyCropPlan:
    """Tests for apply_crop_plan()."""

    def test_apply_when_square_from_landscape_then_center_kept(self, landscape_image):
        # Arrange - keeps x 100..700 of a red|blue split at x=400
        plan = CropPlan(100, 0, 600, 600, 0, 0, 300, 300)

        # Act
        result = apply_crop_plan(landscape_image, plan, Image.Resampling.NEAREST)

        # Assert
        assert result.size == (300, 300)
        assert result.getpixel((5, 150)) == (255, 0, 0)
        assert result.getpixel((294, 150)) == (0, 0, 255)

    def test_apply_preserves_mode(self, landscape_image):
        plan = CropPlan(0, 0, 800, 600, 0, 0, 80, 60)
        assert apply_crop_plan(landscape_image, plan).mode == "RGB"

    def test_apply_when_box_outside_image_then_raises(self, landscape_image):
        plan = CropPlan(300, 0, 600, 600, 0, 0, 300, 300)
        with pytest.raises(ValueError, match="exceeds image size"):
            apply_crop_plan(landscape_image, plan)

    def test_apply_when_box_empty_then_raises(self, landscape_image):
        plan = CropPlan(0, 300, 800, 0, 0, 0, 1920, 1)
        with pytest.raises(ValueError, match="Empty source box"):
            apply_crop_plan(landscape_image, plan)

    def test_apply_when_dest_offset_then_pasted_on_canvas(self, landscape_image):
        plan = CropPlan(0, 0, 800, 600, 10, 20, 80, 60)
        result = apply_crop_plan(landscape_image, plan, Image.Resampling.NEAREST)
        assert result.size == (90, 80)
        assert result.getpixel((0, 0)) == (0, 0, 0)
        assert result.getpixel((12, 30)) == (255, 0, 0)


class TestRenderRendition:
    """Tests for render_rendition()."""

    def test_render_when_cropped_then_exact_size(self, landscape_image):
        banner = RenditionDefinition("small_banner", "Small banner", 1920, 300, True)
        assert render_rendition(landscape_image, banner).size == (1920, 300)

    def test_render_when_not_cropped_then_contain_fit(self, landscape_image):
        medium = RenditionDefinition("medium", "X-Small", 300, UNBOUNDED)
        assert render_rendition(landscape_image, medium).size == (300, 225)

    def test_render_when_larger_than_source_then_copy(self, landscape_image):
        large = RenditionDefinition("large", "X-Large", 1200, UNBOUNDED)

        result = render_rendition(landscape_image, large)

        assert result.size == landscape_image.size
        assert result is not landscape_image

    def test_render_with_explicit_filter(self, landscape_image):
        thumb = RenditionDefinition("thumbnail", "Thumbnail", 150, 150, True)
        result = render_rendition(landscape_image, thumb, Image.Resampling.NEAREST)
        assert result.size == (150, 150)


class TestResolveResample:
    """Tests for resolve_resample()."""

    def test_resolve_is_case_insensitive(self):
        assert resolve_resample("bicubic") is Image.Resampling.BICUBIC

    def test_resolve_when_unknown_then_raises(self):
        with pytest.raises(ValueError, match="Unknown resample filter"):
            resolve_resample("sharpest")
