"""
Module: images.resampler

Purpose:
    Reference resampler that consumes crop geometry with Pillow. The host
    normally performs this step in its own image editor; this module lets
    the geometry be checked end to end on in-memory images.

Key Functions:
    - contain_size(): Host default contain-fit dimensions
    - apply_crop_plan(): Crop and scale an image according to a CropPlan
    - render_rendition(): Produce one rendition of an image

Dependencies:
    - PIL: Image manipulation
    - image_formats.geometry: resolve_crop

Used By:
    - plugin.ImageFormatsPlugin.render
"""

from __future__ import annotations

import logging

from PIL import Image

from image_formats.core.models import CropPlan, CropRequest, RenditionDefinition
from image_formats.geometry import resolve_crop, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_RESAMPLE = Image.Resampling.LANCZOS


def resolve_resample(name: str) -> Image.Resampling:
    """
    Look up a Pillow resampling filter by name.

    Raises:
        ValueError: If name is not a Pillow resampling filter
    """
    try:
        return Image.Resampling[name.upper()]
    except KeyError:
        choices = ", ".join(member.name for member in Image.Resampling)
        raise ValueError(f"Unknown resample filter {name!r} (expected one of {choices})") from None


def contain_size(
    source_width: int,
    source_height: int,
    max_width: int,
    max_height: int,
) -> tuple[int, int]:
    """
    Fit a source inside a box, preserving aspect ratio, never upscaling.

    An UNBOUNDED axis is simply a very large limit, so the other axis
    decides the scale.

    Example:
        >>> contain_size(1000, 500, 300, 9999)
        (300, 150)
        >>> contain_size(200, 100, 300, 9999)
        (200, 100)
    """
    ratio = min(max_width / source_width, max_height / source_height, 1.0)
    return (
        max(1, round_half_up(source_width * ratio)),
        max(1, round_half_up(source_height * ratio)),
    )


def apply_crop_plan(
    image: Image.Image,
    plan: CropPlan,
    resample: Image.Resampling = DEFAULT_RESAMPLE,
) -> Image.Image:
    """
    Crop the plan's source box and scale it to the destination size.

    Args:
        image: Decoded source image
        plan: Geometry from resolve_crop()
        resample: Pillow resampling filter

    Returns:
        New image of exactly plan.dest_size

    Raises:
        ValueError: If the source box is empty or outside the image
    """
    if plan.src_crop_width == 0 or plan.src_crop_height == 0:
        raise ValueError(f"Empty source box {plan.source_box}")
    if not plan.fits_within(*image.size):
        raise ValueError(
            f"Source box {plan.source_box} exceeds image size {image.size}"
        )

    region = image.crop(plan.source_box)
    scaled = region.resize(plan.dest_size, resample=resample)
    if plan.dest_x == 0 and plan.dest_y == 0:
        return scaled

    canvas = Image.new(image.mode, (plan.dest_x + plan.dest_width, plan.dest_y + plan.dest_height))
    canvas.paste(scaled, (plan.dest_x, plan.dest_y))
    return canvas


def render_rendition(
    image: Image.Image,
    definition: RenditionDefinition,
    resample: Image.Resampling = DEFAULT_RESAMPLE,
) -> Image.Image:
    """
    Produce one rendition of an image.

    Cropped renditions use the cover-crop plan; others fall back to the
    host's contain-fit.

    Args:
        image: Decoded source image
        definition: Rendition to produce
        resample: Pillow resampling filter

    Returns:
        New image (a copy when no resize is needed)
    """
    width, height = image.size
    plan = resolve_crop(
        CropRequest(width, height, definition.width, definition.height, definition.crop)
    )
    if plan is not None:
        logger.debug(f"Rendering {definition.identifier} with cover crop {plan.source_box}")
        return apply_crop_plan(image, plan, resample)

    size = contain_size(width, height, definition.width, definition.height)
    logger.debug(f"Rendering {definition.identifier} with contain fit {size}")
    if size == image.size:
        return image.copy()
    return image.resize(size, resample=resample)
