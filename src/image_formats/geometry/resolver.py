"""
Module: geometry.resolver

Purpose:
    Cover-crop geometry. Replaces the host's default resize dimensions
    (which behave like CSS `object-fit: contain`) with a crop that fills
    the whole destination box and discards overflow, like
    `object-fit: cover`.

Key Functions:
    - resolve_crop(): CropRequest -> CropPlan, or None for no override
    - image_resize_dimensions(): Host hook adapter returning the 8-tuple

Dependencies:
    - math, fractions (std)
    - image_formats.core.models: CropRequest, CropPlan

Used By:
    - plugin.ImageFormatsPlugin: Resize-override hook
    - images.resampler: Reference resampler
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction
from numbers import Rational, Real
from typing import Optional

from image_formats.core.models import CropPlan, CropRequest

logger = logging.getLogger(__name__)

_HALF = Fraction(1, 2)


def round_half_up(value: Real) -> int:
    """
    Round a non-negative quotient to the nearest integer, halves up.

    Python's round() is banker's rounding (156.5 -> 156); crop sizes
    use arithmetic rounding (156.5 -> 157). Floats are converted to
    their exact rational value first, so 0.49999999999999994 stays 0.
    """
    exact = value if isinstance(value, Rational) else Fraction(value)
    return math.floor(exact + _HALF)


def resolve_crop(request: CropRequest) -> Optional[CropPlan]:
    """
    Compute the centered cover-crop for a resize request.

    All arithmetic is done on exact fractions, so a crop side whose true
    value is n.5 always rounds to n + 1.

    Args:
        request: Source and destination dimensions plus crop flag.
            Source dimensions must be positive.

    Returns:
        CropPlan filling the whole destination box, or None when the
        request is not cropped and the host default should be used.

    Raises:
        ZeroDivisionError: If a source dimension is zero

    Example:
        >>> resolve_crop(CropRequest(800, 600, 300, 300, crop=True))
        CropPlan(src_x=100, src_y=0, src_crop_width=600, src_crop_height=600, dest_x=0, dest_y=0, dest_width=300, dest_height=300)
    """
    if not request.crop:
        return None

    # Smallest scale that makes the source cover the box on both axes
    scale_factor = max(
        Fraction(request.dest_width, request.source_width),
        Fraction(request.dest_height, request.source_height),
    )

    crop_width = round_half_up(request.dest_width / scale_factor)
    crop_height = round_half_up(request.dest_height / scale_factor)

    # Odd remainders favour the top/left edge
    src_x = (request.source_width - crop_width) // 2
    src_y = (request.source_height - crop_height) // 2

    plan = CropPlan(
        src_x=src_x,
        src_y=src_y,
        src_crop_width=crop_width,
        src_crop_height=crop_height,
        dest_x=0,
        dest_y=0,
        dest_width=request.dest_width,
        dest_height=request.dest_height,
    )
    logger.debug(
        f"Cover crop {request.source_width}x{request.source_height} -> "
        f"{request.dest_width}x{request.dest_height}: box {plan.source_box}"
    )
    return plan


def image_resize_dimensions(
    source_width: int,
    source_height: int,
    dest_width: int,
    dest_height: int,
    crop: bool,
) -> Optional[tuple[int, int, int, int, int, int, int, int]]:
    """
    Resize-override hook in the host's calling convention.

    Returns:
        (dst_x, dst_y, src_x, src_y, dst_w, dst_h, src_w, src_h),
        or None to let the host use its default contain-fit.
    """
    plan = resolve_crop(
        CropRequest(source_width, source_height, dest_width, dest_height, bool(crop))
    )
    if plan is None:
        return None
    return plan.as_platform_tuple()
