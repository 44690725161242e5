"""
Module: images

Purpose:
    Pillow reference resampler for rendition geometry.

Key Functions:
    - apply_crop_plan(): Crop and scale per CropPlan
    - render_rendition(): Render one rendition of an image
    - contain_size(): Host default contain-fit dimensions

Dependencies:
    - PIL: Image manipulation
"""

from .resampler import (
    DEFAULT_RESAMPLE,
    apply_crop_plan,
    contain_size,
    render_rendition,
    resolve_resample,
)

__all__ = [
    "DEFAULT_RESAMPLE",
    "apply_crop_plan",
    "contain_size",
    "render_rendition",
    "resolve_resample",
]
