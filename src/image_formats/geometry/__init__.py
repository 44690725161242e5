"""
Module: geometry

Purpose:
    Crop geometry for cropped renditions (cover semantics).

Key Functions:
    - resolve_crop(): Compute source crop box and destination box
    - image_resize_dimensions(): Host hook adapter

Used By:
    - plugin.ImageFormatsPlugin
    - images.resampler
"""

from .resolver import image_resize_dimensions, resolve_crop, round_half_up

__all__ = [
    "image_resize_dimensions",
    "resolve_crop",
    "round_half_up",
]
