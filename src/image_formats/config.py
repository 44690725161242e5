"""
Module: config

Purpose:
    Configuration dataclass for the plugin facade. Immutable
    configuration with validation on construction.

Key Classes:
    - PluginConfig: Host-facing settings

Used By:
    - plugin.ImageFormatsPlugin
"""

from __future__ import annotations

from dataclasses import dataclass

from image_formats.admin import IMAGE_SIZES_HEADING, MEDIA_SCREEN
from image_formats.catalog import BUILT_IN_SIZES
from image_formats.images import resolve_resample


@dataclass(frozen=True)
class PluginConfig:
    """
    Configuration for the image formats plugin (immutable).

    Attributes:
        built_in_sizes: Identifiers whose size options are mirrored into
            the host's settings at startup
        media_screen: Admin screen identifier of the media settings page
        image_sizes_heading: Heading text of the section stripped from it
        resample: Pillow resampling filter name for the reference resampler

    Example:
        >>> config = PluginConfig(resample="bicubic")
        >>> config.media_screen
        'options-media'
    """

    built_in_sizes: tuple[str, ...] = BUILT_IN_SIZES
    media_screen: str = MEDIA_SCREEN
    image_sizes_heading: str = IMAGE_SIZES_HEADING
    resample: str = "LANCZOS"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.media_screen:
            raise ValueError("media_screen must be non-empty")
        if not self.image_sizes_heading:
            raise ValueError("image_sizes_heading must be non-empty")
        if any(not slug for slug in self.built_in_sizes):
            raise ValueError(f"built_in_sizes contains an empty identifier: {self.built_in_sizes!r}")
        resolve_resample(self.resample)
