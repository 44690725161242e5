"""Admin screen filters."""

from .media_options import (
    IMAGE_SIZES_HEADING,
    MEDIA_SCREEN,
    filter_admin_screen,
    strip_image_sizes_section,
)

__all__ = [
    "IMAGE_SIZES_HEADING",
    "MEDIA_SCREEN",
    "filter_admin_screen",
    "strip_image_sizes_section",
]
