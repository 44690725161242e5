"""
Module: admin.media_options

Purpose:
    Removes the host's "Image sizes" panel from the rendered media
    settings screen. The sizes are owned by the rendition catalog, so the
    panel's fields would be overwritten on the next startup anyway.

Key Functions:
    - strip_image_sizes_section(): Remove the first matching <h2> section
    - filter_admin_screen(): Apply the strip on the media screen only

Notes:
    This rewrites rendered markup and depends on the host's heading
    layout: the section runs from an <h2> with attributes whose text
    starts with the heading, up to the next <h2>.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

logger = logging.getLogger(__name__)

MEDIA_SCREEN = "options-media"
IMAGE_SIZES_HEADING = "Image sizes"


@lru_cache(maxsize=8)
def _section_pattern(heading: str) -> re.Pattern[str]:
    return re.compile(rf"<h2[^>]+>{re.escape(heading)}.*?(?=<h2)", re.DOTALL)


def strip_image_sizes_section(content: str, heading: str = IMAGE_SIZES_HEADING) -> str:
    """
    Remove the settings section introduced by heading.

    Only the first match is removed. A section with no following <h2>
    is left in place.

    Args:
        content: Rendered screen HTML
        heading: Translated section heading text

    Returns:
        HTML with the section removed, or unchanged if not found
    """
    result, count = _section_pattern(heading).subn("", content, count=1)
    if count:
        logger.debug(f"Removed '{heading}' section from media settings")
    return result


def filter_admin_screen(
    screen_base: str | None,
    content: str,
    heading: str = IMAGE_SIZES_HEADING,
    media_screen: str = MEDIA_SCREEN,
) -> str:
    """
    Filter rendered admin output for the current screen.

    Args:
        screen_base: Base identifier of the current admin screen, or None
            when no screen is set
        content: Rendered HTML
        heading: Translated section heading text
        media_screen: Identifier of the media settings screen

    Returns:
        Filtered HTML on the media settings screen, content unchanged otherwise
    """
    if screen_base is None or screen_base != media_screen:
        return content
    return strip_image_sizes_section(content, heading)
