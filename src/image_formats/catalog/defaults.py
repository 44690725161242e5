"""
Module: catalog.defaults

Purpose:
    The default rendition table. Order matters: it is the order the
    renditions are registered in and the order the picker lists them.

Key Functions:
    - default_definitions(): Build the 11 default RenditionDefinitions

Used By:
    - catalog.catalog.RenditionCatalog.build
"""

from __future__ import annotations

from typing import Callable, List, Tuple

from image_formats.core.models import RenditionDefinition, UNBOUNDED

Translator = Callable[[str], str]

# Identifiers the host ships with and mirrors in its own settings
BUILT_IN_SIZES: Tuple[str, ...] = ("thumbnail", "medium", "medium_large", "large")

# (identifier, label, width, height, crop)
DEFAULT_FORMATS: Tuple[Tuple[str, str, int, int, bool], ...] = (
    ("thumbnail", "Thumbnail", 150, 150, True),
    ("xx_small", "XX-Small", 225, UNBOUNDED, False),
    ("medium", "X-Small", 300, UNBOUNDED, False),
    ("medium_small", "Small", 450, UNBOUNDED, False),
    ("medium_medium", "Medium", 600, UNBOUNDED, False),
    ("medium_large", "Large", 900, UNBOUNDED, False),
    ("large", "X-Large", 1200, UNBOUNDED, False),
    ("xx_large", "XX-Large", 1920, UNBOUNDED, False),
    ("small_banner", "Small banner", 1920, 300, True),
    ("medium_banner", "Medium banner", 1920, 600, True),
    ("large_banner", "Large banner", 1920, 1200, True),
)


def no_translation(text: str) -> str:
    return text


def default_definitions(translate: Translator = no_translation) -> List[RenditionDefinition]:
    """
    Build the default rendition list.

    Args:
        translate: String lookup applied to every label

    Returns:
        New list of RenditionDefinition in registration order
    """
    return [
        RenditionDefinition(identifier, translate(label), width, height, crop)
        for identifier, label, width, height, crop in DEFAULT_FORMATS
    ]
