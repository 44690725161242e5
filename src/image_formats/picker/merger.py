"""
Module: picker.merger

Purpose:
    Merge policy for the editorial picker's rendition names.

Key Functions:
    - merge_picker_names(): Catalog labels first, leftover host labels after
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping

logger = logging.getLogger(__name__)


def merge_picker_names(
    platform_names: Mapping[str, str],
    catalog_names: Mapping[str, str],
) -> Dict[str, str]:
    """
    Merge the host's picker names with the catalog's.

    A catalog identifier always supersedes the host's entry, even when the
    catalog hides it with an empty label. Catalog entries come first in
    catalog order, then the remaining host entries in their own order.

    Args:
        platform_names: Host's identifier -> label choices
        catalog_names: Catalog's identifier -> label table

    Returns:
        New ordered dict for the picker

    Example:
        >>> merge_picker_names({"a": "A", "b": "B"}, {"b": "B2", "c": ""})
        {'b': 'B2', 'a': 'A'}
    """
    leftovers = {
        key: label for key, label in platform_names.items() if key not in catalog_names
    }
    visible = {key: label for key, label in catalog_names.items() if label}

    merged = dict(visible)
    merged.update(leftovers)
    logger.debug(
        f"Picker names: {len(visible)} from catalog, {len(leftovers)} kept from host"
    )
    return merged
