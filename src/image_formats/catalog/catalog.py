"""
Module: catalog.catalog

Purpose:
    The active rendition catalog. Built once at startup from the default
    table passed through a customization function, then read-only.

Key Classes:
    - RenditionCatalog: Ordered definitions plus identifier -> label table

Dependencies:
    - image_formats.core.models: RenditionDefinition
    - catalog.collaborators: RenditionRegistrar, SettingsStorage

Used By:
    - plugin.ImageFormatsPlugin: Startup and picker hook
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence

from image_formats.core.models import RenditionDefinition

from .collaborators import RenditionRegistrar, SettingsStorage
from .defaults import BUILT_IN_SIZES, Translator, no_translation, default_definitions

logger = logging.getLogger(__name__)

Customizer = Callable[[List[RenditionDefinition]], Iterable[RenditionDefinition]]


def _no_customization(definitions: List[RenditionDefinition]) -> List[RenditionDefinition]:
    return definitions


class RenditionCatalog:
    """
    Ordered, read-only collection of rendition definitions.

    Definitions keep the order the customization function returned them in.
    The names table maps identifier -> display label in the same order; an
    identifier that appears twice keeps its first position and takes the
    last label, and is registered twice (last registration wins).

    Example:
        >>> catalog = RenditionCatalog.build()
        >>> len(catalog)
        11
        >>> catalog.names["medium"]
        'X-Small'
    """

    def __init__(self, definitions: Sequence[RenditionDefinition]) -> None:
        self._definitions: tuple[RenditionDefinition, ...] = tuple(definitions)
        names: Dict[str, str] = {}
        for definition in self._definitions:
            names[definition.identifier] = definition.display_name
        self._names = names

    @classmethod
    def build(
        cls,
        customize: Optional[Customizer] = None,
        translate: Translator = no_translation,
    ) -> RenditionCatalog:
        """
        Build the catalog from the defaults and a customization function.

        Args:
            customize: Receives the default list and returns the list to
                actually use. It may add, remove or replace entries.
            translate: String lookup for default labels

        Returns:
            New RenditionCatalog (possibly empty)
        """
        customize = customize or _no_customization
        definitions = list(customize(default_definitions(translate)))
        catalog = cls(definitions)
        logger.info(f"Built rendition catalog with {len(catalog)} definitions")
        return catalog

    # ─────────────────────────────────────────────────────────────────────────
    # Accessors
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def definitions(self) -> tuple[RenditionDefinition, ...]:
        """All definitions in catalog order."""
        return self._definitions

    @property
    def names(self) -> Dict[str, str]:
        """Copy of the identifier -> display label table, catalog order."""
        return dict(self._names)

    @property
    def identifiers(self) -> List[str]:
        """Distinct identifiers in catalog order."""
        return list(self._names)

    def get(self, identifier: str) -> Optional[RenditionDefinition]:
        """Return the last definition registered under identifier, if any."""
        found = None
        for definition in self._definitions:
            if definition.identifier == identifier:
                found = definition
        return found

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._names

    def __iter__(self) -> Iterator[RenditionDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    # ─────────────────────────────────────────────────────────────────────────
    # Registration
    # ─────────────────────────────────────────────────────────────────────────

    def register_all(
        self,
        registrar: RenditionRegistrar,
        settings: SettingsStorage,
        built_in_sizes: Iterable[str] = BUILT_IN_SIZES,
    ) -> None:
        """
        Register every definition with the host, in catalog order.

        For built-in identifiers the host's own size options are updated
        right after each registration, so a later duplicate overwrites an
        earlier one in both places.

        Args:
            registrar: Host rendition registration service
            settings: Host option store
            built_in_sizes: Identifiers whose size options are mirrored
        """
        built_in = frozenset(built_in_sizes)
        for definition in self._definitions:
            registrar.register(
                definition.identifier,
                definition.width,
                definition.height,
                definition.crop,
            )
            if definition.identifier in built_in:
                _sync_legacy_options(settings, definition)
        logger.info(f"Registered {len(self._definitions)} renditions")


def _sync_legacy_options(settings: SettingsStorage, definition: RenditionDefinition) -> None:
    """Mirror a built-in rendition into the host's size options."""
    slug = definition.identifier
    settings.set_option(f"{slug}_size_w", definition.width)
    settings.set_option(f"{slug}_size_h", definition.height)
    # The host only exposes a crop setting for thumbnails
    if slug == "thumbnail":
        settings.set_option(f"{slug}_size_crop", definition.crop)
    logger.debug(f"Synced legacy size options for {slug}")
