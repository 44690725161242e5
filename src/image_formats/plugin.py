"""
Module: plugin

Purpose:
    Host integration facade. Builds the catalog at startup, registers it,
    and exposes the host hooks as bound methods that the host wires in
    explicitly.

Key Classes:
    - ImageFormatsPlugin: Startup plus resize, picker and admin hooks
    - ImageFormatsError: Misuse of the facade

Dependencies:
    - catalog: RenditionCatalog and host collaborators
    - geometry: Cover-crop resolver
    - picker: Name merge policy
    - admin: Media screen filter
    - images: Pillow reference resampler

Example:
    >>> from image_formats.catalog import InMemoryRegistrar, InMemorySettings
    >>> plugin = ImageFormatsPlugin(InMemoryRegistrar(), InMemorySettings())
    >>> plugin.run()
    >>> plugin.image_resize_dimensions(800, 600, 300, 300, True)
    (0, 0, 100, 0, 300, 300, 600, 600)
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from PIL import Image

from image_formats.admin import filter_admin_screen
from image_formats.catalog import (
    Customizer,
    RenditionCatalog,
    RenditionRegistrar,
    SettingsStorage,
)
from image_formats.catalog.defaults import Translator, no_translation
from image_formats.geometry import image_resize_dimensions
from image_formats.images import render_rendition, resolve_resample
from image_formats.picker import merge_picker_names

from .config import PluginConfig

logger = logging.getLogger(__name__)


class ImageFormatsError(Exception):
    """Plugin used out of order or with an unknown rendition."""
    pass


class ImageFormatsPlugin:
    """
    Wires the rendition catalog into a host media pipeline.

    Attributes:
        registrar: Host rendition registration service
        settings: Host option store
        config: Plugin configuration
    """

    def __init__(
        self,
        registrar: RenditionRegistrar,
        settings: SettingsStorage,
        customize: Optional[Customizer] = None,
        translate: Translator = no_translation,
        config: Optional[PluginConfig] = None,
    ) -> None:
        self.registrar = registrar
        self.settings = settings
        self.config = config or PluginConfig()
        self._customize = customize
        self._translate = translate
        self._catalog: Optional[RenditionCatalog] = None

    @property
    def catalog(self) -> RenditionCatalog:
        """The active catalog. Only available after run()."""
        if self._catalog is None:
            raise ImageFormatsError("Catalog not built; call run() first")
        return self._catalog

    def run(self) -> None:
        """Build the catalog and register every rendition with the host."""
        catalog = RenditionCatalog.build(self._customize, self._translate)
        catalog.register_all(self.registrar, self.settings, self.config.built_in_sizes)
        self._catalog = catalog

    # ─────────────────────────────────────────────────────────────────────────
    # Host hooks
    # ─────────────────────────────────────────────────────────────────────────

    def image_resize_dimensions(
        self,
        source_width: int,
        source_height: int,
        dest_width: int,
        dest_height: int,
        crop: bool,
    ) -> Optional[tuple[int, int, int, int, int, int, int, int]]:
        """Resize-override hook; None defers to the host's contain-fit."""
        return image_resize_dimensions(
            source_width, source_height, dest_width, dest_height, crop
        )

    def update_ui(self, sizes: Mapping[str, str]) -> dict[str, str]:
        """Picker-name filter hook."""
        return merge_picker_names(sizes, self.catalog.names)

    def media_options(self, screen_base: Optional[str], content: str) -> str:
        """Admin-screen content filter hook."""
        return filter_admin_screen(
            screen_base,
            content,
            heading=self._translate(self.config.image_sizes_heading),
            media_screen=self.config.media_screen,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Local rendering
    # ─────────────────────────────────────────────────────────────────────────

    def render(self, image: Image.Image, identifier: str) -> Image.Image:
        """
        Render a catalog rendition of an image with the reference resampler.

        Raises:
            ImageFormatsError: If identifier is not in the catalog
        """
        definition = self.catalog.get(identifier)
        if definition is None:
            raise ImageFormatsError(f"Unknown rendition: {identifier}")
        return render_rendition(image, definition, resolve_resample(self.config.resample))

    def render_all(self, image: Image.Image) -> dict[str, Image.Image]:
        """Render every distinct catalog rendition of an image."""
        result = {}
        for identifier in self.catalog.identifiers:
            result[identifier] = self.render(image, identifier)
        logger.info(f"Rendered {len(result)} renditions of {image.size[0]}x{image.size[1]} image")
        return result
