"""
Module: catalog

Purpose:
    Rendition catalog: default table, startup customization, and
    registration with the host.

Key Classes:
    - RenditionCatalog: Ordered read-only catalog
    - RenditionRegistrar / SettingsStorage: Host collaborator interfaces
    - InMemoryRegistrar / InMemorySettings: In-memory collaborators

Key Functions:
    - default_definitions(): The 11 default renditions
"""

from .catalog import Customizer, RenditionCatalog
from .collaborators import (
    InMemoryRegistrar,
    InMemorySettings,
    RenditionRegistrar,
    SettingsStorage,
)
from .defaults import BUILT_IN_SIZES, DEFAULT_FORMATS, default_definitions, no_translation

__all__ = [
    "Customizer",
    "RenditionCatalog",
    "InMemoryRegistrar",
    "InMemorySettings",
    "RenditionRegistrar",
    "SettingsStorage",
    "BUILT_IN_SIZES",
    "DEFAULT_FORMATS",
    "default_definitions",
    "no_translation",
]
