"""
Module: catalog.collaborators

Purpose:
    Interfaces for the host services the catalog writes to at startup,
    plus in-memory implementations used for local wiring and tests.

Key Classes:
    - RenditionRegistrar: Abstract rendition registration service
    - SettingsStorage: Abstract key-value settings service
    - InMemoryRegistrar: Records registrations in order
    - InMemorySettings: Dict-backed settings store

Used By:
    - catalog.catalog.RenditionCatalog.register_all
    - plugin.ImageFormatsPlugin
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple


class RenditionRegistrar(ABC):
    """Host service that makes a rendition size available for generation."""

    @abstractmethod
    def register(self, identifier: str, width: int, height: int, crop: bool) -> None:
        """
        Register (or re-register) a rendition size.

        Registering an identifier twice replaces the earlier size.
        """


class SettingsStorage(ABC):
    """Host key-value option store."""

    @abstractmethod
    def set_option(self, key: str, value: Any) -> None:
        """Store a value under key, replacing any previous value."""

    @abstractmethod
    def get_option(self, key: str, default: Any = None) -> Any:
        """Return the stored value, or default when the key is absent."""


class InMemoryRegistrar(RenditionRegistrar):
    """
    Registrar that keeps registrations in memory.

    Attributes:
        calls: Every register() call in order, as
            (identifier, width, height, crop) tuples
        sizes: Current size per identifier (last registration wins)
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[str, int, int, bool]] = []
        self.sizes: Dict[str, Tuple[int, int, bool]] = {}

    def register(self, identifier: str, width: int, height: int, crop: bool) -> None:
        self.calls.append((identifier, width, height, crop))
        self.sizes[identifier] = (width, height, crop)


class InMemorySettings(SettingsStorage):
    """Dict-backed settings store that also records write order."""

    def __init__(self, initial: Dict[str, Any] | None = None) -> None:
        self.data: Dict[str, Any] = dict(initial or {})
        self.writes: List[Tuple[str, Any]] = []

    def set_option(self, key: str, value: Any) -> None:
        self.data[key] = value
        self.writes.append((key, value))

    def get_option(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)
