"""
Module: rendition

Purpose:
    Provides the RenditionDefinition dataclass - one named, fixed-size
    derived version of an uploaded image (e.g. a thumbnail).

Key Functions:
    - RenditionDefinition.is_width_bounded / is_height_bounded
    - RenditionDefinition.to_dict(): Serialize using the host's key names
    - RenditionDefinition.from_dict(identifier, data): Deserialize

Dependencies:
    - dataclasses (std)

Used By:
    - catalog.defaults
    - catalog.catalog.RenditionCatalog
    - images.resampler
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

# Sentinel for an axis without a size constraint. The host treats any very
# large value as "let this axis float", 9999 is what it stores in settings.
UNBOUNDED = 9999


@dataclass(frozen=True, slots=True)
class RenditionDefinition:
    """
    Named rendition specification.

    Attributes:
        identifier: Unique key within the catalog (e.g. "thumbnail")
        display_name: Label shown in the picker; "" hides it from the picker
        width: Target width in pixels (UNBOUNDED = no constraint)
        height: Target height in pixels (UNBOUNDED = no constraint)
        crop: True to cover-crop to exactly width x height,
              False to fit inside the box preserving aspect ratio

    Invariants:
        - identifier is non-empty
        - width > 0
        - height > 0

    Example:
        >>> thumb = RenditionDefinition("thumbnail", "Thumbnail", 150, 150, True)
        >>> thumb.is_height_bounded
        True
        >>> RenditionDefinition("medium", "X-Small", 300, UNBOUNDED).is_height_bounded
        False
    """

    identifier: str
    display_name: str
    width: int
    height: int
    crop: bool = False

    def __post_init__(self) -> None:
        """Validate definition on construction."""
        if not self.identifier:
            raise ValueError("identifier must be non-empty")
        if self.width <= 0:
            raise ValueError(f"width must be > 0: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be > 0: {self.height}")

    @property
    def is_width_bounded(self) -> bool:
        """True unless the width is the UNBOUNDED sentinel."""
        return self.width < UNBOUNDED

    @property
    def is_height_bounded(self) -> bool:
        """True unless the height is the UNBOUNDED sentinel."""
        return self.height < UNBOUNDED

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return (self.width, self.height)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a dictionary keyed like the host's format table.

        The identifier is not included; it is the key of the table.
        """
        return {
            "name": self.display_name,
            "width": self.width,
            "height": self.height,
            "crop": self.crop,
        }

    @classmethod
    def from_dict(cls, identifier: str, data: Dict[str, Any]) -> RenditionDefinition:
        """
        Deserialize from a format-table entry.

        Args:
            identifier: Table key for this entry
            data: Dict with width, height and optionally name, crop

        Returns:
            RenditionDefinition instance

        Raises:
            KeyError: If width or height is missing
        """
        return cls(
            identifier=identifier,
            display_name=data.get("name", ""),
            width=int(data["width"]),
            height=int(data["height"]),
            crop=bool(data.get("crop", False)),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        mode = "crop" if self.crop else "fit"
        return f"RenditionDefinition({self.identifier!r}, {self.width}x{self.height}, {mode})"
