"""
Module: crop_plan

Purpose:
    Input and output value types for the crop geometry resolver.
    A CropPlan tells the resampler which source rectangle to read and
    where to paste it, scaled, on the destination canvas.

Key Classes:
    - CropRequest: Source and destination dimensions for one resize
    - CropPlan: Source crop box plus destination paste box

Dependencies:
    - dataclasses (std)

Used By:
    - geometry.resolver
    - images.resampler
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CropRequest:
    """
    One resize request issued by the resampler.

    Attributes:
        source_width: Width of the uploaded image
        source_height: Height of the uploaded image
        dest_width: Requested rendition width
        dest_height: Requested rendition height
        crop: Whether the rendition is cropped

    Source dimensions must be positive. This is not checked here, the
    host only issues resize requests for decoded images.
    """

    source_width: int
    source_height: int
    dest_width: int
    dest_height: int
    crop: bool = False


@dataclass(frozen=True, slots=True)
class CropPlan:
    """
    Source rectangle plus destination rectangle, in pixels.

    Read a src_crop_width x src_crop_height rectangle from the source at
    (src_x, src_y) and write it scaled to dest_width x dest_height at
    (dest_x, dest_y) in the destination canvas.

    Invariants:
        - all fields >= 0 (a very thin source can round a crop side to 0)

    Example:
        >>> plan = CropPlan(100, 0, 600, 600, 0, 0, 300, 300)
        >>> plan.source_box
        (100, 0, 700, 600)
        >>> plan.as_platform_tuple()
        (0, 0, 100, 0, 300, 300, 600, 600)
    """

    src_x: int
    src_y: int
    src_crop_width: int
    src_crop_height: int
    dest_x: int
    dest_y: int
    dest_width: int
    dest_height: int

    def __post_init__(self) -> None:
        """Validate plan on construction."""
        for name in self.__slots__:
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0: {value}")

    @property
    def source_box(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) box for PIL's Image.crop()."""
        return (
            self.src_x,
            self.src_y,
            self.src_x + self.src_crop_width,
            self.src_y + self.src_crop_height,
        )

    @property
    def dest_size(self) -> tuple[int, int]:
        """(width, height) of the destination canvas."""
        return (self.dest_width, self.dest_height)

    def fits_within(self, source_width: int, source_height: int) -> bool:
        """Check the crop rectangle lies fully inside a source image."""
        return (
            self.src_x + self.src_crop_width <= source_width
            and self.src_y + self.src_crop_height <= source_height
        )

    def as_platform_tuple(self) -> tuple[int, int, int, int, int, int, int, int]:
        """
        Get the plan in the host's resize-dimensions order.

        Returns:
            (dst_x, dst_y, src_x, src_y, dst_w, dst_h, src_w, src_h)
        """
        return (
            self.dest_x,
            self.dest_y,
            self.src_x,
            self.src_y,
            self.dest_width,
            self.dest_height,
            self.src_crop_width,
            self.src_crop_height,
        )
