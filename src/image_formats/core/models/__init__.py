"""
Core Models Package

Immutable, validated data models passed between the catalog, the geometry
resolver and the host collaborators.

All models in this package are frozen dataclasses. A catalog built at
startup is read-only for the rest of the process, and crop plans are
plain values handed to the resampler.

| Model | Role |
|-------|------|
| `RenditionDefinition` | One named rendition (size, crop flag, label) |
| `CropRequest` | Source/destination dimensions for one resize |
| `CropPlan` | Source crop box plus destination paste box |
"""

from .rendition import RenditionDefinition, UNBOUNDED
from .crop_plan import CropPlan, CropRequest

__all__ = [
    "RenditionDefinition",
    "UNBOUNDED",
    "CropPlan",
    "CropRequest",
]
