"""Core value types shared by the catalog, geometry and picker modules."""

from .models import CropPlan, CropRequest, RenditionDefinition, UNBOUNDED

__all__ = [
    "CropPlan",
    "CropRequest",
    "RenditionDefinition",
    "UNBOUNDED",
]
