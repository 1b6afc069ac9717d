"""
Models package for the H2Ok map client.

Internal value types shared by the filter state, the viewport controller,
the marker presenter and the coordinator.
"""

from .internal_models import (
    Category,
    CATEGORY_LABELS,
    AccessType,
    ViewportMode,
    FilterCriteria,
    Coordinates,
    ViewportState,
    MarkerIcon,
    MarkerDescriptor,
    MapSnapshot,
)

__all__ = [
    "Category",
    "CATEGORY_LABELS",
    "AccessType",
    "ViewportMode",
    "FilterCriteria",
    "Coordinates",
    "ViewportState",
    "MarkerIcon",
    "MarkerDescriptor",
    "MapSnapshot",
]
