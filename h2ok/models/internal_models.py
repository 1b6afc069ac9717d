"""
Internal data models and enums for the H2Ok map client.

This module contains the value types that flow between the filter state,
the viewport controller, the marker presenter and the coordinator.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from enum import Enum


class Category(str, Enum):
    """Partner categories offered as filters"""
    ALL = "all"
    SHOP = "shop"
    CAFE = "cafe"
    UNIVERSITY = "university"
    SPORTS = "sports"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    Category.ALL: "All",
    Category.SHOP: "Shops",
    Category.CAFE: "Cafes",
    Category.UNIVERSITY: "Universities",
    Category.SPORTS: "Sports",
}


class AccessType(str, Enum):
    """How a visitor gets water at a partner"""
    FREE = "free"
    ASK_STAFF = "ask_staff"


class ViewportMode(str, Enum):
    """Viewport controller states"""
    DEFAULT = "default"
    USER_CENTERED = "user_centered"


@dataclass(frozen=True)
class FilterCriteria:
    """User-chosen constraints narrowing which points are queried"""
    category: Category = Category.ALL
    require_hot: bool = False
    require_cold: bool = True
    query_text: str = ""

    def __post_init__(self):
        """Keep category inside the enum and text never None"""
        object.__setattr__(self, "category", Category(self.category))
        if self.query_text is None:
            object.__setattr__(self, "query_text", "")


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate coordinate ranges"""
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError("Longitude must be between -180 and 180")

    def as_pair(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class ViewportState:
    """Visible map center and zoom level"""
    center: Coordinates
    zoom: int
    mode: ViewportMode = ViewportMode.DEFAULT


@dataclass(frozen=True)
class MarkerIcon:
    """Marker icon configuration, built once during startup"""
    icon_url: str
    icon_retina_url: str
    shadow_url: str
    icon_size: Tuple[int, int] = (25, 41)
    icon_anchor: Tuple[int, int] = (12, 41)
    popup_anchor: Tuple[int, int] = (1, -34)
    shadow_size: Tuple[int, int] = (41, 41)


@dataclass(frozen=True)
class MarkerDescriptor:
    """Renderable representation of a point record, keyed by record id"""
    key: str
    position: Coordinates
    label: str
    is_new: bool
    address: str
    access: str
    directions_url: str
    open_hours: Optional[str] = None
    water: Optional[str] = None
    icon: Optional[MarkerIcon] = None

    def popup_lines(self) -> List[str]:
        """Detail block shown in the marker popup, top to bottom"""
        lines = [self.address]
        if self.open_hours:
            lines.append(f"Hours: {self.open_hours}")
        if self.water:
            lines.append(f"Water: {self.water}")
        lines.append(f"Access: {self.access}")
        return lines


@dataclass(frozen=True)
class MapSnapshot:
    """View model of the Map view"""
    criteria: FilterCriteria
    viewport: ViewportState
    markers: List[MarkerDescriptor] = field(default_factory=list)
    error: Optional[str] = None
    loading: bool = False
