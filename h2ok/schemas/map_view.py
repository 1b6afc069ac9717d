from pydantic import BaseModel, Field
from typing import Optional

from h2ok.models.internal_models import (
    Category,
    MapSnapshot,
    MarkerDescriptor,
    MarkerIcon,
    ViewportState,
)


class FilterUpdate(BaseModel):
    """Partial filter change sent by the filter controls"""
    category: Optional[Category] = None
    require_hot: Optional[bool] = None
    require_cold: Optional[bool] = None
    query_text: Optional[str] = None


class LocateRequest(BaseModel):
    """Position reported by the browser; empty when the user denied access"""
    latitude: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    longitude: Optional[float] = Field(default=None, ge=-180.0, le=180.0)


class CategoryOption(BaseModel):
    key: Category
    label: str
    selected: bool = False


class IconView(BaseModel):
    icon_url: str
    icon_retina_url: str
    shadow_url: str
    icon_size: tuple[int, int]
    icon_anchor: tuple[int, int]
    popup_anchor: tuple[int, int]
    shadow_size: tuple[int, int]

    @classmethod
    def from_icon(cls, icon: MarkerIcon) -> "IconView":
        return cls(
            icon_url=icon.icon_url,
            icon_retina_url=icon.icon_retina_url,
            shadow_url=icon.shadow_url,
            icon_size=icon.icon_size,
            icon_anchor=icon.icon_anchor,
            popup_anchor=icon.popup_anchor,
            shadow_size=icon.shadow_size,
        )


class MarkerView(BaseModel):
    key: str
    position: tuple[float, float]
    label: str
    is_new: bool
    popup: list[str]
    directions_url: str
    icon: Optional[IconView] = None

    @classmethod
    def from_descriptor(cls, marker: MarkerDescriptor) -> "MarkerView":
        return cls(
            key=marker.key,
            position=marker.position.as_pair(),
            label=marker.label,
            is_new=marker.is_new,
            popup=marker.popup_lines(),
            directions_url=marker.directions_url,
            icon=IconView.from_icon(marker.icon) if marker.icon else None,
        )


class ViewportView(BaseModel):
    center: tuple[float, float]
    zoom: int
    mode: str

    @classmethod
    def from_state(cls, viewport: ViewportState) -> "ViewportView":
        return cls(
            center=viewport.center.as_pair(),
            zoom=viewport.zoom,
            mode=viewport.mode.value,
        )


class MapView(BaseModel):
    category: Category
    require_hot: bool
    require_cold: bool
    query_text: str
    categories: list[CategoryOption]
    viewport: ViewportView
    markers: list[MarkerView]
    error: Optional[str] = None
    loading: bool = False
    tile_url: str
    tile_attribution: str

    @classmethod
    def from_snapshot(cls, snapshot: MapSnapshot, tile_url: str, tile_attribution: str) -> "MapView":
        criteria = snapshot.criteria
        return cls(
            category=criteria.category,
            require_hot=criteria.require_hot,
            require_cold=criteria.require_cold,
            query_text=criteria.query_text,
            categories=[
                CategoryOption(key=c, label=c.label, selected=c == criteria.category)
                for c in Category
            ],
            viewport=ViewportView.from_state(snapshot.viewport),
            markers=[MarkerView.from_descriptor(m) for m in snapshot.markers],
            error=snapshot.error,
            loading=snapshot.loading,
            tile_url=tile_url,
            tile_attribution=tile_attribution,
        )
