"""
Marker presenter.

Maps point records onto marker descriptors for the rendering surface.
The mapping is pure and order-preserving; each descriptor is keyed by the
record id so a keyed renderer can diff without flicker.
"""

from typing import Iterable, List, Optional

from h2ok.config.settings import MapSettings, get_settings
from h2ok.models.internal_models import (
    AccessType,
    Coordinates,
    MarkerDescriptor,
    MarkerIcon,
)
from h2ok.schemas.partner import PointRecord

NEW_BADGE = "new"

ACCESS_LABELS = {
    AccessType.FREE: "free",
    AccessType.ASK_STAFF: "ask staff",
}


def build_marker_icon(map_settings: Optional[MapSettings] = None) -> MarkerIcon:
    """Build the marker icon from settings. Called once during startup."""
    map_settings = map_settings or get_settings().map
    return MarkerIcon(
        icon_url=map_settings.marker_icon_url,
        icon_retina_url=map_settings.marker_icon_retina_url,
        shadow_url=map_settings.marker_shadow_url,
        icon_size=tuple(map_settings.marker_icon_size),
        icon_anchor=tuple(map_settings.marker_icon_anchor),
        popup_anchor=tuple(map_settings.marker_popup_anchor),
        shadow_size=tuple(map_settings.marker_shadow_size),
    )


def water_summary(has_cold: bool, has_hot: bool) -> Optional[str]:
    """'cold', 'hot' or 'cold / hot'; None when the point offers neither."""
    kinds = [name for name, present in (("cold", has_cold), ("hot", has_hot)) if present]
    return " / ".join(kinds) or None


class MarkerPresenter:
    def __init__(
        self,
        icon: Optional[MarkerIcon] = None,
        directions_url: Optional[str] = None,
    ):
        self.icon = icon
        self.directions_url = directions_url or get_settings().map.directions_url

    def directions_link(self, latitude: float, longitude: float) -> str:
        return f"{self.directions_url}?api=1&destination={latitude},{longitude}"

    def present_one(self, record: PointRecord) -> MarkerDescriptor:
        label = f"{record.name} ({NEW_BADGE})" if record.is_new else record.name
        return MarkerDescriptor(
            key=record.id,
            position=Coordinates(record.latitude, record.longitude),
            label=label,
            is_new=record.is_new,
            address=record.address,
            access=ACCESS_LABELS[record.access_type],
            directions_url=self.directions_link(record.latitude, record.longitude),
            open_hours=record.open_hours,
            water=water_summary(record.has_cold, record.has_hot),
            icon=self.icon,
        )

    def present(self, records: Iterable[PointRecord]) -> List[MarkerDescriptor]:
        return [self.present_one(record) for record in records]
