"""Viewport controller: fallback center and recentering on geolocation."""
from typing import Optional

from h2ok.config.settings import MapSettings, get_settings
from h2ok.models.internal_models import Coordinates, ViewportMode, ViewportState


class ViewportController:
    """
    Two-state machine: DEFAULT until a position is resolved, then
    USER_CENTERED. Every resolved position re-centers at the recenter zoom;
    zoom is never changed otherwise. User pan and zoom stay with the
    rendering surface and are not reported back here.
    """

    def __init__(self, map_settings: Optional[MapSettings] = None):
        map_settings = map_settings or get_settings().map
        self.default_center = Coordinates(
            map_settings.default_latitude, map_settings.default_longitude
        )
        self.default_zoom = map_settings.default_zoom
        self.recenter_zoom = map_settings.recenter_zoom

    def initial(self) -> ViewportState:
        return ViewportState(
            center=self.default_center,
            zoom=self.default_zoom,
            mode=ViewportMode.DEFAULT,
        )

    def on_location_resolved(self, coords: Coordinates) -> ViewportState:
        return ViewportState(
            center=coords,
            zoom=self.recenter_zoom,
            mode=ViewportMode.USER_CENTERED,
        )
