"""
Services package for the H2Ok map client.
"""

from .filter_state import FilterState, to_query_parameters
from .backend_client import BackendClient
from .partner_client import PartnerQueryClient
from .announcement_client import AnnouncementClient
from .geolocation import GeolocationAdapter, GeolocationProvider, ReportedPositionProvider
from .viewport_controller import ViewportController
from .marker_presenter import MarkerPresenter, build_marker_icon, water_summary
from .map_sync_coordinator import MapSyncCoordinator, LOAD_ERROR_MESSAGE

__all__ = [
    "FilterState",
    "to_query_parameters",
    "BackendClient",
    "PartnerQueryClient",
    "AnnouncementClient",
    "GeolocationAdapter",
    "GeolocationProvider",
    "ReportedPositionProvider",
    "ViewportController",
    "MarkerPresenter",
    "build_marker_icon",
    "water_summary",
    "MapSyncCoordinator",
    "LOAD_ERROR_MESSAGE",
]
