"""
Map synchronization coordinator.

The only stateful piece of the map view. Commands from the interactive
surface (filter edits, search, locate, view activation) arrive here and are
turned into point queries, marker presentation and viewport changes.

Every point query takes the next request token. When a query completes its
outcome is applied only if its token is still the latest one issued, so a
slow response to a superseded query can never overwrite a newer result,
whatever order the responses arrive in.
"""

import itertools
import logging
from typing import List, Optional, Tuple

from h2ok.core.exceptions import GeolocationUnavailable, QueryError
from h2ok.models.internal_models import (
    FilterCriteria,
    MapSnapshot,
    MarkerDescriptor,
    ViewportState,
)
from h2ok.schemas.announcement import AnnouncementRecord
from h2ok.schemas.partner import PointRecord
from h2ok.services.announcement_client import AnnouncementClient
from h2ok.services.filter_state import FilterState
from h2ok.services.geolocation import GeolocationAdapter
from h2ok.services.marker_presenter import MarkerPresenter
from h2ok.services.partner_client import PartnerQueryClient
from h2ok.services.viewport_controller import ViewportController

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load points"

# Fields whose change re-queries immediately; query_text waits for an explicit search.
INSTANT_FILTER_FIELDS = ("category", "require_hot", "require_cold")


class MapSyncCoordinator:
    def __init__(
        self,
        partner_client: PartnerQueryClient,
        announcement_client: AnnouncementClient,
        presenter: MarkerPresenter,
        viewport_controller: ViewportController,
        geolocation: Optional[GeolocationAdapter] = None,
        filter_state: Optional[FilterState] = None,
    ):
        self.partner_client = partner_client
        self.announcement_client = announcement_client
        self.presenter = presenter
        self.viewport_controller = viewport_controller
        self.geolocation = geolocation or GeolocationAdapter()
        self.filter_state = filter_state or FilterState()

        self._tokens = itertools.count(1)
        self._latest_token = 0
        self._points: Tuple[PointRecord, ...] = ()
        self._markers: List[MarkerDescriptor] = []
        self._viewport = viewport_controller.initial()
        self._error: Optional[str] = None
        self._loading = False
        self._announcements: List[AnnouncementRecord] = []

    @property
    def criteria(self) -> FilterCriteria:
        return self.filter_state.criteria

    @property
    def points(self) -> Tuple[PointRecord, ...]:
        return self._points

    @property
    def markers(self) -> List[MarkerDescriptor]:
        return list(self._markers)

    @property
    def viewport(self) -> ViewportState:
        return self._viewport

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def announcements(self) -> List[AnnouncementRecord]:
        return list(self._announcements)

    @property
    def latest_token(self) -> int:
        return self._latest_token

    def snapshot(self) -> MapSnapshot:
        return MapSnapshot(
            criteria=self.criteria,
            viewport=self._viewport,
            markers=list(self._markers),
            error=self._error,
            loading=self._loading,
        )

    async def on_map_activated(self) -> None:
        """Initial load when the map view opens."""
        await self._requery()

    async def on_filter_changed(self, **partial) -> bool:
        """
        Apply a partial filter change.

        Re-queries when category or a water checkbox actually changed and
        returns whether it did. Text edits alone never re-query.
        """
        before = self.criteria
        after = self.filter_state.set(**partial)
        changed = [
            name for name in INSTANT_FILTER_FIELDS
            if getattr(before, name) != getattr(after, name)
        ]
        if not changed:
            return False
        logger.debug(f"Filters changed: {changed}")
        await self._requery()
        return True

    async def on_search_requested(self) -> None:
        """Re-query with the current filters, including typed text."""
        await self._requery()

    async def on_locate_requested(self, geolocation: Optional[GeolocationAdapter] = None) -> bool:
        """
        Recenter on the device position.

        Returns True when the viewport moved. An unavailable or denied
        location leaves the viewport as it was and is not surfaced.
        """
        adapter = geolocation or self.geolocation
        try:
            coords = await adapter.locate()
        except GeolocationUnavailable as e:
            logger.info(f"Locate ignored: {e.message}")
            return False
        self._viewport = self.viewport_controller.on_location_resolved(coords)
        logger.debug(f"Viewport recentered on {coords.as_pair()}")
        return True

    async def on_view_activated(self) -> List[AnnouncementRecord]:
        """Fetch the announcement feed; failures leave it empty."""
        try:
            items = await self.announcement_client.fetch()
        except QueryError as e:
            logger.warning(f"Announcements unavailable: {e.message}")
            items = []
        self._announcements = list(items)
        return self.announcements

    async def _requery(self) -> None:
        token = next(self._tokens)
        self._latest_token = token
        criteria = self.criteria
        self._loading = True
        self._error = None
        logger.info(
            f"Issuing partner query #{token}",
            extra={"request_token": token, "category": criteria.category.value},
        )

        try:
            try:
                records = await self.partner_client.fetch(criteria)
            except QueryError as e:
                if token != self._latest_token:
                    logger.debug(f"Discarding failure of superseded query #{token}")
                    return
                logger.warning(f"Partner query #{token} failed: {e.message}")
                self._error = LOAD_ERROR_MESSAGE
                return

            if token != self._latest_token:
                logger.debug(f"Discarding superseded query #{token} (latest #{self._latest_token})")
                return
            self._points = tuple(records)
            self._markers = self.presenter.present(self._points)
            logger.info(f"Query #{token} applied: {len(self._points)} points")
        finally:
            # Only the latest query owns the loading flag, whatever way it ended
            if token == self._latest_token:
                self._loading = False
