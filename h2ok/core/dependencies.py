"""
Dependency injection setup for FastAPI.

The service container is the explicit startup phase: it builds the marker
icon once, opens the shared HTTP client and wires the coordinator for the
active map view.
"""

from fastapi import Request
from typing import Optional
import logging
import asyncio

import httpx

from h2ok.config.settings import MapSettings, Settings, get_settings
from h2ok.core.exceptions import ServiceNotInitializedError
from h2ok.models.internal_models import MarkerIcon
from h2ok.services import (
    AnnouncementClient,
    MapSyncCoordinator,
    MarkerPresenter,
    PartnerQueryClient,
    ViewportController,
    build_marker_icon,
)


logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for managing application services with lifecycle management.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._http_client: Optional[httpx.AsyncClient] = None
        self._marker_icon: Optional[MarkerIcon] = None
        self._coordinator: Optional[MapSyncCoordinator] = None
        self._initialized = False
        self._initialization_lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize_services(self) -> None:
        """Initialize all services in dependency order."""
        async with self._initialization_lock:
            if self._initialized:
                return

            logger.info(f"Initializing service container (backend {self.settings.backend_url})")

            try:
                self._marker_icon = build_marker_icon(self.settings.map)
                self._http_client = httpx.AsyncClient(
                    timeout=self.settings.request_timeout_seconds,
                    transport=self._transport,
                )

                partner_client = PartnerQueryClient(
                    base_url=self.settings.backend_url,
                    http_client=self._http_client,
                )
                announcement_client = AnnouncementClient(
                    base_url=self.settings.backend_url,
                    http_client=self._http_client,
                )
                presenter = MarkerPresenter(
                    icon=self._marker_icon,
                    directions_url=self.settings.map.directions_url,
                )
                self._coordinator = MapSyncCoordinator(
                    partner_client=partner_client,
                    announcement_client=announcement_client,
                    presenter=presenter,
                    viewport_controller=ViewportController(self.settings.map),
                )

                self._initialized = True
                logger.info("Service container initialization completed")

            except Exception as e:
                logger.error(f"Service container initialization failed: {e}", exc_info=True)
                raise

    async def cleanup_services(self) -> None:
        """Close the HTTP client and drop the coordinator."""
        logger.info("Cleaning up service container")

        try:
            if self._http_client is not None:
                await self._http_client.aclose()
            logger.info("Service container cleanup completed")
        except Exception as e:
            logger.error(f"Service container cleanup failed: {e}", exc_info=True)
        finally:
            self._http_client = None
            self._coordinator = None
            self._marker_icon = None
            self._initialized = False

    def get_marker_icon(self) -> MarkerIcon:
        if not self._initialized or self._marker_icon is None:
            raise ServiceNotInitializedError("marker_icon")
        return self._marker_icon

    def get_coordinator(self) -> MapSyncCoordinator:
        if not self._initialized or self._coordinator is None:
            raise ServiceNotInitializedError("map_sync_coordinator")
        return self._coordinator


def get_service_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the container attached at startup."""
    container = getattr(request.app.state, "service_container", None)
    if container is None:
        raise ServiceNotInitializedError("service_container")
    return container


def get_coordinator(request: Request) -> MapSyncCoordinator:
    """FastAPI dependency for the map view's coordinator."""
    return get_service_container(request).get_coordinator()


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency for the settings the app was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_map_settings(request: Request) -> MapSettings:
    return get_app_settings(request).map
