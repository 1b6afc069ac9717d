"""
Geolocation adapter.

Wraps the device location capability into one async call that either
returns coordinates or raises GeolocationUnavailable.
"""

import logging
from typing import Optional, Protocol

from h2ok.core.exceptions import GeolocationUnavailable
from h2ok.models.internal_models import Coordinates

logger = logging.getLogger(__name__)


class GeolocationProvider(Protocol):
    async def get_current_position(self) -> Coordinates:
        ...


class ReportedPositionProvider:
    """Position reported by the browser, or None when access was denied."""

    def __init__(self, position: Optional[Coordinates] = None):
        self.position = position

    async def get_current_position(self) -> Coordinates:
        if self.position is None:
            raise GeolocationUnavailable("denied")
        return self.position


class GeolocationAdapter:
    def __init__(self, provider: Optional[GeolocationProvider] = None):
        self.provider = provider

    @property
    def available(self) -> bool:
        return self.provider is not None

    async def locate(self) -> Coordinates:
        """Request the current position once.

        Raises:
            GeolocationUnavailable: no provider, access denied, or the
                provider failed in any other way
        """
        if self.provider is None:
            raise GeolocationUnavailable("not supported")
        try:
            return await self.provider.get_current_position()
        except GeolocationUnavailable:
            raise
        except Exception as e:
            logger.debug(f"Geolocation provider failed: {e}")
            raise GeolocationUnavailable("failed", details={"reason": str(e)}) from e
