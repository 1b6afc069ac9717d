"""
Base client for the remote partners/updates service.

Wraps one shared ``httpx.AsyncClient`` and maps transport and decoding
failures onto the QueryError taxonomy.
"""

import logging
import httpx
from typing import Any, Dict, Optional

from h2ok.config.settings import get_settings
from h2ok.core.exceptions import DecodeError, NetworkError

logger = logging.getLogger(__name__)


class BackendClient:
    """Issues GET requests against the remote data service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.backend_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _get_json(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        """
        GET ``path`` and return the decoded JSON body.

        Raises:
            NetworkError: transport failure or non-success status
            DecodeError: body is not JSON or nests too deeply to decode
        """
        url = f"{self.base_url}{path}"
        try:
            response = await self._get_client().get(url, params=params or None)
        except httpx.HTTPError as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise NetworkError(details={"url": url, "reason": str(e)}) from e

        if not response.is_success:
            logger.warning(f"{url} returned {response.status_code}")
            raise NetworkError(
                message=f"Remote service returned {response.status_code}",
                details={"url": url, "status_code": response.status_code},
            )

        try:
            return response.json()
        except (ValueError, RecursionError) as e:
            logger.warning(f"Malformed JSON from {url}: {e}")
            raise DecodeError(details={"url": url, "reason": str(e)}) from e
