"""Announcement ("updates") feed client."""
import logging
from typing import List

from pydantic import ValidationError

from h2ok.core.exceptions import DecodeError
from h2ok.schemas.announcement import AnnouncementListResponse, AnnouncementRecord
from h2ok.services.backend_client import BackendClient

logger = logging.getLogger(__name__)

UPDATES_PATH = "/api/updates"


class AnnouncementClient(BackendClient):
    async def fetch(self) -> List[AnnouncementRecord]:
        payload = await self._get_json(UPDATES_PATH)
        try:
            return AnnouncementListResponse.model_validate(payload).items
        except ValidationError as e:
            raise DecodeError(details={"error_count": e.error_count()}) from e
