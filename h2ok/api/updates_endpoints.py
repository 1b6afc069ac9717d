"""Updates feed endpoint."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from h2ok.core.dependencies import get_coordinator
from h2ok.schemas.announcement import AnnouncementRecord
from h2ok.schemas.base import Envelope
from h2ok.services.map_sync_coordinator import MapSyncCoordinator

router = APIRouter(prefix="/updates", tags=["updates"])

EMPTY_FEED_TEXT = "No updates yet"
READ_MORE_LABEL = "Read more"


class UpdatesPage(BaseModel):
    title: str = "Updates"
    items: list[AnnouncementRecord]
    empty_text: str = EMPTY_FEED_TEXT
    read_more_label: str = READ_MORE_LABEL


@router.get("", response_model=Envelope[UpdatesPage])
async def get_updates(coordinator: MapSyncCoordinator = Depends(get_coordinator)):
    # Each visit re-fetches; an unreachable feed shows up as an empty list
    items = await coordinator.on_view_activated()
    return Envelope[UpdatesPage](status="ok", data=UpdatesPage(items=items))
