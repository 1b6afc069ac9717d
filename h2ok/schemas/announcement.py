from pydantic import BaseModel, field_validator
from typing import Optional


class AnnouncementRecord(BaseModel):
    id: str
    title: str
    content: str
    external_url: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class AnnouncementListResponse(BaseModel):
    items: list[AnnouncementRecord] = []

    @field_validator('items', mode='before')
    @classmethod
    def null_items_empty(cls, v):
        return [] if v is None else v
