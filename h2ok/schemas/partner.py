from pydantic import BaseModel, Field, field_validator
from typing import Optional

from h2ok.models.internal_models import AccessType


class PointRecord(BaseModel):
    id: str
    name: str
    address: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    open_hours: Optional[str] = None
    has_hot: bool
    has_cold: bool
    access_type: AccessType
    is_new: bool = False

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v):
        # The service may hand out integer primary keys
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator('access_type', mode='before')
    @classmethod
    def coerce_access_type(cls, v):
        # Anything other than free access means asking staff
        return AccessType.FREE if v == AccessType.FREE.value else AccessType.ASK_STAFF

    @field_validator('open_hours', mode='before')
    @classmethod
    def blank_hours_absent(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class PartnerListResponse(BaseModel):
    items: list[PointRecord] = []

    @field_validator('items', mode='before')
    @classmethod
    def null_items_empty(cls, v):
        return [] if v is None else v
