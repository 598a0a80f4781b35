from datetime import date, datetime
from typing import Optional
from pydantic import Field, validator
from app.models.shared.enums import DelegationStatus
from app.schemas.common.camel import CamelModel


class DelegationCreate(CamelModel):
    to_admin_id: str
    start_date: date
    end_date: date
    reason: Optional[str] = Field(None, max_length=500)

    @validator('to_admin_id')
    def strip_to_admin(cls, v):
        return v.strip()


class DelegationResponse(CamelModel):
    id: int
    from_admin_id: str
    to_admin_id: str
    start_date: date
    end_date: date
    status: DelegationStatus
    reason: Optional[str] = None
    created_at: Optional[datetime] = None
    revoked_at: Optional[datetime] = None
