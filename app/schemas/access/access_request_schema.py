from datetime import datetime
from typing import Optional, Union
from pydantic import Field, validator
from app.models.shared.enums import AccessRequestStatus, GrantReason
from app.schemas.common.camel import CamelModel


class AccessRequestCreate(CamelModel):
    resource_type: str
    resource_id: Union[int, str]
    note: Optional[str] = Field(None, max_length=500)

    @validator('resource_type')
    def validate_resource_type(cls, v):
        if not v or not v.strip():
            raise ValueError('resourceType is required')
        return v.strip()

    @validator('note')
    def strip_note(cls, v):
        if v is None:
            return v
        return v.strip() or None


class AccessRequestDecision(CamelModel):
    """Body for approve. allowMinutes falls back to the configured default (15)."""
    allow_minutes: Optional[int] = None


class AccessRequestResponse(CamelModel):
    id: str                     # "AR-<n>"
    resource_type: str
    resource_id: str            # display form, e.g. "E-7"
    owner_admin_id: str
    requester_admin_id: str
    status: AccessRequestStatus
    requested_at: datetime
    decided_at: Optional[datetime] = None
    allowed_until: Optional[datetime] = None
    note: Optional[str] = None


class AccessDecisionResponse(CamelModel):
    allowed: bool
    reason: GrantReason
    resource_type: str
    resource_id: str
    owner_admin_id: Optional[str] = None
    allowed_until: Optional[datetime] = None
