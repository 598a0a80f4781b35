from pydantic import EmailStr, Field, computed_field, validator
from typing import Optional
from datetime import datetime
from app.models.shared.enums import ResourceType
from app.schemas.common.camel import CamelModel
from app.utils.resource_ids import format_resource_id

class CandidateBase(CamelModel):
    first_name: str
    last_name: str
    email: EmailStr
    phone: Optional[str] = None
    linkedin_profile: Optional[str] = None
    years_of_experience: Optional[int] = Field(None, ge=0)
    skills: Optional[str] = None

class CandidateCreate(CandidateBase):
    @validator('first_name', 'last_name')
    def validate_names(cls, v):
        if not v or not v.strip():
            raise ValueError('Name is required')
        return v.strip()

class CandidateUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    linkedin_profile: Optional[str] = None
    years_of_experience: Optional[int] = Field(None, ge=0)
    skills: Optional[str] = None

class CandidateResponse(CandidateBase):
    id: int
    owner_admin_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def code(self) -> str:
        return format_resource_id(ResourceType.CANDIDATE, self.id)
