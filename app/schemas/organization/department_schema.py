from pydantic import computed_field, validator
from typing import Optional
from datetime import datetime
from app.models.shared.enums import ResourceType
from app.schemas.common.camel import CamelModel
from app.utils.resource_ids import format_resource_id

class DepartmentBase(CamelModel):
    name: str
    description: Optional[str] = None

class DepartmentCreate(DepartmentBase):
    @validator('name')
    def validate_name(cls, v):
        if not v or len(v.strip()) < 2:
            raise ValueError('Department name must be at least 2 characters')
        return v.strip()

class DepartmentUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None

class DepartmentResponse(DepartmentBase):
    id: int
    is_active: bool
    owner_admin_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def code(self) -> str:
        return format_resource_id(ResourceType.DEPARTMENT, self.id)
