from pydantic import EmailStr, computed_field, validator
from typing import Optional
from datetime import date, datetime
from app.models.shared.enums import EmploymentStatus, ResourceType
from app.schemas.common.camel import CamelModel
from app.utils.resource_ids import format_resource_id

class EmployeeBase(CamelModel):
    first_name: str
    last_name: str
    email: EmailStr
    phone: Optional[str] = None
    hire_date: date
    position: Optional[str] = None
    department_id: Optional[int] = None

class EmployeeCreate(EmployeeBase):
    @validator('first_name', 'last_name')
    def validate_names(cls, v):
        if not v or len(v.strip()) < 2:
            raise ValueError('Name must be at least 2 characters')
        return v.strip().title()

class EmployeeUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    department_id: Optional[int] = None
    employment_status: Optional[EmploymentStatus] = None

class EmployeeResponse(EmployeeBase):
    id: int
    employment_status: EmploymentStatus
    owner_admin_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def code(self) -> str:
        return format_resource_id(ResourceType.EMPLOYEE, self.id)
