from pydantic import computed_field, model_validator
from typing import Optional
from datetime import date, datetime
from app.models.shared.enums import LeaveStatus, LeaveType, ResourceType
from app.schemas.common.camel import CamelModel
from app.utils.resource_ids import format_resource_id

class LeaveRequestBase(CamelModel):
    employee_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: Optional[str] = None

class LeaveRequestCreate(LeaveRequestBase):
    @model_validator(mode='after')
    def validate_dates(self):
        if self.end_date < self.start_date:
            raise ValueError('End date cannot be before start date')
        return self

class LeaveRequestUpdate(CamelModel):
    leave_type: Optional[LeaveType] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[LeaveStatus] = None
    reason: Optional[str] = None

class LeaveRequestResponse(LeaveRequestBase):
    id: int
    status: LeaveStatus
    owner_admin_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def code(self) -> str:
        return format_resource_id(ResourceType.LEAVE_REQUEST, self.id)
