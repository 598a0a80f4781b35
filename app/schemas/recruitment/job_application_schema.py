from pydantic import computed_field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from app.models.shared.enums import JobApplicationStatus, ResourceType
from app.schemas.common.camel import CamelModel
from app.utils.resource_ids import format_resource_id

class JobApplicationBase(CamelModel):
    candidate_id: int
    job_title: str
    cover_letter: Optional[str] = None
    expected_salary: Optional[Decimal] = None

class JobApplicationCreate(JobApplicationBase):
    pass

class JobApplicationUpdate(CamelModel):
    job_title: Optional[str] = None
    status: Optional[JobApplicationStatus] = None
    cover_letter: Optional[str] = None
    expected_salary: Optional[Decimal] = None

class JobApplicationResponse(JobApplicationBase):
    id: int
    status: JobApplicationStatus
    owner_admin_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def code(self) -> str:
        return format_resource_id(ResourceType.JOB_APPLICATION, self.id)
