"""Ownership model: which admin owns a resource, and the all/yours list scope."""
from typing import Optional, Union
from sqlalchemy import Select, false, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.hr.employee import Employee
from app.models.hr.leave_request import LeaveRequest
from app.models.organization.department import Department
from app.models.recruitment.candidate import Candidate
from app.models.recruitment.job_application import JobApplication
from app.models.shared.enums import OwnershipScope, ResourceType

OWNED_MODELS = {
    ResourceType.DEPARTMENT: Department,
    ResourceType.EMPLOYEE: Employee,
    ResourceType.CANDIDATE: Candidate,
    ResourceType.JOB_APPLICATION: JobApplication,
    ResourceType.LEAVE_REQUEST: LeaveRequest,
}

OwnedResource = Union[Department, Employee, Candidate, JobApplication, LeaveRequest]


def parse_scope(raw: Optional[str]) -> OwnershipScope:
    """Only "yours" (any case) narrows; anything else, including None, is "all"."""
    if raw is not None and raw.strip().lower() == OwnershipScope.YOURS.value:
        return OwnershipScope.YOURS
    return OwnershipScope.ALL


def apply_scope(query: Select, model, scope: OwnershipScope, admin_id: Optional[str]) -> Select:
    """Narrow a list query to the caller's own rows.

    "yours" without a caller id yields nothing. "all" is not a grant check.
    """
    if scope != OwnershipScope.YOURS:
        return query
    if not admin_id:
        return query.where(false())
    return query.where(model.owner_admin_id == admin_id)


async def get_owned_resource(
    session: AsyncSession,
    resource_type: ResourceType,
    resource_id: int,
) -> Optional[OwnedResource]:
    model = OWNED_MODELS[resource_type]
    result = await session.execute(select(model).where(model.id == resource_id))
    return result.scalar_one_or_none()


def admin_matches(column, admin_id: str):
    """SQL side of ``same_admin``, for grant lookups."""
    return func.lower(column) == admin_id.strip().lower()


def same_admin(a: Optional[str], b: Optional[str]) -> bool:
    """Admin ids compare case-insensitively."""
    if not a or not b:
        return False
    return a.strip().lower() == b.strip().lower()
