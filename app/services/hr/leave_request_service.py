import logging
from sqlalchemy import select

from app.core.exceptions import InvalidArgumentError
from app.models.hr.employee import Employee
from app.models.hr.leave_request import LeaveRequest
from app.models.shared.enums import ResourceType
from app.schemas.hr.leave_request_schema import LeaveRequestCreate, LeaveRequestUpdate
from app.services.common.owned_resource_service import OwnedResourceService

logger = logging.getLogger(__name__)


class LeaveRequestService(OwnedResourceService):
    resource_type = ResourceType.LEAVE_REQUEST
    default_order = LeaveRequest.start_date.desc()

    async def _validate_create(self, data: LeaveRequestCreate) -> None:
        result = await self.session.execute(
            select(Employee.id).where(Employee.id == data.employee_id)
        )
        if result.scalar_one_or_none() is None:
            raise InvalidArgumentError(f"Employee with ID {data.employee_id} not found")

    async def _validate_update(self, leave: LeaveRequest, data: LeaveRequestUpdate) -> None:
        start = data.start_date or leave.start_date
        end = data.end_date or leave.end_date
        if end < start:
            raise InvalidArgumentError("End date cannot be before start date")
