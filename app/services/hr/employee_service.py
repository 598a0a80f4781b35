import logging
from sqlalchemy import select

from app.core.exceptions import InvalidArgumentError
from app.models.hr.employee import Employee
from app.models.organization.department import Department
from app.models.shared.enums import ResourceType
from app.schemas.hr.employee_schema import EmployeeCreate, EmployeeUpdate
from app.services.common.owned_resource_service import OwnedResourceService

logger = logging.getLogger(__name__)


class EmployeeService(OwnedResourceService):
    resource_type = ResourceType.EMPLOYEE

    async def _check_department(self, department_id: int) -> None:
        dep_res = await self.session.execute(
            select(Department.id).where(
                Department.id == department_id,
                Department.is_active == True
            )
        )
        if dep_res.scalar_one_or_none() is None:
            raise InvalidArgumentError(f"Department with ID {department_id} not found")

    async def _email_taken(self, email: str, exclude_id: int = None) -> bool:
        query = select(Employee.id).where(Employee.email == email)
        if exclude_id is not None:
            query = query.where(Employee.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def _validate_create(self, data: EmployeeCreate) -> None:
        if data.department_id:
            await self._check_department(data.department_id)
        if await self._email_taken(data.email):
            raise InvalidArgumentError(f"Employee with email '{data.email}' already exists")

    async def _validate_update(self, employee: Employee, data: EmployeeUpdate) -> None:
        if data.department_id:
            await self._check_department(data.department_id)
        if data.email and data.email != employee.email and await self._email_taken(data.email, employee.id):
            raise InvalidArgumentError(f"Employee with email '{data.email}' already exists")
