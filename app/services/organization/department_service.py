import logging
from sqlalchemy import select

from app.core.exceptions import InvalidArgumentError
from app.models.organization.department import Department
from app.models.shared.enums import ResourceType
from app.schemas.organization.department_schema import DepartmentCreate, DepartmentUpdate
from app.services.common.owned_resource_service import OwnedResourceService

logger = logging.getLogger(__name__)


class DepartmentService(OwnedResourceService):
    resource_type = ResourceType.DEPARTMENT
    default_order = Department.name.asc()

    async def _name_taken(self, name: str, exclude_id: int = None) -> bool:
        query = select(Department.id).where(Department.name == name)
        if exclude_id is not None:
            query = query.where(Department.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def _validate_create(self, data: DepartmentCreate) -> None:
        if await self._name_taken(data.name):
            raise InvalidArgumentError(f"Department '{data.name}' already exists")

    async def _validate_update(self, dept: Department, data: DepartmentUpdate) -> None:
        if data.name and data.name != dept.name and await self._name_taken(data.name, dept.id):
            raise InvalidArgumentError(f"Department '{data.name}' already exists")
