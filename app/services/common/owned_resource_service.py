import logging
from typing import Any, List, Optional
from fastapi import HTTPException, status
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidArgumentError, NotFoundError
from app.models.shared.enums import OwnershipScope, ResourceType
from app.services.access.access_grant_service import AccessGrantService
from app.services.access.ownership import OWNED_MODELS, apply_scope
from app.utils.clock import Clock, utc_now

logger = logging.getLogger(__name__)


class OwnedResourceService:
    """CRUD for a resource that carries an owner admin.

    Creating stamps the caller as owner; updating goes through the grant
    resolver. Subclasses set ``resource_type`` and add their own checks.
    """

    resource_type: ResourceType
    default_order: Any = None

    def __init__(self, session: AsyncSession, clock: Clock = utc_now):
        self.session = session
        self.clock = clock
        self.grants = AccessGrantService(session, clock)

    @property
    def model(self):
        return OWNED_MODELS[self.resource_type]

    @property
    def label(self) -> str:
        return self.resource_type.value

    # ---------- Hooks ----------
    async def _validate_create(self, data: BaseModel) -> None:
        pass

    async def _validate_update(self, obj, data: BaseModel) -> None:
        pass

    # ---------- Getters ----------
    async def get(self, resource_id: int):
        result = await self.session.execute(
            select(self.model).where(self.model.id == resource_id)
        )
        return result.scalar_one_or_none()

    async def list_scoped(self, scope: OwnershipScope, admin_id: Optional[str]) -> List:
        query = apply_scope(select(self.model), self.model, scope, admin_id)
        query = query.order_by(self.default_order if self.default_order is not None else self.model.id)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    # ---------- Create / Update ----------
    async def create(self, data: BaseModel, admin_id: Optional[str]):
        if not admin_id:
            raise InvalidArgumentError("X-Admin-Id header is required")

        await self._validate_create(data)
        try:
            obj = self.model(**data.model_dump(), owner_admin_id=admin_id)
            self.session.add(obj)
            await self.session.commit()
            await self.session.refresh(obj)

            logger.info(f"{self.label} {obj.id} created by admin {admin_id}")
            return obj

        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error creating {self.label}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error creating {self.label}",
            )

    async def update(self, resource_id: int, data: BaseModel, admin_id: Optional[str]):
        obj = await self.get(resource_id)
        if obj is None:
            raise NotFoundError(f"{self.label} not found")

        try:
            await self.grants.ensure_can_edit(admin_id, self.resource_type, obj)
            await self._validate_update(obj, data)

            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(obj, field, value)

            await self.session.commit()
            await self.session.refresh(obj)

            logger.info(f"{self.label} {obj.id} updated by admin {admin_id}")
            return obj

        except HTTPException:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error updating {self.label} {resource_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error updating {self.label}",
            )
