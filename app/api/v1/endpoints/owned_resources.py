"""List/get/create/update routes shared by every owner-tagged HR resource."""
import logging
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional, Type
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_admin_id, require_admin_id
from app.core.database import get_async_session
from app.core.exceptions import NotFoundError
from app.services.access.ownership import parse_scope
from app.services.common.owned_resource_service import OwnedResourceService
from app.utils.clock import Clock, get_clock
from app.utils.resource_ids import parse_resource_id

logger = logging.getLogger(__name__)


def build_owned_resource_router(
    service_cls: Type[OwnedResourceService],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
) -> APIRouter:
    router = APIRouter()
    resource_type = service_cls.resource_type
    label = resource_type.value

    def parse_id(raw: str) -> int:
        parsed = parse_resource_id(resource_type, raw)
        if parsed is None:
            raise NotFoundError(f"{label} not found")
        return parsed

    @router.get("", response_model=List[response_schema])
    async def list_resources(
        scope: Optional[str] = Query(None, description="'yours' narrows to resources you own"),
        admin_id: Optional[str] = Depends(get_current_admin_id),
        session: AsyncSession = Depends(get_async_session),
        clock: Clock = Depends(get_clock),
    ):
        """List rows; scope=yours keeps only the caller's"""
        service = service_cls(session, clock)
        return await service.list_scoped(parse_scope(scope), admin_id)

    @router.get("/{resource_id}", response_model=response_schema)
    async def get_resource(
        resource_id: str,
        session: AsyncSession = Depends(get_async_session),
        clock: Clock = Depends(get_clock),
    ):
        """Get one row by id, bare or prefixed"""
        service = service_cls(session, clock)
        obj = await service.get(parse_id(resource_id))
        if obj is None:
            raise NotFoundError(f"{label} not found")
        return obj

    @router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    async def create_resource(
        data: create_schema,
        admin_id: str = Depends(require_admin_id),
        session: AsyncSession = Depends(get_async_session),
        clock: Clock = Depends(get_clock),
    ):
        """Create a row owned by the caller"""
        service = service_cls(session, clock)
        return await service.create(data, admin_id)

    @router.put("/{resource_id}", response_model=response_schema)
    async def update_resource(
        resource_id: str,
        data: update_schema,
        admin_id: Optional[str] = Depends(get_current_admin_id),
        session: AsyncSession = Depends(get_async_session),
        clock: Clock = Depends(get_clock),
    ):
        """Update a row; owner, delegate or approved requester only"""
        service = service_cls(session, clock)
        return await service.update(parse_id(resource_id), data, admin_id)

    return router
