import logging
from fastapi import APIRouter, Body, Depends, Query
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_admin_id, require_admin_id
from app.core.database import get_async_session
from app.core.exceptions import InvalidArgumentError
from app.schemas.access.access_request_schema import (
    AccessDecisionResponse,
    AccessRequestCreate,
    AccessRequestDecision,
    AccessRequestResponse,
)
from app.services.access.access_grant_service import AccessGrantService
from app.services.access.access_request_service import AccessRequestService, parse_request_id, to_response
from app.utils.clock import Clock, get_clock
from app.utils.resource_ids import parse_resource_id, parse_resource_type

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/inbox", response_model=List[AccessRequestResponse])
async def get_inbox(
    admin_id: Optional[str] = Depends(get_current_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Requests waiting on (or decided by) the calling owner admin, newest first"""
    service = AccessRequestService(session, clock)
    return [to_response(r) for r in await service.get_inbox(admin_id)]

@router.get("/outbox", response_model=List[AccessRequestResponse])
async def get_outbox(
    admin_id: Optional[str] = Depends(get_current_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Requests the calling admin has sent, newest first"""
    service = AccessRequestService(session, clock)
    return [to_response(r) for r in await service.get_outbox(admin_id)]

@router.get("/active", response_model=List[AccessRequestResponse])
async def get_active_grants(
    admin_id: Optional[str] = Depends(get_current_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Approved requests of the calling admin that have not expired yet"""
    service = AccessRequestService(session, clock)
    return [to_response(r) for r in await service.get_active_grants(admin_id)]

@router.get("/check", response_model=AccessDecisionResponse)
async def check_access(
    resource_type: str = Query(..., alias="resourceType"),
    resource_id: str = Query(..., alias="resourceId"),
    admin_id: str = Depends(require_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Whether the calling admin may act on a resource, and through which grant"""
    parsed_type = parse_resource_type(resource_type)
    if parsed_type is None:
        raise InvalidArgumentError(f"Unknown resource type '{resource_type}'")
    parsed_id = parse_resource_id(parsed_type, resource_id)
    if parsed_id is None:
        raise InvalidArgumentError("Invalid resource id")

    service = AccessGrantService(session, clock)
    return await service.resolve(admin_id, parsed_type, parsed_id)

@router.post("", response_model=AccessRequestResponse)
async def create_access_request(
    data: AccessRequestCreate,
    admin_id: str = Depends(require_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Ask the owner of a resource for temporary access"""
    service = AccessRequestService(session, clock)
    request = await service.create(admin_id, data.resource_type, data.resource_id, data.note)
    return to_response(request)

@router.post("/{access_request_id}/approve", response_model=AccessRequestResponse)
async def approve_access_request(
    access_request_id: str,
    decision: Optional[AccessRequestDecision] = Body(None),
    admin_id: str = Depends(require_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Owner grants access for allowMinutes (default 15)"""
    request_id = parse_request_id(access_request_id)
    service = AccessRequestService(session, clock)
    allow_minutes = decision.allow_minutes if decision else None
    request = await service.approve(request_id, admin_id, allow_minutes)
    return to_response(request)

@router.post("/{access_request_id}/deny", response_model=AccessRequestResponse)
async def deny_access_request(
    access_request_id: str,
    admin_id: str = Depends(require_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Owner refuses the request"""
    request_id = parse_request_id(access_request_id)
    service = AccessRequestService(session, clock)
    request = await service.deny(request_id, admin_id)
    return to_response(request)
