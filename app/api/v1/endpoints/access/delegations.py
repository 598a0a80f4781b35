import logging
from fastapi import APIRouter, Depends
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_current_admin_id, require_admin_id
from app.core.database import get_async_session
from app.schemas.access.delegation_schema import DelegationCreate, DelegationResponse
from app.services.access.delegation_service import AdminDelegationService
from app.utils.clock import Clock, get_clock

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/outgoing", response_model=List[DelegationResponse])
async def get_my_delegations(
    admin_id: Optional[str] = Depends(get_current_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Delegations created by the calling admin, any status"""
    service = AdminDelegationService(session, clock)
    return [service.to_response(d) for d in await service.get_my_delegations(admin_id)]

@router.get("/incoming", response_model=List[DelegationResponse])
async def get_delegations_to_me(
    admin_id: Optional[str] = Depends(get_current_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Delegations naming the calling admin as recipient, any status"""
    service = AdminDelegationService(session, clock)
    return [service.to_response(d) for d in await service.get_delegations_to_me(admin_id)]

@router.get("/delegated-admins", response_model=List[str])
async def get_delegated_admin_ids(
    admin_id: Optional[str] = Depends(get_current_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Admins the caller may currently act for"""
    service = AdminDelegationService(session, clock)
    return await service.get_delegated_admin_ids(admin_id)

@router.post("", response_model=DelegationResponse)
async def create_delegation(
    data: DelegationCreate,
    admin_id: str = Depends(require_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Delegate the caller's authority to another admin for a date range"""
    service = AdminDelegationService(session, clock)
    delegation = await service.create_delegation(
        admin_id, data.to_admin_id, data.start_date, data.end_date, data.reason
    )
    return service.to_response(delegation)

@router.post("/{delegation_id}/revoke")
async def revoke_delegation(
    delegation_id: int,
    admin_id: str = Depends(require_admin_id),
    session: AsyncSession = Depends(get_async_session),
    clock: Clock = Depends(get_clock),
):
    """Revoke one of the caller's delegations"""
    service = AdminDelegationService(session, clock)
    await service.revoke_delegation(delegation_id, admin_id)
    return {"message": "Delegation revoked"}
