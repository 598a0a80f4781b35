import logging
from typing import List, Optional, Union
from datetime import timedelta
from fastapi import HTTPException, status
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import ForbiddenError, InvalidArgumentError, NotFoundError
from app.models.access.access_request import AccessRequest
from app.models.shared.enums import AccessRequestStatus, ResourceType
from app.schemas.access.access_request_schema import AccessRequestResponse
from app.services.access.ownership import admin_matches, get_owned_resource, same_admin
from app.utils.clock import Clock, as_utc, utc_now
from app.utils.resource_ids import (
    format_access_request_id,
    format_resource_id,
    parse_access_request_id,
    parse_resource_id,
    parse_resource_type,
)

logger = logging.getLogger(__name__)


def parse_request_id(raw: Union[str, int, None]) -> int:
    """``AR-12`` or ``12``; anything else is rejected."""
    parsed = parse_access_request_id(raw)
    if parsed is None:
        raise InvalidArgumentError("Invalid access request id")
    return parsed


def to_response(request: AccessRequest) -> AccessRequestResponse:
    return AccessRequestResponse(
        id=format_access_request_id(request.id),
        resource_type=request.resource_type.value,
        resource_id=format_resource_id(request.resource_type, request.resource_id),
        owner_admin_id=request.owner_admin_id,
        requester_admin_id=request.requester_admin_id,
        status=request.status,
        requested_at=as_utc(request.requested_at),
        decided_at=as_utc(request.decided_at) if request.decided_at else None,
        allowed_until=as_utc(request.allowed_until) if request.allowed_until else None,
        note=request.note,
    )


class AccessRequestService:
    """Pending -> Approved | Denied, decided once by the resource owner."""

    def __init__(self, session: AsyncSession, clock: Clock = utc_now):
        self.session = session
        self.clock = clock

    # ---------- Helpers ----------
    async def _get_for_update(self, access_request_id: int) -> Optional[AccessRequest]:
        result = await self.session.execute(
            select(AccessRequest)
            .where(AccessRequest.id == access_request_id)
            .with_for_update()
        )
        return result.scalar_one_or_none()

    async def find_pending(
        self, requester_admin_id: str, resource_type: ResourceType, resource_id: int
    ) -> Optional[AccessRequest]:
        result = await self.session.execute(
            select(AccessRequest)
            .where(
                AccessRequest.requester_admin_id == requester_admin_id,
                AccessRequest.resource_type == resource_type,
                AccessRequest.resource_id == resource_id,
                AccessRequest.status == AccessRequestStatus.PENDING,
            )
            .order_by(AccessRequest.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def find_active_approval(
        self, requester_admin_id: str, resource_type: ResourceType, resource_id: int
    ) -> Optional[AccessRequest]:
        """Latest approved request whose window is still open (allowed_until strictly after now)."""
        result = await self.session.execute(
            select(AccessRequest)
            .where(
                admin_matches(AccessRequest.requester_admin_id, requester_admin_id),
                AccessRequest.resource_type == resource_type,
                AccessRequest.resource_id == resource_id,
                AccessRequest.status == AccessRequestStatus.APPROVED,
                AccessRequest.allowed_until.is_not(None),
                AccessRequest.allowed_until > self.clock(),
            )
            .order_by(AccessRequest.allowed_until.desc(), AccessRequest.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    # ---------- Create ----------
    async def create(
        self,
        requester_admin_id: Optional[str],
        resource_type: Union[str, ResourceType, None],
        resource_id: Union[str, int, None],
        note: Optional[str] = None,
    ) -> AccessRequest:
        if not requester_admin_id or not requester_admin_id.strip():
            raise InvalidArgumentError("Requester admin id is required")
        requester_admin_id = requester_admin_id.strip()

        parsed_type = resource_type if isinstance(resource_type, ResourceType) else parse_resource_type(resource_type)
        if parsed_type is None:
            raise NotFoundError("Resource not found")
        parsed_id = parse_resource_id(parsed_type, resource_id)
        if parsed_id is None:
            raise NotFoundError("Resource not found")

        resource = await get_owned_resource(self.session, parsed_type, parsed_id)
        if resource is None:
            raise NotFoundError("Resource not found")
        if not resource.owner_admin_id:
            raise NotFoundError("Owner admin is not assigned for this resource")
        if same_admin(resource.owner_admin_id, requester_admin_id):
            raise InvalidArgumentError("You already own this resource")

        if await self.find_pending(requester_admin_id, parsed_type, parsed_id) is not None:
            raise InvalidArgumentError("A pending access request already exists for this resource")

        try:
            request = AccessRequest(
                resource_type=parsed_type,
                resource_id=parsed_id,
                owner_admin_id=resource.owner_admin_id,
                requester_admin_id=requester_admin_id,
                status=AccessRequestStatus.PENDING,
                requested_at=self.clock(),
                note=note,
            )
            self.session.add(request)
            await self.session.commit()
            await self.session.refresh(request)

            logger.info(
                f"Access request {format_access_request_id(request.id)} created by {requester_admin_id} "
                f"for {parsed_type.value} {parsed_id} (owner {request.owner_admin_id})"
            )
            return request

        except IntegrityError:
            # concurrent create lost the race on the one-pending index
            await self.session.rollback()
            raise InvalidArgumentError("A pending access request already exists for this resource")
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error creating access request: {e}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error creating access request")

    # ---------- Decide ----------
    async def _decide(
        self,
        access_request_id: int,
        owner_admin_id: Optional[str],
        decision: AccessRequestStatus,
        allow_minutes: Optional[int] = None,
    ) -> AccessRequest:
        if not owner_admin_id:
            raise InvalidArgumentError("Owner admin id is required")

        verb = "approve" if decision == AccessRequestStatus.APPROVED else "deny"
        try:
            request = await self._get_for_update(access_request_id)
            if request is None:
                raise NotFoundError("Access request not found")

            if not same_admin(request.owner_admin_id, owner_admin_id):
                raise ForbiddenError(
                    f"Only the owner admin can {verb} this request",
                    status_code=status.HTTP_400_BAD_REQUEST,
                )

            if request.status != AccessRequestStatus.PENDING:
                raise InvalidArgumentError(f"Access request is already {request.status.value.lower()}")

            now = self.clock()
            values = {"status": decision, "decided_at": now, "allowed_until": None}
            if decision == AccessRequestStatus.APPROVED:
                minutes = settings.ACCESS_REQUEST_DEFAULT_MINUTES if allow_minutes is None else allow_minutes
                if minutes <= 0:
                    raise InvalidArgumentError("allowMinutes must be greater than zero")
                if minutes > settings.ACCESS_REQUEST_MAX_MINUTES:
                    raise InvalidArgumentError(
                        f"allowMinutes cannot exceed {settings.ACCESS_REQUEST_MAX_MINUTES}"
                    )
                values["allowed_until"] = now + timedelta(minutes=minutes)

            # compare-and-set: only a still-pending row can be decided
            result = await self.session.execute(
                update(AccessRequest)
                .where(
                    AccessRequest.id == access_request_id,
                    AccessRequest.status == AccessRequestStatus.PENDING,
                )
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                raise InvalidArgumentError("Access request has already been decided")

            await self.session.commit()
            await self.session.refresh(request)

            logger.info(
                f"Access request {format_access_request_id(request.id)} {request.status.value.lower()} "
                f"by {owner_admin_id}"
                + (f" until {request.allowed_until}" if request.allowed_until else "")
            )
            return request

        except HTTPException:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error trying to {verb} access request {access_request_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Error trying to {verb} access request",
            )

    async def approve(
        self, access_request_id: int, owner_admin_id: Optional[str], allow_minutes: Optional[int] = None
    ) -> AccessRequest:
        return await self._decide(access_request_id, owner_admin_id, AccessRequestStatus.APPROVED, allow_minutes)

    async def deny(self, access_request_id: int, owner_admin_id: Optional[str]) -> AccessRequest:
        return await self._decide(access_request_id, owner_admin_id, AccessRequestStatus.DENIED)

    # ---------- Listing ----------
    async def get_access_request(self, access_request_id: int) -> Optional[AccessRequest]:
        result = await self.session.execute(
            select(AccessRequest).where(AccessRequest.id == access_request_id)
        )
        return result.scalar_one_or_none()

    async def get_inbox(self, owner_admin_id: Optional[str]) -> List[AccessRequest]:
        if not owner_admin_id:
            return []
        result = await self.session.execute(
            select(AccessRequest)
            .where(AccessRequest.owner_admin_id == owner_admin_id)
            .order_by(AccessRequest.requested_at.desc(), AccessRequest.id.desc())
        )
        return list(result.scalars().all())

    async def get_outbox(self, requester_admin_id: Optional[str]) -> List[AccessRequest]:
        if not requester_admin_id:
            return []
        result = await self.session.execute(
            select(AccessRequest)
            .where(AccessRequest.requester_admin_id == requester_admin_id)
            .order_by(AccessRequest.requested_at.desc(), AccessRequest.id.desc())
        )
        return list(result.scalars().all())

    async def get_active_grants(self, requester_admin_id: Optional[str]) -> List[AccessRequest]:
        """Approved requests of this admin that have not run out yet, soonest expiry first."""
        if not requester_admin_id:
            return []
        result = await self.session.execute(
            select(AccessRequest)
            .where(
                admin_matches(AccessRequest.requester_admin_id, requester_admin_id),
                AccessRequest.status == AccessRequestStatus.APPROVED,
                AccessRequest.allowed_until > self.clock(),
            )
            .order_by(AccessRequest.allowed_until.asc(), AccessRequest.id.asc())
        )
        return list(result.scalars().all())
