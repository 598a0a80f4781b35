import logging
from typing import List, Optional
from datetime import date
from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ForbiddenError, InvalidArgumentError, NotFoundError
from app.models.access.admin_delegation import AdminDelegation
from app.models.shared.enums import DelegationStatus
from app.schemas.access.delegation_schema import DelegationResponse
from app.services.access.ownership import admin_matches, same_admin
from app.utils.clock import Clock, utc_now, utc_today

logger = logging.getLogger(__name__)


class AdminDelegationService:
    """Date-windowed blanket grants: from_admin lets to_admin act on everything it owns.

    Expiry is never written; a delegation whose end_date has passed simply stops
    matching ``get_delegated_admin_ids`` and reads back as EXPIRED.
    """

    def __init__(self, session: AsyncSession, clock: Clock = utc_now):
        self.session = session
        self.clock = clock

    # ---------- Helpers ----------
    def _effective_status(self, delegation: AdminDelegation) -> DelegationStatus:
        if delegation.status == DelegationStatus.ACTIVE and delegation.end_date < utc_today(self.clock):
            return DelegationStatus.EXPIRED
        return delegation.status

    def to_response(self, delegation: AdminDelegation) -> DelegationResponse:
        return DelegationResponse(
            id=delegation.id,
            from_admin_id=delegation.from_admin_id,
            to_admin_id=delegation.to_admin_id,
            start_date=delegation.start_date,
            end_date=delegation.end_date,
            status=self._effective_status(delegation),
            reason=delegation.reason,
            created_at=delegation.created_at,
            revoked_at=delegation.revoked_at,
        )

    # ---------- Create / Revoke ----------
    async def create_delegation(
        self,
        from_admin_id: Optional[str],
        to_admin_id: Optional[str],
        start_date: date,
        end_date: date,
        reason: Optional[str] = None,
    ) -> AdminDelegation:
        if not from_admin_id or not from_admin_id.strip():
            raise InvalidArgumentError("Admin ID is required")
        if not to_admin_id or not to_admin_id.strip():
            raise InvalidArgumentError("Target admin ID is required")
        if same_admin(from_admin_id, to_admin_id):
            raise InvalidArgumentError("Cannot delegate to yourself")
        if end_date < start_date:
            raise InvalidArgumentError("End date cannot be before start date")

        try:
            delegation = AdminDelegation(
                from_admin_id=from_admin_id.strip(),
                to_admin_id=to_admin_id.strip(),
                start_date=start_date,
                end_date=end_date,
                status=DelegationStatus.ACTIVE,
                reason=(reason or "").strip() or None,
            )
            self.session.add(delegation)
            await self.session.commit()
            await self.session.refresh(delegation)

            logger.info(
                f"Admin {delegation.from_admin_id} delegated authority to {delegation.to_admin_id} "
                f"from {start_date} until {end_date}"
            )
            return delegation

        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error creating delegation: {e}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error creating delegation")

    async def revoke_delegation(self, delegation_id: int, caller_admin_id: Optional[str]) -> AdminDelegation:
        if not caller_admin_id:
            raise InvalidArgumentError("Admin ID is required")

        try:
            result = await self.session.execute(
                select(AdminDelegation)
                .where(
                    AdminDelegation.id == delegation_id,
                    AdminDelegation.status != DelegationStatus.REVOKED,
                )
                .with_for_update()
            )
            delegation = result.scalar_one_or_none()
            if delegation is None:
                raise NotFoundError("Delegation not found")

            if not same_admin(delegation.from_admin_id, caller_admin_id):
                raise ForbiddenError(
                    "You can only revoke your own delegations",
                    status_code=status.HTTP_400_BAD_REQUEST,
                )

            delegation.status = DelegationStatus.REVOKED
            delegation.revoked_at = self.clock()
            await self.session.commit()
            await self.session.refresh(delegation)

            logger.info(f"Admin {caller_admin_id} revoked delegation {delegation_id}")
            return delegation

        except HTTPException:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error revoking delegation {delegation_id}: {e}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error revoking delegation")

    # ---------- Getters ----------
    async def get_delegation(self, delegation_id: int) -> Optional[AdminDelegation]:
        result = await self.session.execute(
            select(AdminDelegation).where(AdminDelegation.id == delegation_id)
        )
        return result.scalar_one_or_none()

    async def get_my_delegations(self, from_admin_id: Optional[str]) -> List[AdminDelegation]:
        if not from_admin_id:
            return []
        result = await self.session.execute(
            select(AdminDelegation)
            .where(AdminDelegation.from_admin_id == from_admin_id)
            .order_by(AdminDelegation.created_at.desc(), AdminDelegation.id.desc())
        )
        return list(result.scalars().all())

    async def get_delegations_to_me(self, to_admin_id: Optional[str]) -> List[AdminDelegation]:
        if not to_admin_id:
            return []
        result = await self.session.execute(
            select(AdminDelegation)
            .where(AdminDelegation.to_admin_id == to_admin_id)
            .order_by(AdminDelegation.created_at.desc(), AdminDelegation.id.desc())
        )
        return list(result.scalars().all())

    async def get_delegated_admin_ids(self, to_admin_id: Optional[str]) -> List[str]:
        """Admins whose resources ``to_admin_id`` may act on today (window inclusive)."""
        if not to_admin_id:
            return []
        today = utc_today(self.clock)
        result = await self.session.execute(
            select(AdminDelegation.from_admin_id)
            .where(
                admin_matches(AdminDelegation.to_admin_id, to_admin_id),
                AdminDelegation.status == DelegationStatus.ACTIVE,
                AdminDelegation.start_date <= today,
                AdminDelegation.end_date >= today,
            )
            .distinct()
        )
        return sorted(result.scalars().all())
