import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ForbiddenError
from app.models.shared.enums import GrantReason, ResourceType
from app.schemas.access.access_request_schema import AccessDecisionResponse
from app.services.access.access_request_service import AccessRequestService
from app.services.access.delegation_service import AdminDelegationService
from app.services.access.ownership import OwnedResource, get_owned_resource, same_admin
from app.utils.clock import Clock, as_utc, utc_now
from app.utils.resource_ids import format_resource_id

logger = logging.getLogger(__name__)


class AccessGrantService:
    """Decides whether an acting admin may see/act on one resource.

    Three independent grants, any one suffices:
      1. the admin owns the resource
      2. the owner has an active delegation to the admin covering today
      3. the admin holds an approved access request whose allowed_until is still ahead
    """

    def __init__(self, session: AsyncSession, clock: Clock = utc_now):
        self.session = session
        self.clock = clock
        self.access_requests = AccessRequestService(session, clock)
        self.delegations = AdminDelegationService(session, clock)

    def _decision(
        self,
        allowed: bool,
        reason: GrantReason,
        resource_type: ResourceType,
        resource_id: int,
        owner_admin_id: Optional[str] = None,
        allowed_until=None,
    ) -> AccessDecisionResponse:
        return AccessDecisionResponse(
            allowed=allowed,
            reason=reason,
            resource_type=resource_type.value,
            resource_id=format_resource_id(resource_type, resource_id),
            owner_admin_id=owner_admin_id,
            allowed_until=as_utc(allowed_until) if allowed_until else None,
        )

    async def resolve_for_resource(
        self,
        acting_admin_id: Optional[str],
        resource_type: ResourceType,
        resource: OwnedResource,
    ) -> AccessDecisionResponse:
        owner = resource.owner_admin_id
        if not acting_admin_id:
            return self._decision(False, GrantReason.NONE, resource_type, resource.id, owner)

        if owner and same_admin(owner, acting_admin_id):
            return self._decision(True, GrantReason.OWNER, resource_type, resource.id, owner)

        if owner:
            delegators = await self.delegations.get_delegated_admin_ids(acting_admin_id)
            if any(same_admin(owner, delegator) for delegator in delegators):
                return self._decision(True, GrantReason.DELEGATION, resource_type, resource.id, owner)

        approval = await self.access_requests.find_active_approval(acting_admin_id, resource_type, resource.id)
        if approval is not None:
            return self._decision(
                True, GrantReason.ACCESS_REQUEST, resource_type, resource.id, owner, approval.allowed_until
            )

        return self._decision(False, GrantReason.NONE, resource_type, resource.id, owner)

    async def resolve(
        self,
        acting_admin_id: Optional[str],
        resource_type: ResourceType,
        resource_id: int,
    ) -> AccessDecisionResponse:
        resource = await get_owned_resource(self.session, resource_type, resource_id)
        if resource is None:
            return self._decision(False, GrantReason.NONE, resource_type, resource_id)
        return await self.resolve_for_resource(acting_admin_id, resource_type, resource)

    async def has_access(
        self,
        acting_admin_id: Optional[str],
        resource_type: ResourceType,
        resource_id: int,
    ) -> bool:
        decision = await self.resolve(acting_admin_id, resource_type, resource_id)
        return decision.allowed

    async def ensure_can_edit(
        self,
        acting_admin_id: Optional[str],
        resource_type: ResourceType,
        resource: OwnedResource,
    ) -> None:
        """Raise 403 unless the admin may modify ``resource``.

        A legacy row with no owner is claimed by the first admin that edits it.
        """
        if not acting_admin_id:
            raise ForbiddenError("X-Admin-Id header is required")

        if not resource.owner_admin_id:
            resource.owner_admin_id = acting_admin_id
            await self.session.flush()
            logger.info(
                f"{resource_type.value} {resource.id} had no owner; claimed by {acting_admin_id}"
            )
            return

        decision = await self.resolve_for_resource(acting_admin_id, resource_type, resource)
        if not decision.allowed:
            raise ForbiddenError(
                f"You do not have access to modify this {resource_type.value.lower()}"
            )
