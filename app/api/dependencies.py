from typing import Optional
from fastapi import Depends, Request
from app.core.config import settings
from app.core.exceptions import InvalidArgumentError
import logging

logger = logging.getLogger(__name__)


class CurrentAdminProvider:
    """Who is calling. The only place request identity is read from."""

    def admin_id(self) -> Optional[str]:
        raise NotImplementedError


class HeaderCurrentAdminProvider(CurrentAdminProvider):
    """Trusts the X-Admin-Id header as-is; there is no token verification.

    Swap it for a verified provider by overriding ``get_current_admin_provider``.
    """

    def __init__(self, request: Request):
        self.request = request

    def admin_id(self) -> Optional[str]:
        value = self.request.headers.get(settings.ADMIN_ID_HEADER)
        if value and value.strip():
            return value.strip()
        return None


async def get_current_admin_provider(request: Request) -> CurrentAdminProvider:
    return HeaderCurrentAdminProvider(request)


async def get_current_admin_id(
    provider: CurrentAdminProvider = Depends(get_current_admin_provider),
) -> Optional[str]:
    """Caller admin id, or None. Read-only endpoints answer empty lists without it."""
    return provider.admin_id()


async def require_admin_id(
    admin_id: Optional[str] = Depends(get_current_admin_id),
) -> str:
    """Mutating endpoints need an admin id; its absence is a 400."""
    if not admin_id:
        raise InvalidArgumentError(f"{settings.ADMIN_ID_HEADER} header is required")
    return admin_id
