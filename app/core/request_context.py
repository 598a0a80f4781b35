import uuid
from typing import Optional, Dict
from fastapi import Request
from app.core.config import settings

HDR_REQUEST_ID = "X-Request-Id"

def get_request_id(request: Request) -> str:
    """Correlation id for the request: the caller's X-Request-Id or a fresh uuid4."""
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        return request_id
    request_id = request.headers.get(HDR_REQUEST_ID) or uuid.uuid4().hex
    request.state.request_id = request_id
    return request_id

def get_request_context(request: Request) -> Dict[str, Optional[str]]:
    """Who called what, for log lines that outlive the request."""
    return {
        "endpoint": f"{request.method} {request.url.path}",
        "ip_address": request.client.host if request.client else None,
        "admin_id": request.headers.get(settings.ADMIN_ID_HEADER),
        "request_id": get_request_id(request),
    }
