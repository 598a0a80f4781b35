import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from app.core.config import settings
from app.core.request_context import HDR_REQUEST_ID, get_request_id

logger = logging.getLogger("access")

class LoggingMiddleware(BaseHTTPMiddleware):
    """One access line per request, tagged with the acting admin and request id"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        request_id = get_request_id(request)
        admin_id = request.headers.get(settings.ADMIN_ID_HEADER) or "-"

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            f"{request.method} {request.url.path} {response.status_code} "
            f"admin={admin_id} request_id={request_id} time={process_time:.4f}s",
        )

        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        response.headers[HDR_REQUEST_ID] = request_id
        return response
