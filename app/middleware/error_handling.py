import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from app.core.config import settings
from app.core.request_context import get_request_context

logger = logging.getLogger(__name__)

class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    """Turns any exception that escaped the routes into a generic 500.

    HTTPException subclasses never reach this point; FastAPI answers them
    inside the router. Everything else is logged once with the correlation id.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            context = get_request_context(request)
            logger.exception(
                f"Unhandled exception on {context['endpoint']} from {context['ip_address']} "
                f"admin={context['admin_id']} request_id={context['request_id']}: {e}"
            )

            payload = {
                "message": "Internal server error",
                "traceId": context["request_id"],
            }
            if settings.DEBUG:
                payload["error"] = repr(e)

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=payload,
            )
