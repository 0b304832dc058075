# bizcards/middleware/error_logger.py
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from bizcards.core.logging_config import REQUEST_LOGGER

logger = logging.getLogger(REQUEST_LOGGER)

STATUS_LABELS = {
    400: "BAD REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT FOUND",
    500: "SERVER ERROR",
}


def describe_status(status_code: int) -> str:
    return STATUS_LABELS.get(status_code, "ERROR")


class ErrorLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every request that completes with an error status."""

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            logger.error(f"{describe_status(500)}: {request.method} {request.url.path} - Status: 500")
            raise
        if response.status_code >= 400:
            body = b"".join([chunk async for chunk in response.body_iterator])
            level = logging.ERROR if response.status_code >= 500 else logging.WARNING
            logger.log(
                level,
                f"{describe_status(response.status_code)}: {request.method} "
                f"{request.url.path} - Status: {response.status_code} - "
                f"{body.decode('utf-8', errors='replace')}",
            )
            # the original body stream is consumed above
            return Response(
                content=body,
                status_code=response.status_code,
                headers=dict(response.headers),
                media_type=response.media_type,
            )
        return response
