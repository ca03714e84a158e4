import logging
import uuid
from contextvars import ContextVar

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

CORRELATION_HEADER = "x-correlation-id"

# Read by the API client so backend calls carry the console request's ID.
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

logger = logging.getLogger(__name__)


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Assign a correlation ID to each console request and echo it back."""

    async def dispatch(self, request: Request, call_next):
        correlation_id_value = request.headers.get(
            CORRELATION_HEADER, str(uuid.uuid4())
        )
        token = correlation_id.set(correlation_id_value)

        logger.debug(f"Correlation ID assigned for {request.method} {request.url.path}")

        try:
            response: Response = await call_next(request)
        finally:
            correlation_id.reset(token)

        response.headers[CORRELATION_HEADER] = correlation_id_value
        return response


class CorrelationFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id.get("")
        return True
