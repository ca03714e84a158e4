import logging
import traceback

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.base.client.api_client import ApiError
from src.base.utils.env_utils import is_local_development

logger = logging.getLogger(__name__)


class GlobalExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """
    Last-resort handler that renders unhandled exceptions as ProblemDetails.

    An ApiError reaching this point came from a backend call no route
    expected to fail, so it is reported as a bad gateway; anything else
    is a console bug and becomes a 500.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except ApiError as ex:
            logger.error(
                f"Unhandled backend error on {request.method} {request.url.path}: "
                f"{ex.message} (status {ex.status_code})"
            )
            return self._problem(request, ex, status.HTTP_502_BAD_GATEWAY, "Backend Error")
        except Exception as ex:
            logger.error(
                "Unhandled exception occurred",
                exc_info=ex,
                extra={"path": str(request.url)},
            )
            return self._problem(
                request, ex, status.HTTP_500_INTERNAL_SERVER_ERROR, ex.__class__.__name__
            )

    @staticmethod
    def _problem(request: Request, ex: Exception, status_code: int, title: str):
        content = {
            "type": "about:blank",
            "title": title,
            "status": status_code,
            "detail": str(ex),
            "instance": request.url.path,
        }
        # Stack traces stay out of responses outside local development
        if is_local_development():
            content["trace"] = traceback.format_exc()
        return JSONResponse(content=content, status_code=status_code)
