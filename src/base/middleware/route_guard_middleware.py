import logging

from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.base.auth.token_store import read_auth_cookie

logger = logging.getLogger(__name__)

# Pages only an unauthenticated visitor should see (prefix match)
AUTH_ROUTES = ["/login", "/register", "/forgot-password", "/reset-password"]
PUBLIC_ROOT = "/"
DASHBOARD_PATH = "/dashboard"
LOGIN_PATH = "/login"

# Paths the guard never classifies
EXCLUDED_PREFIXES = [
    "/api",
    "/static",
    "/assets",
    "/images",
    "/health",
    "/docs",
    "/redoc",
    "/openapi.json",
    "/favicon.ico",
]


def is_auth_route(path: str) -> bool:
    return any(path.startswith(route) for route in AUTH_ROUTES)


def is_excluded(path: str) -> bool:
    return any(path.startswith(prefix) for prefix in EXCLUDED_PREFIXES)


def redirect_target(path: str, authenticated: bool) -> str | None:
    """
    Classify a request by cookie presence alone.

    Returns the path to redirect to, or None to let the request through.
    """
    if authenticated:
        return DASHBOARD_PATH if is_auth_route(path) else None
    if is_auth_route(path) or path == PUBLIC_ROOT:
        return None
    return LOGIN_PATH


class RouteGuardMiddleware(BaseHTTPMiddleware):
    """
    Redirect between the authenticated and unauthenticated page sets.

    Only checks that the auth cookie is present; the backend verifies the
    token on every API call.
    """

    async def dispatch(self, request: Request, call_next):
        path = request.url.path

        if is_excluded(path):
            return await call_next(request)

        authenticated = read_auth_cookie(request) is not None
        target = redirect_target(path, authenticated)

        if target is None:
            return await call_next(request)

        logger.info(
            f"Redirecting {'authenticated' if authenticated else 'unauthenticated'} "
            f"request for {path} to {target}"
        )
        return RedirectResponse(url=str(request.url.replace(path=target, query="")))
