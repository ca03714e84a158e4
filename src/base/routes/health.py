import logging

import httpx
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.base.config.backend_config import BackendMode

router = APIRouter(tags=["Health"], prefix="")
logger = logging.getLogger(__name__)


@router.get("/health")
async def health(request: Request):
    """
    Health check endpoint.
    Returns 200 OK with the backend mode and, in api mode, backend reachability.
    A failed probe reports "Degraded" rather than an error.
    """
    config = request.app.state.backend_config
    result = {
        "status": "Healthy",
        "message": "Service is up and running.",
        "backend": config.mode.value,
    }

    if config.mode is BackendMode.API:
        try:
            await request.app.state.http_client.get("/")
            result["api"] = "reachable"
        except httpx.HTTPError:
            logger.exception("Backend health check failed")
            result["api"] = "unreachable"
            result["status"] = "Degraded"

    return JSONResponse(status_code=200, content=result)


@router.get("/")
async def home():
    """
    Public landing page; the only non-auth page reachable without a session.
    """
    return JSONResponse(
        status_code=200,
        content={"title": "User Hub", "login": "/login", "dashboard": "/dashboard"},
    )
