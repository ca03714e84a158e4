import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from src.base.auth.token_store import TokenStore, build_token_store
from src.base.config.backend_config import BackendConfig, BackendMode
from src.base.config.redis import close_redis, init_redis
from src.domain.repositories.mock_backend import MockUserHubBackend
from src.domain.services.audit_log_service import AuditLogService
from src.domain.services.auth_service import AuthService
from src.domain.services.dashboard_service import DashboardService
from src.domain.services.notification_service import NotificationService
from src.domain.services.role_service import RoleService
from src.domain.services.settings_service import SettingsService
from src.domain.services.support_service import SupportService
from src.domain.services.user_service import UserService

logger = logging.getLogger(__name__)


def init_services(app: FastAPI, token_store: TokenStore | None = None) -> None:
    """Attach the stateless domain services and the token store to app state."""
    user_service = UserService()
    audit_log_service = AuditLogService()
    notification_service = NotificationService()

    app.state.token_store = token_store or build_token_store()
    app.state.user_service = user_service
    app.state.role_service = RoleService(user_service)
    app.state.audit_log_service = audit_log_service
    app.state.notification_service = notification_service
    app.state.auth_service = AuthService()
    app.state.settings_service = SettingsService()
    app.state.support_service = SupportService()
    app.state.dashboard_service = DashboardService(
        user_service, audit_log_service, notification_service
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Centralized initialization and teardown for app services."""
    logger.info("Starting application lifespan...")

    config = BackendConfig()
    app.state.backend_config = config

    logger.info(f"Backend mode: {config.mode.value}")
    app.state.http_client = httpx.AsyncClient(base_url=config.api_base_url)
    if config.mode is BackendMode.MOCK:
        app.state.mock_backend = MockUserHubBackend(
            delay_seconds=config.mock_delay_seconds
        )

    redis_client = await init_redis()
    app.state.redis = redis_client

    logger.info("Initializing services...")
    init_services(app, build_token_store(redis_client))
    logger.info("Services initialized.")

    try:
        yield  # --- Application runs here ---
    finally:
        await app.state.http_client.aclose()
        logger.info("Backend HTTP client closed.")
        await close_redis(redis_client)
