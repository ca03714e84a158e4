import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from src.base.config.logging_config import LoggingConfig
from src.base.core.lifespan import lifespan
from src.base.middleware.correlation_middleware import CorrelationMiddleware
from src.base.middleware.global_exception_handler_middleware import (
    GlobalExceptionHandlerMiddleware,
)
from src.base.middleware.route_guard_middleware import RouteGuardMiddleware
from src.base.routes.health import router as health_router
from src.domain.routes.audit_log_routes import router as audit_log_router
from src.domain.routes.auth_routes import router as auth_router
from src.domain.routes.dashboard_routes import router as dashboard_router
from src.domain.routes.help_routes import router as help_router
from src.domain.routes.notification_routes import router as notification_router
from src.domain.routes.profile_routes import router as profile_router
from src.domain.routes.role_routes import router as role_router
from src.domain.routes.settings_routes import router as settings_router
from src.domain.routes.support_routes import router as support_router
from src.domain.routes.user_routes import router as user_router

# Load environment variables
load_dotenv()

# --- Logging configuration ---
LoggingConfig.setup_logging()
logger = logging.getLogger(__name__)

logger.info("Starting User Hub console")


def create_app() -> FastAPI:
    app = FastAPI(title="User Hub", version="1.0.0", lifespan=lifespan)

    # --- Middleware (last added runs first) ---
    app.add_middleware(RouteGuardMiddleware)
    app.add_middleware(GlobalExceptionHandlerMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # --- Routes ---
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(user_router)
    app.include_router(role_router)
    app.include_router(audit_log_router)
    app.include_router(notification_router)
    app.include_router(settings_router)
    app.include_router(profile_router)
    app.include_router(support_router)
    app.include_router(help_router)
    return app


app = create_app()
