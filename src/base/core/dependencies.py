from fastapi import Depends, HTTPException, Request, status

from src.base.auth.token_store import TokenStore, cookie_token_provider
from src.base.client.api_client import ApiClient
from src.base.client.backend_api import UserHubApi
from src.base.models.user import User
from src.domain.repositories.backend import UserHubBackend
from src.domain.services.audit_log_service import AuditLogService
from src.domain.services.auth_service import AuthService
from src.domain.services.dashboard_service import DashboardService
from src.domain.services.notification_service import NotificationService
from src.domain.services.role_service import RoleService
from src.domain.services.settings_service import SettingsService
from src.domain.services.support_service import SupportService
from src.domain.services.user_service import UserService


def get_backend(request: Request) -> UserHubBackend:
    """Backend for this request: the mock when configured, else the REST API
    called with the request's auth cookie as bearer token."""
    mock_backend = getattr(request.app.state, "mock_backend", None)
    if mock_backend is not None:
        return mock_backend
    client = ApiClient(
        request.app.state.http_client,
        token_provider=cookie_token_provider(request),
    )
    return UserHubApi(client)


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_role_service(request: Request) -> RoleService:
    return request.app.state.role_service


def get_audit_log_service(request: Request) -> AuditLogService:
    return request.app.state.audit_log_service


def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notification_service


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_token_store(request: Request) -> TokenStore:
    return request.app.state.token_store


def get_settings_service(request: Request) -> SettingsService:
    return request.app.state.settings_service


def get_support_service(request: Request) -> SupportService:
    return request.app.state.support_service


def get_dashboard_service(request: Request) -> DashboardService:
    return request.app.state.dashboard_service


async def get_current_user(
    backend: UserHubBackend = Depends(get_backend),
    service: UserService = Depends(get_user_service),
) -> User:
    """Dependency returning the signed-in user or raising 401."""
    user = await service.get_current_user(backend)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user
