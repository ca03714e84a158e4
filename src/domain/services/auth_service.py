import logging

from src.base.auth.token_store import TokenStore
from src.base.client.api_client import ApiError
from src.base.models.user import parse_user
from src.domain.models.auth_schemas import (
    ForgotPasswordForm,
    LoginForm,
    LoginResult,
    MessageResponse,
    RegisterForm,
    ResetPasswordForm,
)
from src.domain.repositories.backend import UserHubBackend

logger = logging.getLogger(__name__)


def _message(response, default: str) -> MessageResponse:
    response = response or {}
    return MessageResponse(
        success=response.get("success", True),
        message=response.get("message") or default,
    )


class AuthService:
    """Authentication flows. All of them propagate ApiError to the calling form."""

    async def login(
        self,
        backend: UserHubBackend,
        form: LoginForm,
        token_store: TokenStore | None = None,
    ) -> LoginResult:
        response = await backend.login(form.to_backend())
        token = (response or {}).get("token")
        if not token:
            raise ApiError("Login response did not include a token")

        if token_store is not None:
            await token_store.set(token)

        logger.info("Login succeeded")
        return LoginResult(token=token, user=parse_user(response.get("user")))

    async def logout(self, token_store: TokenStore) -> None:
        await token_store.clear()
        logger.info("Logged out")

    async def register(self, backend: UserHubBackend, form: RegisterForm) -> MessageResponse:
        response = await backend.register(form.to_backend())
        return _message(response, "Registration successful.")

    async def forgot_password(
        self, backend: UserHubBackend, form: ForgotPasswordForm
    ) -> MessageResponse:
        response = await backend.forgot_password(form.to_backend())
        return _message(
            response, "If an account exists for that email, a reset link has been sent."
        )

    async def reset_password(
        self, backend: UserHubBackend, form: ResetPasswordForm
    ) -> MessageResponse:
        response = await backend.reset_password(form.to_backend())
        return _message(response, "Your password has been reset.")
