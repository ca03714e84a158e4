import logging

from pydantic import ValidationError

from src.base.client.api_client import ApiError
from src.base.models.user import User, parse_user
from src.domain.models.page import Page
from src.domain.models.user_schemas import (
    ChangePasswordForm,
    ChangePasswordResult,
    ProfileForm,
    UserForm,
    UserUpdateForm,
)
from src.domain.repositories.backend import READ_ERRORS, UserHubBackend

logger = logging.getLogger(__name__)


def build_user_query(
    page: int = 1,
    limit: int = 10,
    search: str | None = None,
    role: str | None = None,
) -> dict[str, str]:
    """Translate list filters into backend query parameters."""
    params = {"page": str(page), "limit": str(limit)}
    if search:
        params["search"] = search
    if role:
        params["role"] = role
    return params


def _require_user(response, action: str) -> User:
    user = parse_user((response or {}).get("user"))
    if user is None:
        raise ApiError(f"Backend returned no user after {action}")
    return user


class UserService:
    async def get_users(
        self,
        backend: UserHubBackend,
        page: int = 1,
        limit: int = 10,
        search: str | None = None,
        role: str | None = None,
    ) -> Page[User]:
        """List users; a failed call degrades to an empty page."""
        try:
            response = await backend.get_users(build_user_query(page, limit, search, role))
            return Page[User](
                items=[User.model_validate(u) for u in response["users"]],
                total=response["total"],
                current_page=response["currentPage"],
                total_pages=response["totalPages"],
            )
        except READ_ERRORS as e:
            logger.error(f"Failed to list users: {e}")
            return Page[User].empty()

    async def get_user_by_id(self, backend: UserHubBackend, user_id: str) -> User | None:
        try:
            response = await backend.get_user_by_id(user_id)
            return parse_user((response or {}).get("user"))
        except READ_ERRORS as e:
            logger.error(f"Failed to get user {user_id}: {e}")
            return None

    async def get_current_user(self, backend: UserHubBackend) -> User | None:
        try:
            response = await backend.get_current_user()
            return parse_user((response or {}).get("user"))
        except ApiError as e:
            # Expected when the token is missing or no longer accepted.
            logger.debug(f"Current user unavailable: {e}")
            return None
        except (AttributeError, ValidationError) as e:
            logger.error(f"Malformed current user response: {e}")
            return None

    async def create_user(self, backend: UserHubBackend, form: UserForm) -> User:
        response = await backend.create_user(form.to_backend())
        user = _require_user(response, "create")
        logger.info(f"Created user {user.id}")
        return user

    async def update_user(
        self,
        backend: UserHubBackend,
        user_id: str,
        form: UserUpdateForm | ProfileForm,
    ) -> User:
        response = await backend.update_user(user_id, form.to_backend())
        user = _require_user(response, "update")
        logger.info(f"Updated user {user_id}")
        return user

    async def delete_user(self, backend: UserHubBackend, user_id: str) -> None:
        await backend.delete_user(user_id)
        logger.info(f"Deleted user {user_id}")

    async def change_password(
        self, backend: UserHubBackend, form: ChangePasswordForm
    ) -> ChangePasswordResult:
        """Change the authenticated user's own password; the backend infers the user from the token."""
        response = await backend.change_password(form.to_backend())
        return ChangePasswordResult(
            success=(response or {}).get("success", True),
            message=(response or {}).get("message", "Password changed successfully."),
        )

    async def get_unique_roles(self, backend: UserHubBackend) -> list[str]:
        try:
            response = await backend.get_unique_roles()
            return sorted(
                r for r in (response or {}).get("roles") or [] if isinstance(r, str)
            )
        except READ_ERRORS as e:
            logger.error(f"Failed to get unique roles: {e}")
            return []
