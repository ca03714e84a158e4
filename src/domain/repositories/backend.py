"""
Backend capability the domain services depend on.

Both the REST client (UserHubApi) and the in-memory MockUserHubBackend
satisfy this protocol, so services run unchanged against either. Every
method returns the backend's JSON shape (camelCase dicts) and raises
ApiError on failure.
"""

from typing import Any, Protocol

from pydantic import ValidationError

from src.base.client.api_client import ApiError
from src.base.client.backend_api import Attachment

# What a read path degrades on: a failed call or a 2xx body of the wrong shape
READ_ERRORS = (ApiError, AttributeError, KeyError, TypeError, ValidationError)


class UserHubBackend(Protocol):
    async def login(self, data: dict[str, Any]) -> Any: ...

    async def register(self, data: dict[str, Any]) -> Any: ...

    async def forgot_password(self, data: dict[str, Any]) -> Any: ...

    async def reset_password(self, data: dict[str, Any]) -> Any: ...

    async def get_current_user(self) -> Any: ...

    async def change_password(self, data: dict[str, Any]) -> Any: ...

    async def get_users(self, params: dict[str, str]) -> Any: ...

    async def get_user_by_id(self, user_id: str) -> Any: ...

    async def create_user(self, data: dict[str, Any]) -> Any: ...

    async def update_user(self, user_id: str, data: dict[str, Any]) -> Any: ...

    async def delete_user(self, user_id: str) -> Any: ...

    async def get_unique_roles(self) -> Any: ...

    async def suggest_roles(self, job_title: str) -> Any: ...

    async def get_audit_logs(self, params: dict[str, str]) -> Any: ...

    async def get_notifications(self, params: dict[str, str] | None = None) -> Any: ...

    async def mark_notification_read(self, notification_id: str) -> Any: ...

    async def mark_all_notifications_read(self) -> Any: ...

    async def clear_notifications(self) -> Any: ...

    async def update_notification_preferences(self, data: dict[str, Any]) -> Any: ...

    async def update_language_preference(self, data: dict[str, Any]) -> Any: ...

    async def submit_contact_support(
        self, fields: dict[str, str], attachment: Attachment | None = None
    ) -> Any: ...

    async def submit_feedback(self, data: dict[str, Any]) -> Any: ...
