"""
REST endpoints of the User Hub backend.

One coroutine per backend endpoint; each returns the decoded JSON body
unchanged. Reshaping and error policy live in the domain services.
"""

from typing import Any
from urllib.parse import quote

from src.base.client.api_client import ApiClient

# (filename, content, content_type)
Attachment = tuple[str, bytes, str]


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class UserHubApi:
    def __init__(self, client: ApiClient):
        self._client = client

    # --- Auth ---
    async def login(self, data: dict[str, Any]) -> Any:
        return await self._client.request("/auth/login", "POST", data)

    async def register(self, data: dict[str, Any]) -> Any:
        return await self._client.request("/auth/register", "POST", data)

    async def forgot_password(self, data: dict[str, Any]) -> Any:
        return await self._client.request("/auth/forgot-password", "POST", data)

    async def reset_password(self, data: dict[str, Any]) -> Any:
        return await self._client.request("/auth/reset-password", "POST", data)

    async def get_current_user(self) -> Any:
        return await self._client.request("/auth/me", "GET")

    async def change_password(self, data: dict[str, Any]) -> Any:
        return await self._client.request("/auth/change-password", "POST", data)

    # --- Users ---
    async def get_users(self, params: dict[str, str]) -> Any:
        return await self._client.request("/users", "GET", params=params)

    async def get_user_by_id(self, user_id: str) -> Any:
        return await self._client.request(f"/users/{_segment(user_id)}", "GET")

    async def create_user(self, data: dict[str, Any]) -> Any:
        return await self._client.request("/users", "POST", data)

    async def update_user(self, user_id: str, data: dict[str, Any]) -> Any:
        return await self._client.request(f"/users/{_segment(user_id)}", "PUT", data)

    async def delete_user(self, user_id: str) -> Any:
        return await self._client.request(f"/users/{_segment(user_id)}", "DELETE")

    async def get_unique_roles(self) -> Any:
        return await self._client.request("/roles/unique", "GET")

    # --- AI services ---
    async def suggest_roles(self, job_title: str) -> Any:
        return await self._client.request(
            "/ai/suggest-roles", "POST", {"jobTitle": job_title}
        )

    # --- Audit logs ---
    async def get_audit_logs(self, params: dict[str, str]) -> Any:
        return await self._client.request("/audit-logs", "GET", params=params)

    # --- Notifications ---
    async def get_notifications(self, params: dict[str, str] | None = None) -> Any:
        return await self._client.request("/notifications", "GET", params=params)

    async def mark_notification_read(self, notification_id: str) -> Any:
        return await self._client.request(
            f"/notifications/{_segment(notification_id)}/read", "PATCH"
        )

    async def mark_all_notifications_read(self) -> Any:
        return await self._client.request("/notifications/mark-all-read", "POST")

    async def clear_notifications(self) -> Any:
        return await self._client.request("/notifications", "DELETE")

    # --- Settings ---
    async def update_notification_preferences(self, data: dict[str, Any]) -> Any:
        return await self._client.request("/settings/notifications", "PUT", data)

    async def update_language_preference(self, data: dict[str, Any]) -> Any:
        return await self._client.request("/settings/language", "PUT", data)

    # --- Support & feedback ---
    async def submit_contact_support(
        self, fields: dict[str, str], attachment: Attachment | None = None
    ) -> Any:
        files = {"attachment": attachment} if attachment else {}
        return await self._client.request(
            "/support/contact", "POST", fields, files=files
        )

    async def submit_feedback(self, data: dict[str, Any]) -> Any:
        return await self._client.request("/feedback", "POST", data)
