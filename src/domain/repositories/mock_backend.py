import asyncio
import datetime
import itertools
import logging
import uuid
from typing import Any

from src.base.client.api_client import ApiError
from src.base.client.backend_api import Attachment
from src.base.models.role import KnownRole, split_roles
from src.domain.models.page import total_pages
from src.domain.repositories import mock_data

logger = logging.getLogger(__name__)

# The only password the mock accepts; no user password is ever stored.
MOCK_DEMO_PASSWORD = "password"

_USER_FIELDS = {
    "firstName",
    "lastName",
    "email",
    "jobTitle",
    "roles",
    "accountNonExpired",
    "accountNonLocked",
    "credentialsNonExpired",
    "enabled",
}

_ROLE_KEYWORDS = [
    (("admin", "administrator", "sysadmin"), KnownRole.ADMIN.value),
    (("manager", "lead", "head", "director"), KnownRole.MANAGER.value),
    (("editor", "writer", "content"), KnownRole.EDITOR.value),
    (("support", "helpdesk"), KnownRole.SUPPORT.value),
    (("auditor", "audit", "compliance"), KnownRole.AUDITOR.value),
    (("intern", "contractor", "guest"), KnownRole.GUEST.value),
    (("engineer", "developer"), "ROLE_DEVELOPER"),
]


def _now() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat().replace("+00:00", "Z")


def _not_found(what: str) -> ApiError:
    return ApiError(f"{what} not found", status_code=404)


def _paginate(items: list[dict], params: dict[str, str]) -> tuple[list[dict], int, int, int]:
    try:
        page = max(int(params.get("page", 1)), 1)
        limit = max(int(params.get("limit", 10)), 1)
    except ValueError:
        raise ApiError("page and limit must be integers", status_code=400) from None
    start = (page - 1) * limit
    return items[start : start + limit], len(items), page, total_pages(len(items), limit)


class MockUserHubBackend:
    """
    In-memory stand-in for the User Hub REST backend.

    Mirrors the backend's JSON shapes and error statuses and adds an
    artificial delay to every call. State lives on the instance.
    """

    def __init__(
        self,
        users: list[dict] | None = None,
        audit_logs: list[dict] | None = None,
        notifications: list[dict] | None = None,
        delay_seconds: float = 0.0,
    ):
        self.users = users if users is not None else mock_data.seed_users()
        self.audit_logs = audit_logs if audit_logs is not None else mock_data.seed_audit_logs()
        self.notifications = (
            notifications if notifications is not None else mock_data.seed_notifications()
        )
        self.preferences: dict[str, Any] = {}
        self.language = "en"
        self.support_requests: list[dict] = []
        self.feedback: list[dict] = []
        self._delay = delay_seconds
        self._ids = itertools.count(
            max((int(u["id"]) for u in self.users if str(u["id"]).isdigit()), default=0) + 1
        )
        self._current_user_id: str | None = self.users[0]["id"] if self.users else None
        logger.info(
            "Mock backend ready with %d users, %d audit logs, %d notifications",
            len(self.users),
            len(self.audit_logs),
            len(self.notifications),
        )

    async def _latency(self) -> None:
        if self._delay > 0:
            await asyncio.sleep(self._delay)

    def _lookup_user(self, user_id: str | None) -> dict | None:
        return next((u for u in self.users if str(u["id"]) == str(user_id)), None)

    def _find_user(self, user_id: str) -> dict:
        user = self._lookup_user(user_id)
        if user is None:
            raise _not_found("User")
        return user

    def _find_user_by_email(self, email: str) -> dict | None:
        email = email.lower()
        return next((u for u in self.users if u["email"].lower() == email), None)

    def _audit(self, action: str, details: str, entity: str) -> None:
        current = self._lookup_user(self._current_user_id)
        actor = current["email"] if current else "system"
        self.audit_logs.insert(
            0,
            {
                "id": uuid.uuid4().hex,
                "timestamp": _now(),
                "user": actor,
                "action": action,
                "details": details,
                "entity": entity,
            },
        )

    # --- Auth ---
    async def login(self, data: dict[str, Any]) -> Any:
        await self._latency()
        user = self._find_user_by_email(data.get("email", ""))
        if user is None or data.get("password") != MOCK_DEMO_PASSWORD:
            self._audit("LOGIN_FAILED", f"Failed login for {data.get('email')}", "Auth")
            raise ApiError("Invalid email or password.", status_code=401)
        if not user["enabled"] or not user["accountNonLocked"]:
            self._audit("LOGIN_FAILED", f"Disabled account {user['email']}", "Auth")
            raise ApiError("Account is disabled or locked.", status_code=403)

        self._current_user_id = user["id"]
        user["lastLoginDate"] = _now()
        self._audit("LOGIN_SUCCESS", "User logged in", "Auth")
        return {"token": f"mock-{uuid.uuid4().hex}", "user": dict(user)}

    async def register(self, data: dict[str, Any]) -> Any:
        await self._latency()
        created = await self._insert_user({**data, "roles": KnownRole.USER.value})
        return {"success": True, "message": "Registration successful.", "user": created}

    async def forgot_password(self, data: dict[str, Any]) -> Any:
        await self._latency()
        return {
            "success": True,
            "message": "If an account exists for that email, a reset link has been sent.",
        }

    async def reset_password(self, data: dict[str, Any]) -> Any:
        await self._latency()
        if not data.get("token"):
            raise ApiError("Reset token is invalid or has expired.", status_code=400)
        return {"success": True, "message": "Your password has been reset."}

    async def get_current_user(self) -> Any:
        await self._latency()
        if self._current_user_id is None:
            raise ApiError("Not authenticated", status_code=401)
        return {"user": dict(self._find_user(self._current_user_id))}

    async def change_password(self, data: dict[str, Any]) -> Any:
        await self._latency()
        if data.get("currentPassword") != MOCK_DEMO_PASSWORD:
            raise ApiError("Current password is incorrect.", status_code=400)
        self._audit("PASSWORD_CHANGED", "Password changed", "User")
        return {"success": True, "message": "Password changed successfully."}

    # --- Users ---
    async def get_users(self, params: dict[str, str]) -> Any:
        await self._latency()
        users = self.users
        search = (params.get("search") or "").strip().lower()
        if search:
            users = [
                u
                for u in users
                if any(
                    search in (u.get(field) or "").lower()
                    for field in ("firstName", "lastName", "email", "jobTitle")
                )
            ]
        role = (params.get("role") or "").strip()
        if role:
            users = [u for u in users if role in split_roles(u.get("roles", ""))]

        page_items, total, page, pages = _paginate(users, params)
        return {
            "users": [dict(u) for u in page_items],
            "total": total,
            "currentPage": page,
            "totalPages": pages,
        }

    async def get_user_by_id(self, user_id: str) -> Any:
        await self._latency()
        return {"user": dict(self._find_user(user_id))}

    async def _insert_user(self, data: dict[str, Any]) -> dict:
        email = data.get("email", "")
        if self._find_user_by_email(email) is not None:
            raise ApiError("A user with this email already exists.", status_code=409)

        now = _now()
        user = {
            "accountNonExpired": True,
            "accountNonLocked": True,
            "credentialsNonExpired": True,
            "enabled": True,
            **{k: v for k, v in data.items() if k in _USER_FIELDS},
            "id": str(next(self._ids)),
            "createdDate": now,
            "updatedDate": now,
            "lastLoginDate": None,
        }
        self.users.append(user)
        self._audit("USER_CREATED", f"Created user {email}", "User")
        return dict(user)

    async def create_user(self, data: dict[str, Any]) -> Any:
        await self._latency()
        return {"user": await self._insert_user(data)}

    async def update_user(self, user_id: str, data: dict[str, Any]) -> Any:
        await self._latency()
        user = self._find_user(user_id)
        new_email = data.get("email")
        if new_email:
            other = self._find_user_by_email(new_email)
            if other is not None and other is not user:
                raise ApiError("A user with this email already exists.", status_code=409)

        user.update({k: v for k, v in data.items() if k in _USER_FIELDS})
        user["updatedDate"] = _now()
        self._audit("USER_UPDATED", f"Updated user {user['email']}", "User")
        return {"user": dict(user)}

    async def delete_user(self, user_id: str) -> Any:
        await self._latency()
        user = self._find_user(user_id)
        self.users.remove(user)
        self._audit("USER_DELETED", f"Deleted user {user['email']}", "User")
        return None

    async def get_unique_roles(self) -> Any:
        await self._latency()
        roles = {r for u in self.users for r in split_roles(u.get("roles", ""))}
        return {"roles": sorted(roles)}

    # --- AI services ---
    async def suggest_roles(self, job_title: str) -> Any:
        await self._latency()
        title = job_title.lower()
        suggested = [KnownRole.USER.value]
        for keywords, role in _ROLE_KEYWORDS:
            if any(word in title for word in keywords) and role not in suggested:
                suggested.append(role)
        return {"suggestedRoles": suggested}

    # --- Audit logs ---
    async def get_audit_logs(self, params: dict[str, str]) -> Any:
        await self._latency()
        ordered = sorted(self.audit_logs, key=lambda log: log["timestamp"], reverse=True)
        page_items, total, page, pages = _paginate(ordered, params)
        return {
            "logs": [dict(log) for log in page_items],
            "total": total,
            "currentPage": page,
            "totalPages": pages,
        }

    # --- Notifications ---
    def _unread_count(self) -> int:
        return sum(1 for n in self.notifications if not n["read"])

    async def get_notifications(self, params: dict[str, str] | None = None) -> Any:
        await self._latency()
        params = params or {}
        notifications = self.notifications
        if params.get("status") == "unread":
            notifications = [n for n in notifications if not n["read"]]

        total = len(notifications)
        if "page" in params or "limit" in params:
            notifications, total, _, _ = _paginate(notifications, params)
        return {
            "notifications": [dict(n) for n in notifications],
            "total": total,
            "unreadCount": self._unread_count(),
        }

    async def mark_notification_read(self, notification_id: str) -> Any:
        await self._latency()
        for notification in self.notifications:
            if str(notification["id"]) == str(notification_id):
                notification["read"] = True
                return {"notification": dict(notification)}
        raise _not_found("Notification")

    async def mark_all_notifications_read(self) -> Any:
        await self._latency()
        for notification in self.notifications:
            notification["read"] = True
        return {
            "success": True,
            "message": "All notifications marked as read.",
            "unreadCountAfter": 0,
        }

    async def clear_notifications(self) -> Any:
        await self._latency()
        self.notifications.clear()
        return {"success": True, "message": "All notifications cleared."}

    # --- Settings ---
    async def update_notification_preferences(self, data: dict[str, Any]) -> Any:
        await self._latency()
        self.preferences.update(data)
        return {
            "success": True,
            "message": "Your notification settings have been updated.",
            "preferences": dict(self.preferences),
        }

    async def update_language_preference(self, data: dict[str, Any]) -> Any:
        await self._latency()
        self.language = data.get("language", self.language)
        return {
            "success": True,
            "message": "Language preference saved.",
            "language": self.language,
        }

    # --- Support & feedback ---
    async def submit_contact_support(
        self, fields: dict[str, str], attachment: Attachment | None = None
    ) -> Any:
        await self._latency()
        ticket_id = f"SUP-{len(self.support_requests) + 1:05d}"
        self.support_requests.append(
            {
                **fields,
                "ticketId": ticket_id,
                "attachment": attachment[0] if attachment else None,
            }
        )
        return {
            "success": True,
            "message": "Thank you for contacting us. Our support team will get back to you soon.",
            "ticketId": ticket_id,
        }

    async def submit_feedback(self, data: dict[str, Any]) -> Any:
        await self._latency()
        self.feedback.append(dict(data))
        return {"success": True, "message": "Thank you for your feedback!"}
