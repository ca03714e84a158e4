import logging
from typing import Literal

from src.domain.models.notification import (
    BulkNotificationResult,
    NotificationList,
    NotificationMessage,
)
from src.domain.repositories.backend import READ_ERRORS, UserHubBackend

logger = logging.getLogger(__name__)

NotificationFilter = Literal["unread", "all"]


def _bulk_result(response) -> BulkNotificationResult:
    return BulkNotificationResult.model_validate(response or {"success": True, "message": ""})


class NotificationService:
    """
    Notification reads and mutations.

    Every method degrades instead of raising: a listing falls back to an
    empty list and a failed mutation returns None, so the notifications
    page keeps rendering while the backend is down.
    """

    async def get_notifications(
        self,
        backend: UserHubBackend,
        status: NotificationFilter | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> NotificationList:
        params: dict[str, str] = {}
        if status:
            params["status"] = status
        if page:
            params["page"] = str(page)
        if limit:
            params["limit"] = str(limit)

        try:
            response = await backend.get_notifications(params)
            return NotificationList(
                notifications=[
                    NotificationMessage.model_validate(n)
                    for n in response["notifications"]
                ],
                total=response["total"],
                unread_count=response["unreadCount"],
            )
        except READ_ERRORS as e:
            logger.error(f"Failed to fetch notifications: {e}")
            return NotificationList.empty()

    async def mark_as_read(
        self, backend: UserHubBackend, notification_id: str
    ) -> NotificationMessage | None:
        try:
            response = await backend.mark_notification_read(notification_id)
            data = (response or {}).get("notification")
            return NotificationMessage.model_validate(data) if data else None
        except READ_ERRORS as e:
            logger.error(f"Failed to mark notification {notification_id} as read: {e}")
            return None

    async def mark_all_as_read(
        self, backend: UserHubBackend
    ) -> BulkNotificationResult | None:
        try:
            return _bulk_result(await backend.mark_all_notifications_read())
        except READ_ERRORS as e:
            logger.error(f"Failed to mark all notifications as read: {e}")
            return None

    async def clear_all(self, backend: UserHubBackend) -> BulkNotificationResult | None:
        try:
            return _bulk_result(await backend.clear_notifications())
        except READ_ERRORS as e:
            logger.error(f"Failed to clear all notifications: {e}")
            return None
