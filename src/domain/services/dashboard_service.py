import logging
from collections import Counter

from src.domain.models.dashboard_schemas import DashboardSummary
from src.domain.repositories.backend import UserHubBackend
from src.domain.services.audit_log_service import AuditLogService
from src.domain.services.notification_service import NotificationService
from src.domain.services.role_service import ALL_USERS_LIMIT
from src.domain.services.user_service import UserService

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_LIMIT = 5


class DashboardService:
    def __init__(
        self,
        user_service: UserService,
        audit_log_service: AuditLogService,
        notification_service: NotificationService,
    ):
        self._users = user_service
        self._audit_logs = audit_log_service
        self._notifications = notification_service

    async def get_summary(self, backend: UserHubBackend) -> DashboardSummary:
        """Aggregate the dashboard cards from the read paths; each degrades on its own."""
        users = await self._users.get_users(backend, page=1, limit=ALL_USERS_LIMIT)
        logs = await self._audit_logs.get_audit_logs(
            backend, page=1, limit=RECENT_ACTIVITY_LIMIT
        )
        notifications = await self._notifications.get_notifications(
            backend, status="unread"
        )

        active = sum(1 for user in users.items if user.status == "Active")
        role_counts = Counter(role for user in users.items for role in user.role_list)

        return DashboardSummary(
            total_users=users.total,
            active_users=active,
            disabled_users=len(users.items) - active,
            users_per_role=dict(sorted(role_counts.items())),
            recent_activity=logs.items,
            unread_notifications=notifications.unread_count,
        )
