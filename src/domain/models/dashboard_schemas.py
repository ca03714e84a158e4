from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from src.domain.models.audit_log import AuditLog


class DashboardSummary(BaseModel):
    total_users: int
    active_users: int
    disabled_users: int
    users_per_role: dict[str, int]
    recent_activity: list[AuditLog]
    unread_notifications: int

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
