import logging

from src.domain.models.audit_log import AuditLog
from src.domain.models.page import Page
from src.domain.repositories.backend import READ_ERRORS, UserHubBackend

logger = logging.getLogger(__name__)


class AuditLogService:
    async def get_audit_logs(
        self, backend: UserHubBackend, page: int = 1, limit: int = 10
    ) -> Page[AuditLog]:
        """Page through audit logs; a backend outage yields an empty page."""
        params = {"page": str(page), "limit": str(limit)}
        try:
            response = await backend.get_audit_logs(params)
            return Page[AuditLog](
                items=[AuditLog.model_validate(log) for log in response["logs"]],
                total=response["total"],
                current_page=response["currentPage"],
                total_pages=response["totalPages"],
            )
        except READ_ERRORS as e:
            logger.error(f"Failed to fetch audit logs: {e}")
            return Page[AuditLog].empty()
