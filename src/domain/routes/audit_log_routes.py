from fastapi import APIRouter, Depends, Query

from src.base.core.dependencies import get_audit_log_service, get_backend
from src.domain.models.audit_log import AuditLog
from src.domain.models.page import Page
from src.domain.repositories.backend import UserHubBackend
from src.domain.services.audit_log_service import AuditLogService

router = APIRouter(prefix="/audit-logs", tags=["Audit Logs"])


@router.get("", response_model=Page[AuditLog])
async def list_audit_logs(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    backend: UserHubBackend = Depends(get_backend),
    service: AuditLogService = Depends(get_audit_log_service),
):
    return await service.get_audit_logs(backend, page, limit)
