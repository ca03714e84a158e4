from fastapi import APIRouter, Depends

from src.base.core.dependencies import get_backend, get_dashboard_service
from src.domain.models.dashboard_schemas import DashboardSummary
from src.domain.repositories.backend import UserHubBackend
from src.domain.services.dashboard_service import DashboardService

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardSummary)
async def dashboard(
    backend: UserHubBackend = Depends(get_backend),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Overview cards: user counts, users per role, recent activity, unread notifications."""
    return await service.get_summary(backend)
