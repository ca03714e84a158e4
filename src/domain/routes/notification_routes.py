import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.base.core.dependencies import get_backend, get_notification_service
from src.domain.models.notification import (
    BulkNotificationResult,
    NotificationList,
    NotificationMessage,
)
from src.domain.repositories.backend import UserHubBackend
from src.domain.services.notification_service import NotificationFilter, NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])
logger = logging.getLogger(__name__)


def _unavailable(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)


@router.get("", response_model=NotificationList)
async def list_notifications(
    status_filter: NotificationFilter | None = Query(None, alias="status"),
    page: int | None = Query(None, ge=1),
    limit: int | None = Query(None, ge=1, le=100),
    backend: UserHubBackend = Depends(get_backend),
    service: NotificationService = Depends(get_notification_service),
):
    return await service.get_notifications(backend, status_filter, page, limit)


@router.post("/mark-all-read", response_model=BulkNotificationResult)
async def mark_all_read(
    backend: UserHubBackend = Depends(get_backend),
    service: NotificationService = Depends(get_notification_service),
):
    result = await service.mark_all_as_read(backend)
    if result is None:
        raise _unavailable("Could not mark notifications as read.")
    return result


@router.post("/{notification_id}/read", response_model=NotificationMessage)
async def mark_read(
    notification_id: str,
    backend: UserHubBackend = Depends(get_backend),
    service: NotificationService = Depends(get_notification_service),
):
    notification = await service.mark_as_read(backend, notification_id)
    if notification is None:
        raise _unavailable("Could not mark notification as read.")
    return notification


@router.delete("", response_model=BulkNotificationResult)
async def clear_all(
    backend: UserHubBackend = Depends(get_backend),
    service: NotificationService = Depends(get_notification_service),
):
    result = await service.clear_all(backend)
    if result is None:
        raise _unavailable("Could not clear notifications.")
    return result
