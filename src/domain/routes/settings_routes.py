from fastapi import APIRouter, Depends

from src.base.client.api_client import ApiError
from src.base.core.dependencies import get_backend, get_settings_service
from src.domain.models.auth_schemas import MessageResponse
from src.domain.models.settings_schemas import (
    Language,
    LanguageForm,
    NotificationPreferencesForm,
)
from src.domain.repositories.backend import UserHubBackend
from src.domain.routes.form_errors import form_error_response, handle_service_error
from src.domain.services.settings_service import SettingsService

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("")
async def settings_page():
    return {
        "title": "Settings",
        "notificationPreferences": NotificationPreferencesForm().to_backend(),
        "languages": [
            {"code": lang.value, "available": lang.available} for lang in Language
        ],
    }


@router.put("/notifications", response_model=MessageResponse)
async def update_notification_preferences(
    body: NotificationPreferencesForm,
    backend: UserHubBackend = Depends(get_backend),
    service: SettingsService = Depends(get_settings_service),
):
    try:
        return await service.update_notification_preferences(backend, body)
    except ApiError as e:
        return form_error_response(e, body)


@router.put("/language", response_model=MessageResponse)
async def update_language(
    body: LanguageForm,
    backend: UserHubBackend = Depends(get_backend),
    service: SettingsService = Depends(get_settings_service),
):
    try:
        return await service.update_language(backend, body)
    except ValueError as e:
        handle_service_error(e)
    except ApiError as e:
        return form_error_response(e, body)
