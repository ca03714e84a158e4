import logging

from src.domain.models.auth_schemas import MessageResponse
from src.domain.models.settings_schemas import LanguageForm, NotificationPreferencesForm
from src.domain.repositories.backend import UserHubBackend

logger = logging.getLogger(__name__)


class SettingsService:
    async def update_notification_preferences(
        self, backend: UserHubBackend, form: NotificationPreferencesForm
    ) -> MessageResponse:
        response = await backend.update_notification_preferences(form.to_backend())
        logger.info("Notification preferences updated")
        return MessageResponse(
            success=(response or {}).get("success", True),
            message=(response or {}).get("message")
            or "Your notification settings have been updated.",
        )

    async def update_language(
        self, backend: UserHubBackend, form: LanguageForm
    ) -> MessageResponse:
        if not form.language.available:
            raise ValueError("language_unavailable")
        response = await backend.update_language_preference(form.to_backend())
        logger.info(f"Language preference set to {form.language.value}")
        return MessageResponse(
            success=(response or {}).get("success", True),
            message=(response or {}).get("message") or "Language preference saved.",
        )
