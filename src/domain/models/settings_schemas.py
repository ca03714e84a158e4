from enum import Enum

from src.domain.models.form_base import FormModel


class Language(Enum):
    """Languages the backend accepts as a preference; only English is offered today."""

    EN = "en"
    ES = "es"
    FR = "fr"
    DE = "de"

    @property
    def available(self) -> bool:
        return self is Language.EN


class NotificationPreferencesForm(FormModel):
    system_alerts: bool = True
    new_logins: bool = False
    password_changes: bool = True
    role_updates: bool = True


class LanguageForm(FormModel):
    language: Language

    def to_backend(self) -> dict:
        return {"language": self.language.value}
