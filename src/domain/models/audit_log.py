import datetime
from typing import Literal

from pydantic import BaseModel, computed_field
from pydantic.alias_generators import to_camel

BadgeVariant = Literal["default", "destructive", "secondary", "outline"]


class AuditLog(BaseModel):
    """Append-only record of an action taken in the system."""

    id: str
    timestamp: datetime.datetime
    user: str
    action: str
    details: str = ""
    entity: str = ""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
        "frozen": True,
    }

    @computed_field
    @property
    def severity(self) -> BadgeVariant:
        action = self.action.upper()
        if any(word in action for word in ("CREATE", "SUCCESS", "UPDATE")):
            return "default"
        if any(word in action for word in ("DELETE", "FAILED")):
            return "destructive"
        if any(word in action for word in ("LOGIN", "LOGOUT", "PROFILE")):
            return "secondary"
        return "outline"
