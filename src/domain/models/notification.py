import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class NotificationMessage(BaseModel):
    id: str
    title: str
    message: str
    timestamp: datetime.datetime
    read: bool = False
    link: str | None = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
    }


class NotificationList(BaseModel):
    notifications: list[NotificationMessage]
    total: int
    unread_count: int

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @classmethod
    def empty(cls) -> "NotificationList":
        return cls(notifications=[], total=0, unread_count=0)


class BulkNotificationResult(BaseModel):
    success: bool
    message: str
    unread_count_after: int | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
