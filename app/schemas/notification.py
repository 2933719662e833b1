"""Site notification ODM schema."""

from datetime import datetime
from enum import Enum

from .base import RecordDocument


class NotificationType(str, Enum):
    ANNOUNCEMENT = "announcement"
    EVENT = "event"
    URGENT = "urgent"
    GENERAL = "general"


class NotificationPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Notification(RecordDocument):
    title: str
    message: str
    type: NotificationType = NotificationType.GENERAL
    priority: NotificationPriority = NotificationPriority.MEDIUM
    is_active: bool = True
    expiry_date: datetime | None = None

    class Settings:
        name = "notification"
