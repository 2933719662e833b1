"""Prayer request ODM schema."""

from enum import Enum

from .base import RecordDocument


class PrayerStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    ARCHIVED = "archived"


class PrayerRequest(RecordDocument):
    name: str
    email: str
    phone: str
    request: str
    is_anonymous: bool = False
    status: PrayerStatus = PrayerStatus.PENDING

    class Settings:
        name = "prayer_request"
