"""Thanksgiving testimony ODM schema."""

from enum import Enum

from .base import RecordDocument


class ThanksgivingStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    ARCHIVED = "archived"


class Thanksgiving(RecordDocument):
    name: str
    email: str
    message: str
    is_anonymous: bool = False
    status: ThanksgivingStatus = ThanksgivingStatus.PENDING

    class Settings:
        name = "thanksgiving"
