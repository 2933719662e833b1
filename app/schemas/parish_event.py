"""Parish calendar event ODM schema."""

from datetime import datetime

from .base import RecordDocument


class ParishEvent(RecordDocument):
    title: str
    description: str = ""
    date: datetime
    time: str
    location: str

    class Settings:
        name = "parish_event"
