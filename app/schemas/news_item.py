"""News item ODM schema."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from app.domain.utils.clock import utc_now

from .base import RecordDocument


class NewsCategory(str, Enum):
    ANNOUNCEMENT = "Announcement"
    EVENT = "Event"
    GENERAL = "General"
    URGENT = "Urgent"
    CELEBRATION = "Celebration"


class NewsItem(RecordDocument):
    title: str
    content: str
    excerpt: str = ""
    image_url: str | None = None
    bible_verse: str | None = None
    category: NewsCategory = NewsCategory.GENERAL
    author: str = "Parish Office"
    publish_date: datetime = Field(default_factory=utc_now)
    is_active: bool = True
    is_pinned: bool = False
    views: int = 0

    class Settings:
        name = "news_item"
