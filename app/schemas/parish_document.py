"""Downloadable parish document ODM schema."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from app.domain.utils.clock import utc_now

from .base import RecordDocument


class DocumentCategory(str, Enum):
    BULLETIN = "Bulletin"
    NEWSLETTER = "Newsletter"
    FORMS = "Forms"
    REPORTS = "Reports"
    OTHER = "Other"


class ParishDocument(RecordDocument):
    title: str
    description: str = ""
    file_name: str
    file_url: str
    category: DocumentCategory = DocumentCategory.OTHER
    tags: list[str] = []
    upload_date: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "parish_document"
