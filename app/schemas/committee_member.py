"""Committee member ODM schema."""

from datetime import datetime

from pydantic import Field

from app.domain.utils.clock import utc_now

from .base import RecordDocument


class CommitteeMember(RecordDocument):
    name: str
    position: str
    role: str = "Member"
    photo_url: str | None = None
    email: str | None = None
    phone: str | None = None
    bio: str | None = None
    join_date: datetime = Field(default_factory=utc_now)
    is_active: bool = True
    display_order: int = 0

    class Settings:
        name = "committee_member"
