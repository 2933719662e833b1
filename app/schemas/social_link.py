"""Social media link ODM schema."""

from .base import RecordDocument


class SocialLink(RecordDocument):
    platform: str
    url: str
    icon: str = ""
    is_active: bool = True

    class Settings:
        name = "social_link"
