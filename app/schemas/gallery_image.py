"""Gallery image ODM schema."""

from datetime import datetime
from enum import Enum

from .base import RecordDocument


class GalleryLabel(str, Enum):
    EVENTS = "Events"
    CHURCH = "Church"
    COMMUNITY = "Community"
    FESTIVALS = "Festivals"
    SACRAMENTS = "Sacraments"
    OTHER = "Other"


class GalleryImage(RecordDocument):
    image_url: str
    # Event name, e.g. "Holy Mass", "Easter Sunday"
    category: str
    label: GalleryLabel | None = None
    description: str | None = None
    date_taken: datetime | None = None
    location: str | None = None
    uploaded_by: str = "admin"

    class Settings:
        name = "gallery_image"
