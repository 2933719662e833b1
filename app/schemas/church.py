"""Church ODM schema."""

from pydantic import BaseModel

from .base import RecordDocument


class GeoPoint(BaseModel):
    lat: float
    lng: float


class Church(RecordDocument):
    name: str
    description: str = ""
    history: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    location: GeoPoint | None = None
    images: list[str] = []

    class Settings:
        name = "church"
