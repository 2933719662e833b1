"""Home page hero banner ODM schema."""

from .base import RecordDocument


class HeroSlide(RecordDocument):
    image_url: str
    display_order: int = 0
    is_active: bool = True

    class Settings:
        name = "hero_slide"
