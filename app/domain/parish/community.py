"""News, gallery, documents, committee, hero slides and social links."""

from typing import Any

from beanie.operators import Inc

from app.schemas import (
    CommitteeMember,
    GalleryImage,
    HeroSlide,
    NewsItem,
    ParishDocument,
    SocialLink,
)
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .resource_service import ResourceService

MAX_HERO_SLIDES = 5
DEFAULT_NEWS_LIMIT = 10

news = ResourceService(NewsItem, "News", [("created_at", -1)])
gallery = ResourceService(GalleryImage, "Image", [("created_at", -1)])
documents = ResourceService(ParishDocument, "Document", [("upload_date", -1)])
committee = ResourceService(CommitteeMember, "Committee member", [("display_order", 1)])
hero_slides = ResourceService(HeroSlide, "Slider", [("display_order", 1)])
social_links = ResourceService(SocialLink, "Social link", [("platform", 1)])


async def list_public_news(category: str | None = None, limit: int = DEFAULT_NEWS_LIMIT):
    filters: dict[str, Any] = {"is_active": True}
    if category:
        filters["category"] = category
    return await news.list(filters, sort=[("is_pinned", -1), ("publish_date", -1)], limit=limit)


async def register_news_view(item_id: str) -> NewsItem:
    item = await news.get(item_id)
    await item.update(Inc({NewsItem.views: 1}))
    item.views += 1
    return item


async def list_gallery(category: str | None = None, label: str | None = None):
    filters: dict[str, Any] = {}
    if category:
        filters["category"] = category
    if label:
        filters["label"] = label
    return await gallery.list(filters)


async def list_gallery_categories() -> list[str]:
    return sorted(await GalleryImage.distinct("category"))


async def list_documents(category: str | None = None, tags: list[str] | None = None):
    filters: dict[str, Any] = {}
    if category:
        filters["category"] = category
    if tags:
        filters["tags"] = {"$in": tags}
    return await documents.list(filters)


async def list_document_categories() -> list[str]:
    return sorted(await ParishDocument.distinct("category"))


async def list_public_committee():
    return await committee.list({"is_active": True}, sort=[("display_order", 1), ("position", 1)])


async def create_hero_slide(data: dict[str, Any]) -> HeroSlide:
    if await hero_slides.count() >= MAX_HERO_SLIDES:
        raise AppError(
            errcode=AppErrorCode.E_INVALID_REQUEST,
            errmesg=f"Maximum {MAX_HERO_SLIDES} slider images allowed",
            status_code=HttpStatusCode.BAD_REQUEST,
        )
    return await hero_slides.create(data)
