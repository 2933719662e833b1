from typing import Any

from fastapi import APIRouter, Query

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import NewsCreate, NewsUpdate
from app.domain.parish import community
from app.domain.parish.community import news
from app.schemas.news_item import NewsCategory

router = APIRouter(prefix="/news", tags=["News"])


@router.get("")
async def list_news(
    category: NewsCategory | None = Query(None),
    limit: int = Query(community.DEFAULT_NEWS_LIMIT, ge=1, le=100),
) -> ApiOut[list[dict[str, Any]]]:
    """Active news, pinned first then newest."""
    items = await community.list_public_news(category.value if category else None, limit)
    return ApiOut[list[dict[str, Any]]](results=[n.to_out() for n in items])


@router.get("/admin")
async def list_news_admin(admin: CurrentAdmin) -> ApiOut[list[dict[str, Any]]]:
    items = await news.list()
    return ApiOut[list[dict[str, Any]]](results=[n.to_out() for n in items])


@router.get("/{news_id}")
async def get_news(news_id: str) -> ApiOut[dict[str, Any]]:
    """Single news item; each read counts as a view."""
    item = await community.register_news_view(news_id)
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.post("", status_code=201)
async def create_news(params: NewsCreate, admin: CurrentAdmin) -> ApiOut[dict[str, Any]]:
    item = await news.create(params.model_dump(exclude_none=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.put("/{news_id}")
async def update_news(
    news_id: str, params: NewsUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await news.update(news_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{news_id}")
async def delete_news(news_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await news.delete(news_id)
    return ApiOut[MessageOut](results=MessageOut(message="News deleted successfully"))
