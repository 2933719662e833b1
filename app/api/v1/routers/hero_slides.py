from typing import Any

from fastapi import APIRouter

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import HeroSlideCreate, HeroSlideUpdate
from app.domain.parish import community
from app.domain.parish.community import hero_slides

router = APIRouter(prefix="/hero-slides", tags=["Hero Slides"])


@router.get("")
async def list_slides() -> ApiOut[list[dict[str, Any]]]:
    items = await hero_slides.list({"is_active": True})
    return ApiOut[list[dict[str, Any]]](results=[s.to_out() for s in items])


@router.get("/admin")
async def list_slides_admin(admin: CurrentAdmin) -> ApiOut[list[dict[str, Any]]]:
    items = await hero_slides.list()
    return ApiOut[list[dict[str, Any]]](results=[s.to_out() for s in items])


@router.post("", status_code=201)
async def create_slide(params: HeroSlideCreate, admin: CurrentAdmin) -> ApiOut[dict[str, Any]]:
    item = await community.create_hero_slide(params.model_dump(exclude_none=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.put("/{slide_id}")
async def update_slide(
    slide_id: str, params: HeroSlideUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await hero_slides.update(slide_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{slide_id}")
async def delete_slide(slide_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await hero_slides.delete(slide_id)
    return ApiOut[MessageOut](results=MessageOut(message="Slider image deleted successfully"))
