from typing import Any

from fastapi import APIRouter, Query

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import GalleryImageCreate, GalleryImageUpdate
from app.domain.parish import community
from app.domain.parish.community import gallery
from app.schemas import GalleryLabel

router = APIRouter(prefix="/gallery", tags=["Gallery"])


@router.get("")
async def list_images(
    category: str | None = Query(None, description="Event name"),
    label: GalleryLabel | None = Query(None),
) -> ApiOut[list[dict[str, Any]]]:
    items = await community.list_gallery(category, label.value if label else None)
    return ApiOut[list[dict[str, Any]]](results=[i.to_out() for i in items])


@router.get("/categories")
async def list_categories() -> ApiOut[list[str]]:
    return ApiOut[list[str]](results=await community.list_gallery_categories())


@router.post("", status_code=201)
async def create_image(params: GalleryImageCreate, admin: CurrentAdmin) -> ApiOut[dict[str, Any]]:
    data = params.model_dump(exclude_none=True)
    data["uploaded_by"] = admin.username or admin.id
    item = await gallery.create(data)
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.put("/{image_id}")
async def update_image(
    image_id: str, params: GalleryImageUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await gallery.update(image_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{image_id}")
async def delete_image(image_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await gallery.delete(image_id)
    return ApiOut[MessageOut](results=MessageOut(message="Image deleted successfully"))
