from typing import Any

from fastapi import APIRouter

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import SocialLinkCreate, SocialLinkUpdate
from app.domain.parish.community import social_links

router = APIRouter(prefix="/social-links", tags=["Social Links"])


@router.get("")
async def list_links() -> ApiOut[list[dict[str, Any]]]:
    items = await social_links.list({"is_active": True})
    return ApiOut[list[dict[str, Any]]](results=[s.to_out() for s in items])


@router.get("/admin")
async def list_links_admin(admin: CurrentAdmin) -> ApiOut[list[dict[str, Any]]]:
    items = await social_links.list()
    return ApiOut[list[dict[str, Any]]](results=[s.to_out() for s in items])


@router.post("", status_code=201)
async def create_link(params: SocialLinkCreate, admin: CurrentAdmin) -> ApiOut[dict[str, Any]]:
    item = await social_links.create(params.model_dump(exclude_none=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.put("/{link_id}")
async def update_link(
    link_id: str, params: SocialLinkUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await social_links.update(link_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{link_id}")
async def delete_link(link_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await social_links.delete(link_id)
    return ApiOut[MessageOut](results=MessageOut(message="Social link deleted successfully"))
