from typing import Any

from fastapi import APIRouter

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import ChurchCreate, ChurchUpdate
from app.domain.parish.worship import churches

router = APIRouter(prefix="/churches", tags=["Churches"])


@router.get("")
async def list_churches() -> ApiOut[list[dict[str, Any]]]:
    items = await churches.list()
    return ApiOut[list[dict[str, Any]]](results=[c.to_out() for c in items])


@router.get("/{church_id}")
async def get_church(church_id: str) -> ApiOut[dict[str, Any]]:
    item = await churches.get(church_id)
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.post("", status_code=201)
async def create_church(params: ChurchCreate, admin: CurrentAdmin) -> ApiOut[dict[str, Any]]:
    item = await churches.create(params.model_dump(exclude_none=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.put("/{church_id}")
async def update_church(
    church_id: str, params: ChurchUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await churches.update(church_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{church_id}")
async def delete_church(church_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await churches.delete(church_id)
    return ApiOut[MessageOut](results=MessageOut(message="Church deleted successfully"))
