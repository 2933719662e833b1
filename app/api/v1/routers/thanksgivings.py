from typing import Any

from fastapi import APIRouter, Query

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import ThanksgivingIn, ThanksgivingStatusIn
from app.domain.parish import messages
from app.domain.parish.messages import thanksgivings
from app.schemas import ThanksgivingStatus

router = APIRouter(prefix="/thanksgivings", tags=["Thanksgivings"])


@router.post("", status_code=201)
async def submit_thanksgiving(params: ThanksgivingIn) -> ApiOut[dict[str, Any]]:
    """Submitted thanksgivings stay pending until an admin approves them."""
    item = await messages.submit_thanksgiving(
        params.name, params.email, params.message, params.is_anonymous
    )
    return ApiOut[dict[str, Any]](results=messages.public_thanksgiving(item))


@router.get("")
async def list_thanksgivings() -> ApiOut[list[dict[str, Any]]]:
    return ApiOut[list[dict[str, Any]]](results=await messages.list_public_thanksgivings())


@router.get("/admin")
async def list_thanksgivings_admin(
    admin: CurrentAdmin,
    status: ThanksgivingStatus | None = Query(None),
) -> ApiOut[list[dict[str, Any]]]:
    filters = {"status": status.value} if status else None
    items = await thanksgivings.list(filters)
    return ApiOut[list[dict[str, Any]]](results=[t.to_out() for t in items])


@router.put("/{thanksgiving_id}/status")
async def update_status(
    thanksgiving_id: str, params: ThanksgivingStatusIn, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await thanksgivings.update(thanksgiving_id, {"status": params.status})
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{thanksgiving_id}")
async def delete_thanksgiving(thanksgiving_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await thanksgivings.delete(thanksgiving_id)
    return ApiOut[MessageOut](results=MessageOut(message="Thanksgiving deleted successfully"))
