from typing import Any

from fastapi import APIRouter, Query

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import PrayerRequestIn, PrayerStatusIn
from app.domain.parish import messages
from app.domain.parish.messages import prayer_requests
from app.schemas import PrayerStatus

router = APIRouter(prefix="/prayer-requests", tags=["Prayer Requests"])


@router.post("", status_code=201)
async def submit_prayer_request(params: PrayerRequestIn) -> ApiOut[dict[str, Any]]:
    item = await messages.submit_prayer_request(
        params.name, params.email, params.phone, params.request, params.is_anonymous
    )
    return ApiOut[dict[str, Any]](results=messages.public_prayer(item))


@router.get("")
async def list_prayer_requests() -> ApiOut[list[dict[str, Any]]]:
    """Approved requests, anonymous names hidden and phones masked."""
    return ApiOut[list[dict[str, Any]]](results=await messages.list_public_prayers())


@router.get("/admin")
async def list_prayer_requests_admin(
    admin: CurrentAdmin,
    status: PrayerStatus | None = Query(None),
) -> ApiOut[list[dict[str, Any]]]:
    filters = {"status": status.value} if status else None
    items = await prayer_requests.list(filters)
    return ApiOut[list[dict[str, Any]]](results=[p.to_out() for p in items])


@router.put("/{request_id}/status")
async def update_status(
    request_id: str, params: PrayerStatusIn, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await prayer_requests.update(request_id, {"status": params.status})
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{request_id}")
async def delete_prayer_request(request_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await prayer_requests.delete(request_id)
    return ApiOut[MessageOut](results=MessageOut(message="Prayer request deleted successfully"))
