from typing import Any

from fastapi import APIRouter

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import NotificationCreate, NotificationUpdate
from app.domain.parish import notices
from app.domain.parish.notices import notifications

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("")
async def list_notifications() -> ApiOut[list[dict[str, Any]]]:
    """Active, unexpired notifications, highest priority first."""
    items = await notices.list_active_notifications()
    return ApiOut[list[dict[str, Any]]](results=[n.to_out() for n in items])


@router.get("/admin")
async def list_notifications_admin(admin: CurrentAdmin) -> ApiOut[list[dict[str, Any]]]:
    items = await notifications.list()
    return ApiOut[list[dict[str, Any]]](results=[n.to_out() for n in items])


@router.post("", status_code=201)
async def create_notification(
    params: NotificationCreate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await notifications.create(params.model_dump(exclude_none=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.put("/{notification_id}")
async def update_notification(
    notification_id: str, params: NotificationUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await notifications.update(notification_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{notification_id}")
async def delete_notification(notification_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await notifications.delete(notification_id)
    return ApiOut[MessageOut](results=MessageOut(message="Notification deleted successfully"))
