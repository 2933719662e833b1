"""Site notifications and the parish events calendar."""

from datetime import datetime
from typing import Any

from app.domain.utils.clock import utc_now
from app.schemas import Notification, NotificationPriority, ParishEvent
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .resource_service import ResourceService

PRIORITY_RANK = {
    NotificationPriority.HIGH: 0,
    NotificationPriority.MEDIUM: 1,
    NotificationPriority.LOW: 2,
}

notifications = ResourceService(Notification, "Notification", [("created_at", -1)])
events = ResourceService(ParishEvent, "Event", [("date", 1), ("time", 1)])


async def list_active_notifications(now: datetime | None = None) -> list[Notification]:
    """Active notifications that have not expired, highest priority first."""
    now = now or utc_now()
    items = await notifications.list(
        {
            "is_active": True,
            "$or": [{"expiry_date": None}, {"expiry_date": {"$gte": now}}],
        }
    )
    # Stable sort keeps newest first within a priority
    return sorted(items, key=lambda n: PRIORITY_RANK[n.priority])


def _check_event(data: dict[str, Any]) -> None:
    for field in ("title", "time", "location"):
        if field in data and not (data[field] and str(data[field]).strip()):
            raise AppError(
                errcode=AppErrorCode.E_INVALID_PARAMS,
                errmesg="Title, date, time, and location are required",
                status_code=HttpStatusCode.BAD_REQUEST,
            )


async def create_event(data: dict[str, Any]) -> ParishEvent:
    _check_event(data)
    return await events.create(data)


async def update_event(item_id: str, data: dict[str, Any]) -> ParishEvent:
    _check_event(data)
    return await events.update(item_id, data)
