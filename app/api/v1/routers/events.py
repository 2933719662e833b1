from typing import Any

from fastapi import APIRouter

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import EventCreate, EventUpdate
from app.domain.parish import notices
from app.domain.parish.notices import events

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("")
async def list_events() -> ApiOut[list[dict[str, Any]]]:
    """All events, soonest first."""
    items = await events.list()
    return ApiOut[list[dict[str, Any]]](results=[e.to_out() for e in items])


@router.get("/{event_id}")
async def get_event(event_id: str) -> ApiOut[dict[str, Any]]:
    item = await events.get(event_id)
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.post("", status_code=201)
async def create_event(params: EventCreate, admin: CurrentAdmin) -> ApiOut[dict[str, Any]]:
    item = await notices.create_event(params.model_dump())
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.put("/{event_id}")
async def update_event(
    event_id: str, params: EventUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await notices.update_event(event_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{event_id}")
async def delete_event(event_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await events.delete(event_id)
    return ApiOut[MessageOut](results=MessageOut(message="Event deleted successfully"))
