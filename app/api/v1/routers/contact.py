from typing import Any

from fastapi import APIRouter, Query

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import ContactIn, ContactStatusIn
from app.domain.parish import messages
from app.domain.parish.messages import contact_messages
from app.schemas import MessageStatus

router = APIRouter(prefix="/contact", tags=["Contact"])


@router.post("", status_code=201)
async def submit_contact(params: ContactIn) -> ApiOut[MessageOut]:
    await messages.submit_contact(params.name, params.email, params.subject, params.message)
    return ApiOut[MessageOut](
        results=MessageOut(message="Thank you for contacting us. We will get back to you soon.")
    )


@router.get("")
async def list_contacts(
    admin: CurrentAdmin,
    status: MessageStatus | None = Query(None),
) -> ApiOut[list[dict[str, Any]]]:
    items = await messages.list_contacts(status.value if status else None)
    return ApiOut[list[dict[str, Any]]](results=[m.to_out() for m in items])


@router.patch("/{message_id}/status")
async def update_status(
    message_id: str, params: ContactStatusIn, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await contact_messages.update(message_id, {"status": params.status})
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{message_id}")
async def delete_contact(message_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await contact_messages.delete(message_id)
    return ApiOut[MessageOut](results=MessageOut(message="Message deleted successfully"))
