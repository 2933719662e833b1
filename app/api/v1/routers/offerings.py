from typing import Any

from fastapi import APIRouter

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import OfferingCreate
from app.domain.parish import offerings as offering_domain
from app.domain.parish.offerings import offerings

router = APIRouter(prefix="/venda", tags=["Offerings"])


@router.get("/admin")
async def list_offerings_admin(admin: CurrentAdmin) -> ApiOut[list[dict[str, Any]]]:
    items = await offerings.list()
    return ApiOut[list[dict[str, Any]]](results=[o.to_out() for o in items])


@router.get("/stats")
async def offering_stats(admin: CurrentAdmin) -> ApiOut[dict[str, Any]]:
    return ApiOut[dict[str, Any]](results=await offering_domain.offering_stats())


@router.get("/receipt/{receipt_number}")
async def get_by_receipt(receipt_number: str) -> ApiOut[dict[str, Any]]:
    """Look up an offering by receipt; anonymous donors are not named."""
    return ApiOut[dict[str, Any]](results=await offering_domain.find_by_receipt(receipt_number))


@router.post("", status_code=201)
async def record_offering(params: OfferingCreate, admin: CurrentAdmin) -> ApiOut[dict[str, Any]]:
    item = await offering_domain.record_offering(params.model_dump(exclude_none=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{offering_id}")
async def delete_offering(offering_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await offerings.delete(offering_id)
    return ApiOut[MessageOut](results=MessageOut(message="Offering deleted successfully"))
