from typing import Any

from fastapi import APIRouter, Query

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import FamilyUnitCreate, FamilyUnitUpdate
from app.domain.parish import families as family_domain
from app.domain.parish.families import families

router = APIRouter(prefix="/family-units", tags=["Family"])


@router.get("")
async def list_families(
    parish_unit: str | None = Query(None),
) -> ApiOut[list[dict[str, Any]]]:
    """Family directory with phone numbers masked."""
    items = await family_domain.list_families(parish_unit)
    return ApiOut[list[dict[str, Any]]](results=[family_domain.masked_family(f) for f in items])


@router.get("/admin")
async def list_families_admin(admin: CurrentAdmin) -> ApiOut[list[dict[str, Any]]]:
    items = await family_domain.list_families()
    return ApiOut[list[dict[str, Any]]](results=[f.to_out() for f in items])


@router.get("/parish-units")
async def list_parish_units() -> ApiOut[list[str]]:
    return ApiOut[list[str]](results=await family_domain.list_parish_units())


@router.get("/stats")
async def family_stats(admin: CurrentAdmin) -> ApiOut[dict[str, Any]]:
    return ApiOut[dict[str, Any]](results=await family_domain.family_stats())


@router.get("/{family_id}")
async def get_family(family_id: str) -> ApiOut[dict[str, Any]]:
    item = await families.get(family_id)
    return ApiOut[dict[str, Any]](results=family_domain.masked_family(item))


@router.post("", status_code=201)
async def create_family(params: FamilyUnitCreate, admin: CurrentAdmin) -> ApiOut[dict[str, Any]]:
    item = await family_domain.create_family(params.model_dump(exclude_none=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.put("/{family_id}")
async def update_family(
    family_id: str, params: FamilyUnitUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await families.update(family_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{family_id}")
async def delete_family(family_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await families.delete(family_id)
    return ApiOut[MessageOut](results=MessageOut(message="Family unit deleted successfully"))


@router.delete("/{family_id}/members/{member_id}")
async def delete_family_member(
    family_id: str, member_id: str, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await families.get(family_id)
    item = await family_domain.remove_member(item, member_id)
    return ApiOut[dict[str, Any]](results=item.to_out())
