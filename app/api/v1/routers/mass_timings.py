from typing import Any

from fastapi import APIRouter, Query

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import MassTimingCreate, MassTimingUpdate
from app.domain.parish import worship
from app.domain.parish.worship import mass_timings

router = APIRouter(prefix="/mass-timings", tags=["Mass Timings"])


@router.get("")
async def list_mass_timings(
    church_id: str | None = Query(None),
) -> ApiOut[list[dict[str, Any]]]:
    items = await worship.list_mass_timings(church_id)
    return ApiOut[list[dict[str, Any]]](results=[m.to_out() for m in items])


@router.get("/church/{church_id}")
async def list_church_mass_timings(church_id: str) -> ApiOut[list[dict[str, Any]]]:
    items = await worship.list_mass_timings(church_id)
    return ApiOut[list[dict[str, Any]]](results=[m.to_out() for m in items])


@router.post("", status_code=201)
async def create_mass_timing(
    params: MassTimingCreate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await worship.create_mass_timing(params.model_dump(exclude_none=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.put("/{timing_id}")
async def update_mass_timing(
    timing_id: str, params: MassTimingUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await worship.update_mass_timing(timing_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{timing_id}")
async def delete_mass_timing(timing_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await mass_timings.delete(timing_id)
    return ApiOut[MessageOut](results=MessageOut(message="Mass timing deleted successfully"))
