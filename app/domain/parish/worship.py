"""Churches and mass timings."""

from typing import Any

from beanie import PydanticObjectId

from app.schemas import Church, MassTiming
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .resource_service import ResourceService

churches = ResourceService(Church, "Church", [("created_at", -1)])
mass_timings = ResourceService(MassTiming, "Mass timing", [("day", 1), ("time", 1)])


async def _require_church(church_id: Any) -> None:
    if await churches.find(str(church_id)) is None:
        raise AppError(
            errcode=AppErrorCode.E_INVALID_PARAMS,
            errmesg=f"Church {church_id} does not exist",
            status_code=HttpStatusCode.BAD_REQUEST,
        )


async def list_mass_timings(church_id: str | None = None) -> list[MassTiming]:
    filters: dict[str, Any] = {"is_active": True}
    if church_id:
        if not PydanticObjectId.is_valid(church_id):
            return []
        filters["church_id"] = PydanticObjectId(church_id)
    return await mass_timings.list(filters)


async def create_mass_timing(data: dict[str, Any]) -> MassTiming:
    await _require_church(data["church_id"])
    return await mass_timings.create(data)


async def update_mass_timing(item_id: str, data: dict[str, Any]) -> MassTiming:
    if "church_id" in data:
        await _require_church(data["church_id"])
    return await mass_timings.update(item_id, data)
