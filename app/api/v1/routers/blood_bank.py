from typing import Any

from fastapi import APIRouter, Query

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import BloodDonorCreate, BloodDonorUpdate
from app.domain.parish import donors as donor_domain
from app.domain.parish.donors import donors
from app.schemas import BloodGroup
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

router = APIRouter(prefix="/blood-bank", tags=["Blood Bank"])


@router.get("")
async def list_donors() -> ApiOut[list[dict[str, Any]]]:
    """Available donors with contact details masked."""
    return ApiOut[list[dict[str, Any]]](results=await donor_domain.list_public_donors())


@router.get("/admin")
async def list_donors_admin(admin: CurrentAdmin) -> ApiOut[list[dict[str, Any]]]:
    items = await donors.list()
    return ApiOut[list[dict[str, Any]]](results=[d.to_out() for d in items])


@router.get("/search")
async def search_donors(
    blood_group: BloodGroup | None = Query(None, description="Blood group to search"),
) -> ApiOut[list[dict[str, Any]]]:
    """Donors of a blood group who are eligible to donate again."""
    if blood_group is None:
        raise AppError(
            errcode=AppErrorCode.E_INVALID_PARAMS,
            errmesg="Blood group is required",
            status_code=HttpStatusCode.BAD_REQUEST,
        )
    return ApiOut[list[dict[str, Any]]](
        results=await donor_domain.search_eligible_donors(blood_group)
    )


@router.get("/stats")
async def donor_stats() -> ApiOut[dict[str, Any]]:
    return ApiOut[dict[str, Any]](results=await donor_domain.donor_stats())


@router.post("", status_code=201)
async def create_donor(params: BloodDonorCreate, admin: CurrentAdmin) -> ApiOut[dict[str, Any]]:
    donor = await donors.create(params.model_dump(exclude_none=True))
    return ApiOut[dict[str, Any]](results=donor.to_out())


@router.put("/{donor_id}")
async def update_donor(
    donor_id: str, params: BloodDonorUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    donor = await donors.update(donor_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=donor.to_out())


@router.delete("/{donor_id}")
async def delete_donor(donor_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await donors.delete(donor_id)
    return ApiOut[MessageOut](results=MessageOut(message="Donor deleted successfully"))
