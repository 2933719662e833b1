from typing import Any

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependency import CurrentFamily
from app.api.v1.schemas.auth import FamilyAuthOut, FamilyLoginIn, FamilyRegisterIn
from app.api.v1.schemas.base import ApiOut
from app.api.v1.schemas.parish import FamilyMemberIn, FamilyMemberUpdate
from app.domain.auth.family_service import FamilyAuthService, FamilyRegisterParams
from app.domain.parish import families as family_domain
from app.schemas import FamilyMember
from app.services.api_rate_limiter import login_rate_limit

router = APIRouter(prefix="/family-auth", tags=["Family"])

# Singleton instance
_family_service = FamilyAuthService()


def get_family_service() -> FamilyAuthService:
    """Get the singleton FamilyAuthService instance."""
    return _family_service


@router.post("/register", status_code=201)
async def register(
    params: FamilyRegisterIn,
    service: FamilyAuthService = Depends(get_family_service),
) -> ApiOut[FamilyAuthOut]:
    result = await service.register(FamilyRegisterParams(**params.model_dump()))
    return ApiOut[FamilyAuthOut](results=FamilyAuthOut(**result.model_dump()))


@router.post("/login")
@login_rate_limit()
async def login(
    request: Request,
    params: FamilyLoginIn,
    service: FamilyAuthService = Depends(get_family_service),
) -> ApiOut[FamilyAuthOut]:
    result = await service.login(params.phone, params.password)
    return ApiOut[FamilyAuthOut](results=FamilyAuthOut(**result.model_dump()))


@router.get("/me")
async def me(
    family: CurrentFamily,
    service: FamilyAuthService = Depends(get_family_service),
) -> ApiOut[dict[str, Any]]:
    unit = await service.get_family(family.id)
    return ApiOut[dict[str, Any]](results=unit.to_out())


@router.post("/me/members", status_code=201)
async def add_member(
    params: FamilyMemberIn,
    family: CurrentFamily,
    service: FamilyAuthService = Depends(get_family_service),
) -> ApiOut[dict[str, Any]]:
    unit = await service.get_family(family.id)
    unit = await family_domain.add_member(unit, FamilyMember(**params.model_dump()))
    return ApiOut[dict[str, Any]](results=unit.to_out())


@router.put("/me/members/{member_id}")
async def update_member(
    member_id: str,
    params: FamilyMemberUpdate,
    family: CurrentFamily,
    service: FamilyAuthService = Depends(get_family_service),
) -> ApiOut[dict[str, Any]]:
    unit = await service.get_family(family.id)
    unit = await family_domain.update_member(
        unit, member_id, params.model_dump(exclude_unset=True)
    )
    return ApiOut[dict[str, Any]](results=unit.to_out())


@router.delete("/me/members/{member_id}")
async def remove_member(
    member_id: str,
    family: CurrentFamily,
    service: FamilyAuthService = Depends(get_family_service),
) -> ApiOut[dict[str, Any]]:
    unit = await service.get_family(family.id)
    unit = await family_domain.remove_member(unit, member_id)
    return ApiOut[dict[str, Any]](results=unit.to_out())
