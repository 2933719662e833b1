from typing import Any

from fastapi import APIRouter

from app.api.v1.dependency import CurrentAdmin
from app.api.v1.schemas.base import ApiOut, MessageOut
from app.api.v1.schemas.parish import CommitteeMemberCreate, CommitteeMemberUpdate
from app.domain.parish import community
from app.domain.parish.community import committee

router = APIRouter(prefix="/committee", tags=["Committee"])


@router.get("")
async def list_members() -> ApiOut[list[dict[str, Any]]]:
    """Active members in display order."""
    items = await community.list_public_committee()
    return ApiOut[list[dict[str, Any]]](results=[m.to_out() for m in items])


@router.get("/admin")
async def list_members_admin(admin: CurrentAdmin) -> ApiOut[list[dict[str, Any]]]:
    items = await committee.list()
    return ApiOut[list[dict[str, Any]]](results=[m.to_out() for m in items])


@router.get("/{member_id}")
async def get_member(member_id: str) -> ApiOut[dict[str, Any]]:
    item = await committee.get(member_id)
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.post("", status_code=201)
async def create_member(
    params: CommitteeMemberCreate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await committee.create(params.model_dump(exclude_none=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.put("/{member_id}")
async def update_member(
    member_id: str, params: CommitteeMemberUpdate, admin: CurrentAdmin
) -> ApiOut[dict[str, Any]]:
    item = await committee.update(member_id, params.model_dump(exclude_unset=True))
    return ApiOut[dict[str, Any]](results=item.to_out())


@router.delete("/{member_id}")
async def delete_member(member_id: str, admin: CurrentAdmin) -> ApiOut[MessageOut]:
    await committee.delete(member_id)
    return ApiOut[MessageOut](results=MessageOut(message="Committee member deleted successfully"))
