"""Family units and their members."""

from typing import Any

from app.domain.utils.idgen import new_register_no
from app.schemas import FamilyMember, FamilyUnit
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .helpers import mask_phone
from .resource_service import ResourceService

families = ResourceService(FamilyUnit, "Family unit", [("family_name", 1)])


def _member_not_found() -> AppError:
    return AppError(
        errcode=AppErrorCode.E_NOT_FOUND,
        errmesg="Member not found",
        status_code=HttpStatusCode.NOT_FOUND,
    )


def masked_family(family: FamilyUnit) -> dict[str, Any]:
    data = family.to_out()
    data["phone"] = mask_phone(family.phone)
    for member in data.get("members", []):
        member["mobile"] = mask_phone(member.get("mobile"))
    return data


async def list_families(parish_unit: str | None = None) -> list[FamilyUnit]:
    return await families.list({"parish_unit": parish_unit} if parish_unit else None)


async def create_family(data: dict[str, Any]) -> FamilyUnit:
    data = dict(data)
    data.setdefault("register_no", new_register_no())
    return await families.create(data)


async def list_parish_units() -> list[str]:
    return sorted(await FamilyUnit.distinct("parish_unit"))


async def family_stats() -> dict[str, Any]:
    member_stats = await FamilyUnit.aggregate(
        [
            {"$unwind": "$members"},
            {
                "$group": {
                    "_id": None,
                    "total_members": {"$sum": 1},
                    "male_count": {
                        "$sum": {"$cond": [{"$eq": ["$members.gender", "Male"]}, 1, 0]}
                    },
                    "female_count": {
                        "$sum": {"$cond": [{"$eq": ["$members.gender", "Female"]}, 1, 0]}
                    },
                    "average_age": {"$avg": "$members.age"},
                }
            },
        ]
    ).to_list()
    parish_stats = await FamilyUnit.aggregate(
        [
            {"$group": {"_id": "$parish_unit", "family_count": {"$sum": 1}}},
            {"$sort": {"family_count": -1}},
        ]
    ).to_list()

    members = member_stats[0] if member_stats else {}
    members.pop("_id", None)
    return {
        "total_families": await families.count(),
        "member_stats": members,
        "parish_stats": [
            {"parish_unit": p["_id"], "family_count": p["family_count"]} for p in parish_stats
        ],
    }


async def add_member(family: FamilyUnit, member: FamilyMember) -> FamilyUnit:
    family.members.append(member)
    await family.save()
    return family


async def update_member(family: FamilyUnit, member_id: str, data: dict[str, Any]) -> FamilyUnit:
    for i, member in enumerate(family.members):
        if member.member_id == member_id:
            family.members[i] = FamilyMember.model_validate(member.model_dump() | data)
            await family.save()
            return family
    raise _member_not_found()


async def remove_member(family: FamilyUnit, member_id: str) -> FamilyUnit:
    remaining = [m for m in family.members if m.member_id != member_id]
    if len(remaining) == len(family.members):
        raise _member_not_found()
    family.members = remaining
    await family.save()
    return family
