"""Blood donor directory."""

from typing import Any

from app.schemas import BloodDonor, BloodGroup

from .helpers import is_eligible_to_donate, mask_email, mask_phone
from .resource_service import ResourceService

donors = ResourceService(BloodDonor, "Donor", [("created_at", -1)])


def public_donor(donor: BloodDonor) -> dict[str, Any]:
    """Donor as shown to the public: phone and email masked."""
    data = donor.to_out()
    data["phone"] = mask_phone(donor.phone)
    data["email"] = mask_email(donor.email)
    return data


async def list_public_donors() -> list[dict[str, Any]]:
    items = await donors.list({"is_available": True})
    return [public_donor(d) for d in items]


async def search_eligible_donors(blood_group: BloodGroup) -> list[dict[str, Any]]:
    """Available donors of a blood group whose last donation is long enough ago."""
    items = await donors.list(
        {"blood_group": blood_group.value, "is_available": True},
        sort=[("last_donation", 1)],
    )
    return [public_donor(d) for d in items if is_eligible_to_donate(d.last_donation)]


async def donor_stats() -> dict[str, Any]:
    pipeline = [
        {
            "$group": {
                "_id": "$blood_group",
                "count": {"$sum": 1},
                "available": {"$sum": {"$cond": ["$is_available", 1, 0]}},
            }
        },
        {"$sort": {"_id": 1}},
    ]
    by_group = await BloodDonor.aggregate(pipeline).to_list()
    return {
        "by_blood_group": [
            {"blood_group": g["_id"], "count": g["count"], "available": g["available"]}
            for g in by_group
        ],
        "total_donors": await donors.count(),
        "available_donors": await donors.count({"is_available": True}),
    }
