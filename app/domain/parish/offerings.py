"""Offerings (venda) with sequential receipt numbers."""

from datetime import datetime
from typing import Any

from loguru import logger
from pymongo.errors import DuplicateKeyError

from app.domain.utils.clock import utc_now
from app.schemas import Offering
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .resource_service import ResourceService

RECEIPT_PREFIX = "VND"
MAX_RECEIPT_ATTEMPTS = 5

offerings = ResourceService(Offering, "Offering", [("date", -1)])


async def next_receipt_number(offset: int = 0, now: datetime | None = None) -> str:
    """VND<year><count + 1>, zero-padded to five digits."""
    year = (now or utc_now()).year
    count = await offerings.count()
    return f"{RECEIPT_PREFIX}{year}{count + 1 + offset:05d}"


async def record_offering(data: dict[str, Any]) -> Offering:
    """Insert an offering, numbering its receipt.

    Deleted offerings make the count lag behind issued numbers, so a
    colliding number is retried with the next one in sequence.
    """
    for attempt in range(MAX_RECEIPT_ATTEMPTS):
        receipt_number = await next_receipt_number(offset=attempt)
        try:
            return await offerings.create({**data, "receipt_number": receipt_number})
        except DuplicateKeyError:
            logger.warning(f"Receipt number {receipt_number} already issued, retrying")

    raise AppError(
        errcode=AppErrorCode.E_ALREADY_EXISTS,
        errmesg="Could not allocate a receipt number",
        status_code=HttpStatusCode.CONFLICT,
    )


async def find_by_receipt(receipt_number: str) -> dict[str, Any]:
    """Offering for a receipt, donor hidden when given anonymously."""
    item = await Offering.find_one(Offering.receipt_number == receipt_number)
    if item is None:
        raise offerings.not_found()
    data = item.to_out()
    if item.is_anonymous:
        data["donor_name"] = "Anonymous"
    return data


async def offering_stats() -> dict[str, Any]:
    by_purpose = await Offering.aggregate(
        [
            {
                "$group": {
                    "_id": "$purpose",
                    "total_amount": {"$sum": "$amount"},
                    "count": {"$sum": 1},
                }
            },
            {"$sort": {"total_amount": -1}},
        ]
    ).to_list()
    return {
        "by_purpose": [
            {"purpose": g["_id"], "total_amount": g["total_amount"], "count": g["count"]}
            for g in by_purpose
        ],
        "total_offerings": await offerings.count(),
        "total_amount": sum(g["total_amount"] for g in by_purpose),
    }
