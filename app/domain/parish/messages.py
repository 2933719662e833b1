"""Contact messages, prayer requests and thanksgivings."""

from typing import Any

from app.schemas import (
    ContactMessage,
    MessageStatus,
    PrayerRequest,
    PrayerStatus,
    Thanksgiving,
    ThanksgivingStatus,
)
from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode

from .helpers import is_valid_email, is_valid_phone, mask_phone
from .resource_service import ResourceService

PUBLIC_PRAYER_LIMIT = 50
PUBLIC_THANKSGIVING_LIMIT = 50
PRAYER_MIN_CHARS = 10
PRAYER_MAX_CHARS = 1000

contact_messages = ResourceService(ContactMessage, "Contact", [("created_at", -1)])
prayer_requests = ResourceService(PrayerRequest, "Prayer request", [("created_at", -1)])
thanksgivings = ResourceService(Thanksgiving, "Thanksgiving", [("created_at", -1)])


def _invalid(message: str) -> AppError:
    return AppError(
        errcode=AppErrorCode.E_INVALID_PARAMS,
        errmesg=message,
        status_code=HttpStatusCode.BAD_REQUEST,
    )


async def submit_contact(name: str, email: str, subject: str, message: str) -> ContactMessage:
    if not all(v and v.strip() for v in (name, email, subject, message)):
        raise _invalid("All fields are required")
    if not is_valid_email(email):
        raise _invalid("Invalid email address")
    return await contact_messages.create(
        {"name": name, "email": email, "subject": subject, "message": message}
    )


async def list_contacts(status: str | None = None) -> list[ContactMessage]:
    filters: dict[str, Any] = {}
    if status in {s.value for s in MessageStatus}:
        filters["status"] = status
    return await contact_messages.list(filters)


async def submit_prayer_request(
    name: str,
    email: str,
    phone: str,
    request: str,
    is_anonymous: bool = False,
) -> PrayerRequest:
    if not all(v and v.strip() for v in (name, email, phone, request)):
        raise _invalid("All fields are required")
    if not PRAYER_MIN_CHARS <= len(request) <= PRAYER_MAX_CHARS:
        raise _invalid(
            f"Prayer request must be between {PRAYER_MIN_CHARS} and {PRAYER_MAX_CHARS} characters"
        )
    if not is_valid_email(email):
        raise _invalid("Invalid email address")
    if not is_valid_phone(phone):
        raise _invalid("Invalid phone number. Must be 10 digits")
    return await prayer_requests.create(
        {
            "name": name,
            "email": email,
            "phone": phone,
            "request": request,
            "is_anonymous": is_anonymous,
        }
    )


def public_prayer(item: PrayerRequest) -> dict[str, Any]:
    data = item.to_out()
    if item.is_anonymous:
        data["name"] = "Anonymous"
        data["email"] = ""
    data["phone"] = mask_phone(item.phone)
    return data


async def list_public_prayers() -> list[dict[str, Any]]:
    items = await prayer_requests.list(
        {"status": PrayerStatus.APPROVED.value}, limit=PUBLIC_PRAYER_LIMIT
    )
    return [public_prayer(p) for p in items]


async def submit_thanksgiving(
    name: str, email: str, message: str, is_anonymous: bool = False
) -> Thanksgiving:
    if not all(v and v.strip() for v in (name, email, message)):
        raise _invalid("All fields are required")
    if not is_valid_email(email):
        raise _invalid("Invalid email address")
    return await thanksgivings.create(
        {
            "name": name,
            "email": email.strip().lower(),
            "message": message,
            "is_anonymous": is_anonymous,
        }
    )


def public_thanksgiving(item: Thanksgiving) -> dict[str, Any]:
    data = item.to_out()
    if item.is_anonymous:
        data["name"] = "Anonymous"
        data["email"] = ""
    return data


async def list_public_thanksgivings() -> list[dict[str, Any]]:
    items = await thanksgivings.list(
        {"status": ThanksgivingStatus.APPROVED.value}, limit=PUBLIC_THANKSGIVING_LIMIT
    )
    return [public_thanksgiving(t) for t in items]
