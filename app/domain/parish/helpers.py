"""Formatting and eligibility helpers for parish records."""

import re
from datetime import datetime

from app.domain.utils.clock import as_utc, utc_now

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\d{10}$")
_EMAIL_MASK_RE = re.compile(r"(.{3})(.*)(@.*)")

# Donors must wait three 30-day months between donations
DONATION_INTERVAL_DAYS = 90


def calculate_age(date_of_birth: datetime, today: datetime | None = None) -> int:
    today = today or utc_now()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def mask_phone(phone: str | None) -> str | None:
    """9876543210 -> 987****210. Short or empty values are returned as-is."""
    if not phone or len(phone) < 10:
        return phone
    digits = re.sub(r"\D", "", phone)
    return f"{digits[:3]}****{digits[-3:]}"


def mask_email(email: str | None) -> str | None:
    """johndoe@example.com -> joh***@example.com."""
    if not email:
        return email
    return _EMAIL_MASK_RE.sub(r"\1***\3", email, count=1)


def is_valid_email(email: str | None) -> bool:
    return bool(email and EMAIL_RE.match(email))


def is_valid_phone(phone: str | None) -> bool:
    if not phone:
        return False
    return bool(PHONE_RE.match(re.sub(r"[\s\-+]", "", phone)))


def is_eligible_to_donate(last_donation: datetime | None, now: datetime | None = None) -> bool:
    if last_donation is None:
        return True
    now = now or utc_now()
    elapsed_days = (now - as_utc(last_donation)).total_seconds() / 86400
    return elapsed_days >= DONATION_INTERVAL_DAYS
