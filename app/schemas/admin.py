"""Admin account ODM schema."""

from datetime import datetime
from enum import Enum

from beanie import Indexed

from .base import RecordDocument


class AdminRole(str, Enum):
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    MODERATOR = "moderator"

    def __str__(self) -> str:
        return self.value


class AdminPermission(str, Enum):
    MANAGE_CHURCHES = "manage_churches"
    MANAGE_MASS_TIMINGS = "manage_mass_timings"
    MANAGE_PRAYER_REQUESTS = "manage_prayer_requests"
    MANAGE_BLOOD_BANK = "manage_blood_bank"
    MANAGE_FAMILY_UNITS = "manage_family_units"
    MANAGE_GALLERY = "manage_gallery"
    MANAGE_DOCUMENTS = "manage_documents"
    MANAGE_NEWS = "manage_news"
    MANAGE_COMMITTEE = "manage_committee"
    MANAGE_LIVE_STREAM = "manage_live_stream"
    MANAGE_ADMINS = "manage_admins"


class Admin(RecordDocument):
    username: Indexed(str, unique=True)  # type: ignore[valid-type]
    email: Indexed(str, unique=True)  # type: ignore[valid-type]
    password_hash: str
    role: AdminRole = AdminRole.ADMIN
    permissions: list[AdminPermission] = []
    is_active: bool = True
    last_login: datetime | None = None

    def public_profile(self) -> dict:
        return {
            "id": str(self.id),
            "username": self.username,
            "email": self.email,
            "role": self.role.value,
            "permissions": [p.value for p in self.permissions],
        }

    class Settings:
        name = "admin"
