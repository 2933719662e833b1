"""Family unit ODM schema with embedded members."""

from datetime import datetime
from typing import Any

from beanie import Indexed, before_event, Insert, Replace, Save
from bson import ObjectId
from pydantic import BaseModel, Field

from app.domain.parish.helpers import calculate_age

from .base import RecordDocument
from .blood_donor import Gender


class FamilyMember(BaseModel):
    member_id: str = Field(default_factory=lambda: str(ObjectId()))
    name: str
    gender: Gender
    dob: datetime
    age: int | None = None
    relationship: str
    education: str | None = None
    occupation: str | None = None
    blood_group: str | None = None
    mobile: str | None = None
    email: str | None = None
    baptism_date: datetime | None = None
    marriage_date: datetime | None = None


class FamilyUnit(RecordDocument):
    register_no: Indexed(str, unique=True)  # type: ignore[valid-type]
    family_name: str
    house_name: str = ""
    head_of_family: str

    head_name: str = ""
    head_dob: datetime | None = None
    head_age: int | None = None
    head_blood_group: str | None = None
    head_occupation: str | None = None
    head_education: str | None = None

    parish_unit: str = "General"
    kara: str = ""
    village: str | None = None
    post_office: str | None = None
    pincode: str | None = None
    panchayat: str | None = None
    district: str | None = None
    address: str = ""

    # Unique, used as the family login
    phone: Indexed(str, unique=True)  # type: ignore[valid-type]
    whatsapp: str | None = None
    email: str | None = None

    members: list[FamilyMember] = []

    password_hash: str | None = None
    active: bool = True

    @before_event(Insert, Replace, Save)
    def _compute_ages(self) -> None:
        if self.head_dob:
            self.head_age = calculate_age(self.head_dob)
        for member in self.members:
            member.age = calculate_age(member.dob)
        if not self.head_name:
            self.head_name = self.head_of_family

    def to_out(self) -> dict[str, Any]:
        data = super().to_out()
        data.pop("password_hash", None)
        return data

    class Settings:
        name = "family_unit"
