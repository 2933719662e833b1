"""Blood donor ODM schema."""

from datetime import datetime
from enum import Enum
from typing import Annotated

from beanie import Indexed

from .base import RecordDocument


class BloodGroup(str, Enum):
    A_POS = "A+"
    A_NEG = "A-"
    B_POS = "B+"
    B_NEG = "B-"
    AB_POS = "AB+"
    AB_NEG = "AB-"
    O_POS = "O+"
    O_NEG = "O-"
    BOMBAY = "Bombay Blood (Oh) - Rare"
    GOLDEN = "Golden Blood (Rh-null) - Rare"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class BloodDonor(RecordDocument):
    donor_name: str
    blood_group: Annotated[BloodGroup, Indexed()]
    phone: str
    email: str
    date_of_birth: datetime
    age: int | None = None
    gender: Gender
    last_donation: datetime | None = None
    is_available: bool = True
    address: str

    class Settings:
        name = "blood_donor"
