"""Mass timing ODM schema."""

from datetime import datetime
from enum import Enum

from beanie import Indexed, PydanticObjectId

from .base import RecordDocument


class Weekday(str, Enum):
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class MassType(str, Enum):
    REGULAR = "Regular"
    SPECIAL = "Special"
    FESTIVAL = "Festival"


class MassTiming(RecordDocument):
    church_id: Indexed(PydanticObjectId)  # type: ignore[valid-type]
    # Either a weekly `day` or a one-off `date`
    day: Weekday | None = None
    date: datetime | None = None
    time: str
    language: str = "Malayalam"
    type: MassType = MassType.REGULAR
    description: str | None = None
    is_active: bool = True

    class Settings:
        name = "mass_timing"
