"""Offering (venda) ODM schema."""

from datetime import datetime
from enum import Enum

from beanie import Indexed
from pydantic import Field

from app.domain.utils.clock import utc_now

from .base import RecordDocument


class OfferingPurpose(str, Enum):
    GENERAL = "General"
    BUILDING_FUND = "Building Fund"
    POOR_FUND = "Poor Fund"
    MISSION = "Mission"
    SPECIAL_OFFERING = "Special Offering"
    OTHER = "Other"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    CHECK = "Check"
    ONLINE_TRANSFER = "Online Transfer"
    UPI = "UPI"
    CARD = "Card"


class Offering(RecordDocument):
    """One recorded offering. `receipt_number` is VND<year><5-digit sequence>."""

    donor_name: str
    amount: float = Field(ge=0)
    purpose: OfferingPurpose = OfferingPurpose.GENERAL
    date: datetime = Field(default_factory=utc_now)
    is_anonymous: bool = False
    payment_method: PaymentMethod = PaymentMethod.CASH
    receipt_number: Indexed(str, unique=True)  # type: ignore[valid-type]

    class Settings:
        name = "offering"
