"""Request bodies for parish record endpoints.

`*Update` models carry only optional fields; routers pass
`model_dump(exclude_unset=True)` so omitted fields are left untouched.
"""

from datetime import datetime

from beanie import PydanticObjectId
from pydantic import BaseModel, Field

from app.schemas import (
    BloodGroup,
    Gender,
    GalleryLabel,
    MessageStatus,
    NotificationPriority,
    NotificationType,
    OfferingPurpose,
    PaymentMethod,
    PrayerStatus,
    ThanksgivingStatus,
)
from app.schemas.church import GeoPoint
from app.schemas.mass_timing import MassType, Weekday
from app.schemas.news_item import NewsCategory
from app.schemas.parish_document import DocumentCategory


class BloodDonorCreate(BaseModel):
    donor_name: str
    blood_group: BloodGroup
    phone: str
    email: str
    date_of_birth: datetime
    age: int | None = None
    gender: Gender
    last_donation: datetime | None = None
    is_available: bool = True
    address: str


class BloodDonorUpdate(BaseModel):
    donor_name: str | None = None
    blood_group: BloodGroup | None = None
    phone: str | None = None
    email: str | None = None
    date_of_birth: datetime | None = None
    age: int | None = None
    gender: Gender | None = None
    last_donation: datetime | None = None
    is_available: bool | None = None
    address: str | None = None


class ChurchCreate(BaseModel):
    name: str
    description: str = ""
    history: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    location: GeoPoint | None = None
    images: list[str] = []


class ChurchUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
    history: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    location: GeoPoint | None = None
    images: list[str] | None = None


class MassTimingCreate(BaseModel):
    church_id: PydanticObjectId
    day: Weekday | None = None
    date: datetime | None = None
    time: str
    language: str = "Malayalam"
    type: MassType = MassType.REGULAR
    description: str | None = None
    is_active: bool = True


class MassTimingUpdate(BaseModel):
    church_id: PydanticObjectId | None = None
    day: Weekday | None = None
    date: datetime | None = None
    time: str | None = None
    language: str | None = None
    type: MassType | None = None
    description: str | None = None
    is_active: bool | None = None


class CommitteeMemberCreate(BaseModel):
    name: str
    position: str
    role: str = "Member"
    photo_url: str | None = None
    email: str | None = None
    phone: str | None = None
    bio: str | None = None
    join_date: datetime | None = None
    is_active: bool = True
    display_order: int = 0


class CommitteeMemberUpdate(BaseModel):
    name: str | None = None
    position: str | None = None
    role: str | None = None
    photo_url: str | None = None
    email: str | None = None
    phone: str | None = None
    bio: str | None = None
    join_date: datetime | None = None
    is_active: bool | None = None
    display_order: int | None = None


class DocumentUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    category: DocumentCategory | None = None
    tags: list[str] | None = None
    upload_date: datetime | None = None


class GalleryImageCreate(BaseModel):
    image_url: str
    category: str
    label: GalleryLabel | None = None
    description: str | None = None
    date_taken: datetime | None = None
    location: str | None = None


class GalleryImageUpdate(BaseModel):
    image_url: str | None = None
    category: str | None = None
    label: GalleryLabel | None = None
    description: str | None = None
    date_taken: datetime | None = None
    location: str | None = None


class HeroSlideCreate(BaseModel):
    image_url: str
    display_order: int = 0
    is_active: bool = True


class HeroSlideUpdate(BaseModel):
    image_url: str | None = None
    display_order: int | None = None
    is_active: bool | None = None


class NewsCreate(BaseModel):
    title: str
    content: str
    excerpt: str = ""
    image_url: str | None = None
    bible_verse: str | None = None
    category: NewsCategory = NewsCategory.GENERAL
    author: str = "Parish Office"
    publish_date: datetime | None = None
    is_active: bool = True
    is_pinned: bool = False


class NewsUpdate(BaseModel):
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    image_url: str | None = None
    bible_verse: str | None = None
    category: NewsCategory | None = None
    author: str | None = None
    publish_date: datetime | None = None
    is_active: bool | None = None
    is_pinned: bool | None = None


class SocialLinkCreate(BaseModel):
    platform: str
    url: str
    icon: str = ""
    is_active: bool = True


class SocialLinkUpdate(BaseModel):
    platform: str | None = None
    url: str | None = None
    icon: str | None = None
    is_active: bool | None = None


class ContactIn(BaseModel):
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""


class ContactStatusIn(BaseModel):
    status: MessageStatus


class PrayerRequestIn(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    request: str = ""
    is_anonymous: bool = False


class PrayerStatusIn(BaseModel):
    status: PrayerStatus


class ThanksgivingIn(BaseModel):
    name: str = ""
    email: str = ""
    message: str = ""
    is_anonymous: bool = False


class ThanksgivingStatusIn(BaseModel):
    status: ThanksgivingStatus


class NotificationCreate(BaseModel):
    title: str
    message: str
    type: NotificationType = NotificationType.GENERAL
    priority: NotificationPriority = NotificationPriority.MEDIUM
    is_active: bool = True
    expiry_date: datetime | None = None


class NotificationUpdate(BaseModel):
    title: str | None = None
    message: str | None = None
    type: NotificationType | None = None
    priority: NotificationPriority | None = None
    is_active: bool | None = None
    expiry_date: datetime | None = None


class OfferingCreate(BaseModel):
    donor_name: str
    amount: float = Field(ge=0)
    purpose: OfferingPurpose = OfferingPurpose.GENERAL
    date: datetime | None = None
    is_anonymous: bool = False
    payment_method: PaymentMethod = PaymentMethod.CASH


class EventCreate(BaseModel):
    title: str
    description: str = ""
    date: datetime
    time: str
    location: str


class EventUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    date: datetime | None = None
    time: str | None = None
    location: str | None = None


class FamilyMemberIn(BaseModel):
    name: str
    gender: Gender
    dob: datetime
    relationship: str
    education: str | None = None
    occupation: str | None = None
    blood_group: str | None = None
    mobile: str | None = None
    email: str | None = None
    baptism_date: datetime | None = None
    marriage_date: datetime | None = None


class FamilyMemberUpdate(BaseModel):
    name: str | None = None
    gender: Gender | None = None
    dob: datetime | None = None
    relationship: str | None = None
    education: str | None = None
    occupation: str | None = None
    blood_group: str | None = None
    mobile: str | None = None
    email: str | None = None
    baptism_date: datetime | None = None
    marriage_date: datetime | None = None


class FamilyUnitCreate(BaseModel):
    register_no: str | None = None
    family_name: str
    house_name: str = ""
    head_of_family: str
    head_dob: datetime | None = None
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
    phone: str
    whatsapp: str | None = None
    email: str | None = None
    members: list[FamilyMemberIn] = Field(default_factory=list)
    active: bool = True


class FamilyUnitUpdate(BaseModel):
    family_name: str | None = None
    house_name: str | None = None
    head_of_family: str | None = None
    head_dob: datetime | None = None
    head_blood_group: str | None = None
    head_occupation: str | None = None
    head_education: str | None = None
    parish_unit: str | None = None
    kara: str | None = None
    village: str | None = None
    post_office: str | None = None
    pincode: str | None = None
    panchayat: str | None = None
    district: str | None = None
    address: str | None = None
    phone: str | None = None
    whatsapp: str | None = None
    email: str | None = None
    members: list[FamilyMemberIn] | None = None
    active: bool | None = None
