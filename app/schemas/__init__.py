"""Beanie ODM schemas for MongoDB collections."""

from .admin import Admin, AdminPermission, AdminRole
from .blood_donor import BloodDonor, BloodGroup, Gender
from .church import Church
from .committee_member import CommitteeMember
from .contact_message import ContactMessage, MessageStatus
from .family_unit import FamilyMember, FamilyUnit
from .gallery_image import GalleryImage, GalleryLabel
from .hero_slide import HeroSlide
from .live_stream import LiveStream
from .mass_timing import MassTiming
from .news_item import NewsItem
from .notification import Notification, NotificationPriority, NotificationType
from .offering import Offering, OfferingPurpose, PaymentMethod
from .parish_document import ParishDocument
from .parish_event import ParishEvent
from .prayer_request import PrayerRequest, PrayerStatus
from .social_link import SocialLink
from .stream_state import RecordingStatus, StreamState, StreamTag
from .thanksgiving import Thanksgiving, ThanksgivingStatus

DOCUMENT_MODELS = [
    Admin,
    BloodDonor,
    Church,
    CommitteeMember,
    ContactMessage,
    FamilyUnit,
    GalleryImage,
    HeroSlide,
    LiveStream,
    MassTiming,
    NewsItem,
    Notification,
    Offering,
    ParishDocument,
    ParishEvent,
    PrayerRequest,
    SocialLink,
    Thanksgiving,
]

__all__ = [
    "DOCUMENT_MODELS",
    "Admin",
    "AdminPermission",
    "AdminRole",
    "BloodDonor",
    "BloodGroup",
    "Church",
    "CommitteeMember",
    "ContactMessage",
    "FamilyMember",
    "FamilyUnit",
    "GalleryImage",
    "GalleryLabel",
    "Gender",
    "HeroSlide",
    "LiveStream",
    "MassTiming",
    "MessageStatus",
    "NewsItem",
    "Notification",
    "NotificationPriority",
    "NotificationType",
    "Offering",
    "OfferingPurpose",
    "ParishDocument",
    "ParishEvent",
    "PaymentMethod",
    "PrayerRequest",
    "PrayerStatus",
    "RecordingStatus",
    "SocialLink",
    "StreamState",
    "StreamTag",
    "Thanksgiving",
    "ThanksgivingStatus",
]
