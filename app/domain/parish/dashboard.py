"""Admin dashboard statistics."""

import asyncio
from typing import Any

from pydantic import BaseModel

from app.domain.utils.clock import utc_now
from app.schemas import (
    BloodDonor,
    ContactMessage,
    FamilyUnit,
    GalleryImage,
    LiveStream,
    MessageStatus,
    NewsItem,
    Notification,
    Offering,
    ParishEvent,
    PrayerRequest,
    PrayerStatus,
    Thanksgiving,
    ThanksgivingStatus,
)


class StatusCounts(BaseModel):
    total: int
    pending: int
    approved: int


class DonorCounts(BaseModel):
    total: int
    available: int


class ActiveCounts(BaseModel):
    total: int
    active: int


class TotalCount(BaseModel):
    total: int


class MessageCounts(BaseModel):
    total: int
    new: int


class StreamCounts(BaseModel):
    total: int
    live: int
    published: int


class OfferingCounts(BaseModel):
    total: int
    amount: float


class EventCounts(BaseModel):
    total: int
    upcoming: int


class DashboardStats(BaseModel):
    prayer_requests: StatusCounts
    blood_bank: DonorCounts
    families: TotalCount
    news: ActiveCounts
    gallery: TotalCount
    messages: MessageCounts
    live_streams: StreamCounts
    notifications: ActiveCounts
    thanksgivings: StatusCounts
    offerings: OfferingCounts
    events: EventCounts


async def _count(model: Any, filters: dict[str, Any] | None = None) -> int:
    return await model.find(filters or {}).count()


async def _offering_total() -> float:
    totals = await Offering.aggregate(
        [{"$group": {"_id": None, "total": {"$sum": "$amount"}}}]
    ).to_list()
    return totals[0]["total"] if totals else 0.0


async def get_dashboard_stats() -> DashboardStats:
    (
        prayers_total,
        prayers_pending,
        prayers_approved,
        donors_total,
        donors_available,
        families_total,
        news_total,
        news_active,
        gallery_total,
        messages_total,
        messages_new,
        streams_total,
        streams_live,
        streams_published,
        notifications_total,
        notifications_active,
        thanksgivings_total,
        thanksgivings_pending,
        thanksgivings_approved,
        offerings_total,
        offerings_amount,
        events_total,
        events_upcoming,
    ) = await asyncio.gather(
        _count(PrayerRequest),
        _count(PrayerRequest, {"status": PrayerStatus.PENDING.value}),
        _count(PrayerRequest, {"status": PrayerStatus.APPROVED.value}),
        _count(BloodDonor),
        _count(BloodDonor, {"is_available": True}),
        _count(FamilyUnit),
        _count(NewsItem),
        _count(NewsItem, {"is_active": True}),
        _count(GalleryImage),
        _count(ContactMessage),
        _count(ContactMessage, {"status": MessageStatus.NEW.value}),
        _count(LiveStream),
        _count(LiveStream, {"is_live": True}),
        _count(LiveStream, {"is_published": True}),
        _count(Notification),
        _count(Notification, {"is_active": True}),
        _count(Thanksgiving),
        _count(Thanksgiving, {"status": ThanksgivingStatus.PENDING.value}),
        _count(Thanksgiving, {"status": ThanksgivingStatus.APPROVED.value}),
        _count(Offering),
        _offering_total(),
        _count(ParishEvent),
        _count(ParishEvent, {"date": {"$gte": utc_now()}}),
    )

    return DashboardStats(
        prayer_requests=StatusCounts(
            total=prayers_total, pending=prayers_pending, approved=prayers_approved
        ),
        blood_bank=DonorCounts(total=donors_total, available=donors_available),
        families=TotalCount(total=families_total),
        news=ActiveCounts(total=news_total, active=news_active),
        gallery=TotalCount(total=gallery_total),
        messages=MessageCounts(total=messages_total, new=messages_new),
        live_streams=StreamCounts(
            total=streams_total, live=streams_live, published=streams_published
        ),
        notifications=ActiveCounts(total=notifications_total, active=notifications_active),
        thanksgivings=StatusCounts(
            total=thanksgivings_total,
            pending=thanksgivings_pending,
            approved=thanksgivings_approved,
        ),
        offerings=OfferingCounts(total=offerings_total, amount=offerings_amount),
        events=EventCounts(total=events_total, upcoming=events_upcoming),
    )
