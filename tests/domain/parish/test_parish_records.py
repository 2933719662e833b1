"""Tests for parish record services against MongoDB."""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.parish import community, donors, families, messages, notices, offerings, worship
from app.domain.parish.dashboard import get_dashboard_stats
from app.domain.utils.clock import utc_now
from app.schemas import (
    BloodGroup,
    FamilyMember,
    Gender,
    NewsItem,
    NotificationPriority,
    PrayerStatus,
    ThanksgivingStatus,
)
from app.utils.app_errors import AppError, AppErrorCode


def donor_data(**overrides) -> dict:
    data = {
        "donor_name": "Joseph",
        "blood_group": BloodGroup.O_POS,
        "phone": "9876543210",
        "email": "joseph@example.com",
        "date_of_birth": datetime(1990, 5, 1, tzinfo=timezone.utc),
        "gender": Gender.MALE,
        "address": "Church Road",
    }
    data.update(overrides)
    return data


@pytest.mark.usefixtures("clear_collections")
class TestResourceService:
    async def test_get_invalid_id_is_not_found(self, beanie_db):
        with pytest.raises(AppError) as exc_info:
            await community.news.get("not-an-object-id")

        assert exc_info.value.errcode == AppErrorCode.E_NOT_FOUND.value
        assert exc_info.value.errmesg == "News not found"

    async def test_update_revalidates(self, beanie_db):
        item = await community.news.create({"title": "Feast", "content": "Details"})

        updated = await community.news.update(str(item.id), {"title": "Feast Day"})
        assert updated.title == "Feast Day"
        assert updated.content == "Details"

        with pytest.raises(AppError) as exc_info:
            await community.news.update(str(item.id), {"category": "Gossip"})
        assert exc_info.value.status_code == 422

    async def test_delete(self, beanie_db):
        item = await community.social_links.create({"platform": "YouTube", "url": "https://y.t"})

        await community.social_links.delete(str(item.id))

        assert await community.social_links.count() == 0


@pytest.mark.usefixtures("clear_collections")
class TestDonors:
    async def test_public_list_masks_contacts(self, beanie_db):
        await donors.donors.create(donor_data())
        await donors.donors.create(donor_data(donor_name="Away", is_available=False))

        public = await donors.list_public_donors()

        assert len(public) == 1
        assert public[0]["phone"] == "987****210"
        assert public[0]["email"] == "jos***@example.com"

    async def test_search_filters_recent_donors(self, beanie_db):
        await donors.donors.create(donor_data(donor_name="Eligible"))
        await donors.donors.create(
            donor_data(donor_name="Recent", last_donation=utc_now() - timedelta(days=10))
        )
        await donors.donors.create(donor_data(donor_name="Other", blood_group=BloodGroup.A_NEG))

        found = await donors.search_eligible_donors(BloodGroup.O_POS)

        assert [d["donor_name"] for d in found] == ["Eligible"]

    async def test_stats(self, beanie_db):
        await donors.donors.create(donor_data())
        await donors.donors.create(donor_data(is_available=False))
        await donors.donors.create(donor_data(blood_group=BloodGroup.B_POS))

        stats = await donors.donor_stats()

        assert stats["total_donors"] == 3
        assert stats["available_donors"] == 2
        by_group = {g["blood_group"]: g for g in stats["by_blood_group"]}
        assert by_group["O+"]["count"] == 2
        assert by_group["O+"]["available"] == 1


@pytest.mark.usefixtures("clear_collections")
class TestCommunity:
    async def test_news_pinned_first_and_views(self, beanie_db):
        now = utc_now()
        await community.news.create(
            {"title": "Old pinned", "content": "x", "is_pinned": True,
             "publish_date": now - timedelta(days=5)}
        )
        fresh = await community.news.create(
            {"title": "Fresh", "content": "x", "publish_date": now}
        )
        await community.news.create({"title": "Hidden", "content": "x", "is_active": False})

        listed = await community.list_public_news()
        assert [n.title for n in listed] == ["Old pinned", "Fresh"]

        await community.register_news_view(str(fresh.id))
        await community.register_news_view(str(fresh.id))
        saved = await NewsItem.get(fresh.id)
        assert saved is not None
        assert saved.views == 2

    async def test_hero_slides_capped(self, beanie_db):
        for i in range(community.MAX_HERO_SLIDES):
            await community.create_hero_slide({"image_url": f"/uploads/s{i}.jpg"})

        with pytest.raises(AppError) as exc_info:
            await community.create_hero_slide({"image_url": "/uploads/extra.jpg"})

        assert exc_info.value.errmesg == "Maximum 5 slider images allowed"


@pytest.mark.usefixtures("clear_collections")
class TestMessages:
    async def test_contact_requires_all_fields(self, beanie_db):
        with pytest.raises(AppError) as exc_info:
            await messages.submit_contact("Ann", "", "Hi", "Hello")
        assert exc_info.value.errmesg == "All fields are required"

        with pytest.raises(AppError) as exc_info:
            await messages.submit_contact("Ann", "bad-email", "Hi", "Hello")
        assert exc_info.value.errmesg == "Invalid email address"

    async def test_prayer_request_validation(self, beanie_db):
        with pytest.raises(AppError):
            await messages.submit_prayer_request("Ann", "ann@x.org", "9876543210", "short")
        with pytest.raises(AppError):
            await messages.submit_prayer_request(
                "Ann", "ann@x.org", "123", "Please pray for my family"
            )

    async def test_public_prayers_hide_anonymous(self, beanie_db):
        item = await messages.submit_prayer_request(
            "Ann", "ann@x.org", "9876543210", "Please pray for my family", is_anonymous=True
        )
        await messages.submit_prayer_request(
            "Ben", "ben@x.org", "9876543211", "Please pray for my health"
        )
        await messages.prayer_requests.update(str(item.id), {"status": PrayerStatus.APPROVED})

        public = await messages.list_public_prayers()

        assert len(public) == 1
        assert public[0]["name"] == "Anonymous"
        assert public[0]["email"] == ""
        assert public[0]["phone"] == "987****210"


    async def test_thanksgivings_public_only_when_approved(self, beanie_db):
        item = await messages.submit_thanksgiving(
            "Ann", "Ann@X.org", "Thank you for the healing", is_anonymous=True
        )
        await messages.submit_thanksgiving("Ben", "ben@x.org", "Thank you for the new job")
        assert item.email == "ann@x.org"
        assert await messages.list_public_thanksgivings() == []

        await messages.thanksgivings.update(
            str(item.id), {"status": ThanksgivingStatus.APPROVED}
        )
        public = await messages.list_public_thanksgivings()

        assert len(public) == 1
        assert public[0]["name"] == "Anonymous"
        assert public[0]["email"] == ""

    async def test_thanksgiving_requires_valid_email(self, beanie_db):
        with pytest.raises(AppError) as exc_info:
            await messages.submit_thanksgiving("Ann", "not-an-email", "Thanks")

        assert exc_info.value.errmesg == "Invalid email address"


@pytest.mark.usefixtures("clear_collections")
class TestNotices:
    async def test_active_notifications_by_priority(self, beanie_db):
        now = utc_now()
        await notices.notifications.create(
            {"title": "Low", "message": "x", "priority": NotificationPriority.LOW}
        )
        await notices.notifications.create(
            {"title": "High", "message": "x", "priority": NotificationPriority.HIGH}
        )
        await notices.notifications.create(
            {"title": "Expired", "message": "x", "expiry_date": now - timedelta(days=1)}
        )
        await notices.notifications.create(
            {"title": "Open", "message": "x", "expiry_date": now + timedelta(days=1)}
        )
        await notices.notifications.create({"title": "Off", "message": "x", "is_active": False})

        active = await notices.list_active_notifications()

        assert [n.title for n in active] == ["High", "Open", "Low"]

    async def test_events_soonest_first(self, beanie_db):
        now = utc_now()
        await notices.create_event(
            {"title": "Later", "date": now + timedelta(days=9), "time": "10:00", "location": "Hall"}
        )
        await notices.create_event(
            {"title": "Soon", "date": now + timedelta(days=1), "time": "10:00", "location": "Hall"}
        )

        listed = await notices.events.list()

        assert [e.title for e in listed] == ["Soon", "Later"]

    async def test_event_blank_location_rejected(self, beanie_db):
        with pytest.raises(AppError) as exc_info:
            await notices.create_event(
                {"title": "Feast", "date": utc_now(), "time": "17:00", "location": " "}
            )

        assert exc_info.value.status_code == 400


@pytest.mark.usefixtures("clear_collections")
class TestOfferings:
    async def test_receipt_numbers_are_sequential(self, beanie_db):
        first = await offerings.record_offering({"donor_name": "Joseph", "amount": 100})
        second = await offerings.record_offering({"donor_name": "Mary", "amount": 50})

        year = utc_now().year
        assert first.receipt_number == f"VND{year}00001"
        assert second.receipt_number == f"VND{year}00002"

    async def test_receipt_skips_numbers_still_issued(self, beanie_db):
        first = await offerings.record_offering({"donor_name": "Joseph", "amount": 100})
        await offerings.record_offering({"donor_name": "Mary", "amount": 50})
        await offerings.offerings.delete(str(first.id))

        third = await offerings.record_offering({"donor_name": "Anna", "amount": 10})

        assert third.receipt_number.endswith("00003")

    async def test_receipt_lookup_hides_anonymous_donor(self, beanie_db):
        item = await offerings.record_offering(
            {"donor_name": "Joseph", "amount": 100, "is_anonymous": True}
        )

        found = await offerings.find_by_receipt(item.receipt_number)

        assert found["donor_name"] == "Anonymous"
        assert found["amount"] == 100
        with pytest.raises(AppError) as exc_info:
            await offerings.find_by_receipt("VND000")
        assert exc_info.value.errmesg == "Offering not found"

    async def test_stats_by_purpose(self, beanie_db):
        await offerings.record_offering({"donor_name": "A", "amount": 100, "purpose": "Mission"})
        await offerings.record_offering({"donor_name": "B", "amount": 300})
        await offerings.record_offering({"donor_name": "C", "amount": 50, "purpose": "Mission"})

        stats = await offerings.offering_stats()

        assert stats["total_offerings"] == 3
        assert stats["total_amount"] == 450
        assert [g["purpose"] for g in stats["by_purpose"]] == ["General", "Mission"]
        assert stats["by_purpose"][1]["count"] == 2


@pytest.mark.usefixtures("clear_collections")
class TestWorship:
    async def test_mass_timing_requires_church(self, beanie_db):
        with pytest.raises(AppError) as exc_info:
            await worship.create_mass_timing(
                {"church_id": "665f1c2e9b1e8a0012345678", "day": "Sunday", "time": "07:00"}
            )
        assert exc_info.value.status_code == 400

    async def test_mass_timings_by_church(self, beanie_db):
        church = await worship.churches.create({"name": "St. Mary"})
        other = await worship.churches.create({"name": "St. Joseph"})
        await worship.create_mass_timing({"church_id": church.id, "day": "Sunday", "time": "07:00"})
        await worship.create_mass_timing({"church_id": other.id, "day": "Sunday", "time": "09:00"})

        timings = await worship.list_mass_timings(str(church.id))

        assert [t.time for t in timings] == ["07:00"]


@pytest.mark.usefixtures("clear_collections")
class TestFamilies:
    async def test_member_ages_computed_on_save(self, beanie_db):
        family = await families.create_family(
            {"family_name": "Kollamparambil", "head_of_family": "Thomas", "phone": "9876543210"}
        )
        dob = datetime(utc_now().year - 20, 1, 1, tzinfo=timezone.utc)
        member = FamilyMember(name="Anna", gender=Gender.FEMALE, dob=dob, relationship="Daughter")

        family = await families.add_member(family, member)

        assert family.members[0].age == 20
        assert family.register_no

        masked = families.masked_family(family)
        assert masked["phone"] == "987****210"
        assert "password_hash" not in masked

    async def test_remove_unknown_member(self, beanie_db):
        family = await families.create_family(
            {"family_name": "Puthenpura", "head_of_family": "Mathew", "phone": "9876500000"}
        )

        with pytest.raises(AppError) as exc_info:
            await families.remove_member(family, "missing")

        assert exc_info.value.errmesg == "Member not found"


@pytest.mark.usefixtures("clear_collections")
class TestDashboard:
    async def test_counts(self, beanie_db):
        await donors.donors.create(donor_data())
        await community.news.create({"title": "Feast", "content": "x"})

        stats = await get_dashboard_stats()

        assert stats.blood_bank.total == 1
        assert stats.blood_bank.available == 1
        assert stats.news.active == 1
        assert stats.live_streams.live == 0
        assert stats.offerings.total == 0
        assert stats.offerings.amount == 0
