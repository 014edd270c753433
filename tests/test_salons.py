"""Tests for salon registration, working hours, holidays and admin review."""

import pytest

from salonbook.actors import Admin, Customer, SalonOwner
from salonbook.domain.salons.schemas import HolidayCreate, SalonCreate, WorkingHoursEntry
from salonbook.domain.salons.service import SalonService, normalize_working_hours
from salonbook.errors import (
    Forbidden,
    InvalidTimeFormat,
    InvalidTransition,
    NotFound,
    ValidationError,
)
from salonbook.models import Salon, Service


@pytest.fixture
def salons(db):
    return SalonService(db)


@pytest.fixture
def owner(users):
    return SalonOwner(users["owner"].id)


class TestNormalizeWorkingHours:
    """Tests for normalize_working_hours()."""

    def test_open_and_closed_days(self):
        result = normalize_working_hours(
            [
                WorkingHoursEntry(day="monday", openingTime="09:00", closingTime="17:30"),
                WorkingHoursEntry(day="Sunday", isOpen=False),
            ]
        )
        assert result == [
            {"day": "Monday", "isOpen": True, "openingTime": "09:00", "closingTime": "17:30"},
            {"day": "Sunday", "isOpen": False},
        ]

    def test_invalid_day_name(self):
        with pytest.raises(ValidationError, match="Invalid day name"):
            normalize_working_hours(
                [WorkingHoursEntry(day="Funday", openingTime="09:00", closingTime="17:00")]
            )

    def test_duplicate_day(self):
        with pytest.raises(ValidationError):
            normalize_working_hours(
                [
                    WorkingHoursEntry(day="Monday", isOpen=False),
                    WorkingHoursEntry(day="monday", isOpen=False),
                ]
            )

    def test_open_day_needs_times(self):
        with pytest.raises(ValidationError):
            normalize_working_hours([WorkingHoursEntry(day="Tuesday", openingTime="09:00")])

    def test_opening_must_precede_closing(self):
        with pytest.raises(ValidationError):
            normalize_working_hours(
                [WorkingHoursEntry(day="Tuesday", openingTime="18:00", closingTime="09:00")]
            )

    def test_bad_time_format(self):
        with pytest.raises(InvalidTimeFormat):
            normalize_working_hours(
                [WorkingHoursEntry(day="Tuesday", openingTime="9", closingTime="17:00")]
            )


class TestSalonRegistration:
    """Tests for create/list/get/delete."""

    def test_create_starts_pending(self, salons, owner):
        salon = salons.create_salon(
            SalonCreate(
                salonName=" Curl Up ",
                location="1 Main St",
                phone="555-0111",
                email="Curl@Example.com",
            ),
            owner,
        )
        assert salon.status == "pending"
        assert salon.owner_id == owner.user_id
        assert salon.salon_name == "Curl Up"
        assert salon.email == "curl@example.com"

    def test_create_requires_fields(self, salons, owner):
        with pytest.raises(ValidationError):
            salons.create_salon(SalonCreate(salonName="Curl Up"), owner)

    def test_create_rejects_bad_email(self, salons, owner):
        with pytest.raises(ValidationError):
            salons.create_salon(
                SalonCreate(salonName="A", location="B", phone="C", email="nope"), owner
            )

    def test_only_owners_register(self, salons, users):
        with pytest.raises(Forbidden):
            salons.create_salon(
                SalonCreate(salonName="A", location="B", phone="C", email="a@b.com"),
                Customer(users["customer"].id),
            )

    def test_list_with_status_filter(self, salons, salon, owner):
        salons.create_salon(
            SalonCreate(salonName="New", location="X", phone="1", email="n@example.com"), owner
        )
        assert [s.id for s in salons.get_salons("approved")] == [salon.id]
        assert len(salons.get_salons("pending")) == 1
        assert len(salons.get_salons("bogus")) == 2

    def test_get_unknown(self, salons, users):
        with pytest.raises(NotFound):
            salons.get_salon("missing")

    def test_delete_removes_catalog(self, salons, db, salon, haircut, owner):
        salons.delete_salon(salon.id, owner)
        assert db.query(Salon).count() == 0
        assert db.query(Service).count() == 0

    def test_delete_refused_with_bookings(self, salons, salon, make_booking, owner):
        make_booking()
        with pytest.raises(InvalidTransition):
            salons.delete_salon(salon.id, owner)

    def test_admin_may_delete(self, salons, db, salon, users):
        salons.delete_salon(salon.id, Admin(users["admin"].id))
        assert db.query(Salon).count() == 0

    def test_other_owner_may_not_delete(self, salons, salon, users):
        with pytest.raises(Forbidden):
            salons.delete_salon(salon.id, SalonOwner(users["other_owner"].id))


class TestHoursAndHolidays:
    """Tests for working hours and holidays."""

    def test_set_working_hours_replaces(self, salons, salon, owner):
        salons.set_working_hours(
            salon.id, [WorkingHoursEntry(day="Friday", openingTime="10:00", closingTime="20:00")], owner
        )
        salons.set_working_hours(salon.id, [WorkingHoursEntry(day="Saturday", isOpen=False)], owner)
        assert salons.get_working_hours(salon.id) == [{"day": "Saturday", "isOpen": False}]

    def test_set_working_hours_other_owner(self, salons, salon, users):
        with pytest.raises(Forbidden):
            salons.set_working_hours(salon.id, [], SalonOwner(users["other_owner"].id))

    def test_holidays_round_trip(self, salons, salon, owner):
        christmas = salons.add_holiday(
            salon.id, HolidayCreate(date="2026-12-25", description="Christmas"), owner
        )
        salons.add_holiday(salon.id, HolidayCreate(date="2026-07-04", description="Summer"), owner)
        assert [h["date"] for h in salons.get_holidays(salon.id, owner)] == [
            "2026-07-04",
            "2026-12-25",
        ]

        salons.delete_holiday(salon.id, christmas["id"], owner)
        assert [h["description"] for h in salons.get_holidays(salon.id, owner)] == ["Summer"]

    def test_holiday_bad_date(self, salons, salon, owner):
        with pytest.raises(ValidationError):
            salons.add_holiday(salon.id, HolidayCreate(date="25/12/2026", description="X"), owner)

    def test_delete_unknown_holiday(self, salons, salon, owner):
        with pytest.raises(NotFound):
            salons.delete_holiday(salon.id, "missing", owner)


class TestAdminReview:
    """Tests for approve/block/reactivate."""

    def test_approve_pending(self, salons, db, salon):
        salon.status = "pending"
        db.commit()
        assert salons.approve_salon(salon.id).status == "approved"

    def test_approve_twice_refused(self, salons, salon):
        with pytest.raises(InvalidTransition):
            salons.approve_salon(salon.id)

    def test_block_and_reactivate(self, salons, salon):
        assert salons.block_salon(salon.id).status == "blocked"
        assert salons.reactivate_salon(salon.id).status == "pending"
