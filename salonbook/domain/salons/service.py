"""Salon service - Business logic for salon registration, hours and admin review"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...actors import Actor, Admin, SalonOwner
from ...errors import Forbidden, InvalidTransition, NotFound, ValidationError
from ...models import Salon, SalonStatus, generate_id
from ...shared.validators import parse_calendar_date, validate_day_name, validate_email
from ..bookings.time_slots import normalize_time, to_minutes
from .repository import SalonRepository
from .schemas import HolidayCreate, SalonCreate, WorkingHoursEntry

logger = logging.getLogger(__name__)


def normalize_working_hours(entries: list[WorkingHoursEntry]) -> list[dict]:
    """Validate a weekly schedule and return it in storage form"""
    seen = set()
    normalized = []
    for entry in entries:
        try:
            day = validate_day_name(entry.day)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        if day in seen:
            raise ValidationError(f"Working hours for {day} given more than once")
        seen.add(day)

        if not entry.isOpen:
            normalized.append({"day": day, "isOpen": False})
            continue

        if not entry.openingTime or not entry.closingTime:
            raise ValidationError(f"Opening and closing times are required for {day}")
        opening = normalize_time(entry.openingTime)
        closing = normalize_time(entry.closingTime)
        if to_minutes(opening) >= to_minutes(closing):
            raise ValidationError(f"Opening time must be before closing time on {day}")
        normalized.append(
            {"day": day, "isOpen": True, "openingTime": opening, "closingTime": closing}
        )
    return normalized


class SalonService:
    """Service layer for salon business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SalonRepository()

    def get_salons(self, status: Optional[str] = None) -> list[Salon]:
        """Get all salons; an unrecognised status filter is ignored"""
        if status not in {s.value for s in SalonStatus}:
            status = None
        return self.repo.get_salons(self.db, status)

    def get_salon(self, salon_id: str) -> Salon:
        salon = self.repo.get_salon_by_id(self.db, salon_id)
        if not salon:
            raise NotFound("Salon not found")
        return salon

    def get_owned_salon(self, salon_id: str, actor: Actor) -> Salon:
        """Get a salon the acting owner manages"""
        salon = self.get_salon(salon_id)
        if not isinstance(actor, SalonOwner) or salon.owner_id != actor.user_id:
            logger.warning(f"⚠️ User {actor.user_id} attempted to manage salon {salon_id}")
            raise Forbidden("You don't have permission to manage this salon")
        return salon

    def create_salon(self, data: SalonCreate, actor: Actor) -> Salon:
        """Register a new salon; it starts pending admin approval"""
        if not isinstance(actor, SalonOwner):
            raise Forbidden("Only salon owners can register a salon")

        if not data.salonName or not data.location or not data.phone or not data.email:
            raise ValidationError("All fields are required (salonName, location, phone, email)")

        try:
            email = validate_email(data.email)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        working_hours = normalize_working_hours(data.workingHours or [])

        logger.info(f"📥 Creating salon for owner {actor.user_id}")
        return self.repo.create_salon(
            self.db,
            actor.user_id,
            salon_name=data.salonName.strip(),
            location=data.location.strip(),
            phone=data.phone.strip(),
            email=email,
            description=data.description,
            status=SalonStatus.PENDING.value,
            working_hours=working_hours,
            holidays=[],
        )

    def delete_salon(self, salon_id: str, actor: Actor) -> dict:
        salon = self.get_salon(salon_id)
        is_owner = isinstance(actor, SalonOwner) and salon.owner_id == actor.user_id
        if not is_owner and not isinstance(actor, Admin):
            raise Forbidden("You don't have permission to delete this salon")

        # Bookings are kept for history, so a salon that has any cannot go away
        if self.repo.count_bookings(self.db, salon.id):
            raise InvalidTransition("Salon has bookings and cannot be deleted")

        self.repo.delete_salon(self.db, salon)
        logger.info(f"✅ Salon {salon_id} deleted by {actor.user_id}")
        return {"message": "Salon deleted"}

    # ------------------------------------------------------------------
    # Working hours & holidays
    # ------------------------------------------------------------------

    def set_working_hours(
        self, salon_id: str, entries: list[WorkingHoursEntry], actor: Actor
    ) -> Salon:
        salon = self.get_owned_salon(salon_id, actor)
        working_hours = normalize_working_hours(entries)
        # Assign a new list so the JSON column is flagged dirty
        salon.working_hours = working_hours
        self.db.commit()
        self.db.refresh(salon)
        return salon

    def get_working_hours(self, salon_id: str) -> list[dict]:
        return list(self.get_salon(salon_id).working_hours or [])

    def add_holiday(self, salon_id: str, data: HolidayCreate, actor: Actor) -> dict:
        salon = self.get_owned_salon(salon_id, actor)
        if not data.date or not data.description:
            raise ValidationError("Holiday date and description are required")
        try:
            holiday_date = parse_calendar_date(data.date)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        holiday = {
            "id": generate_id(),
            "date": holiday_date.isoformat(),
            "description": data.description.strip(),
        }
        salon.holidays = [*(salon.holidays or []), holiday]
        self.db.commit()
        return holiday

    def get_holidays(self, salon_id: str, actor: Actor) -> list[dict]:
        salon = self.get_owned_salon(salon_id, actor)
        return sorted(salon.holidays or [], key=lambda h: h["date"])

    def delete_holiday(self, salon_id: str, holiday_id: str, actor: Actor) -> dict:
        salon = self.get_owned_salon(salon_id, actor)
        remaining = [h for h in salon.holidays or [] if h.get("id") != holiday_id]
        if len(remaining) == len(salon.holidays or []):
            raise NotFound("Holiday not found")
        salon.holidays = remaining
        self.db.commit()
        return {"message": "Holiday deleted"}

    # ------------------------------------------------------------------
    # Admin review
    # ------------------------------------------------------------------

    def approve_salon(self, salon_id: str) -> Salon:
        salon = self.get_salon(salon_id)
        if salon.status == SalonStatus.APPROVED.value:
            raise InvalidTransition("Salon is already approved")
        logger.info(f"✅ Salon {salon_id} approved")
        return self.repo.update_salon(self.db, salon, status=SalonStatus.APPROVED.value)

    def block_salon(self, salon_id: str) -> Salon:
        salon = self.get_salon(salon_id)
        logger.info(f"⚠️ Salon {salon_id} blocked")
        return self.repo.update_salon(self.db, salon, status=SalonStatus.BLOCKED.value)

    def reactivate_salon(self, salon_id: str) -> Salon:
        """Send a salon back to pending for re-review"""
        salon = self.get_salon(salon_id)
        return self.repo.update_salon(self.db, salon, status=SalonStatus.PENDING.value)
