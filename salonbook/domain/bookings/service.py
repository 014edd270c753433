"""Booking service - Business logic for the booking workflow"""

import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from ...actors import Actor, Customer, SalonOwner
from ...errors import Conflict, Forbidden, NotFound, ValidationError
from ...models import Booking
from ...services.notification_service import BookingNotifier
from ...shared.clock import Clock, system_clock
from ...shared.validators import parse_calendar_date
from ...utils.sanitization import normalize_text
from ..catalog.service import CatalogService
from ..salons.service import SalonService
from .conflicts import has_conflict
from .lifecycle import INITIAL_STATUS, BookingAction, BookingStatus, next_status
from .repository import BookingRepository
from .schemas import BookingCreate, RescheduleRequest
from .time_slots import compute_end_time, normalize_time

logger = logging.getLogger(__name__)


def _require_customer(actor: Actor) -> Customer:
    if not isinstance(actor, Customer):
        raise Forbidden("Only customers can book appointments")
    return actor


class BookingService:
    """
    Service layer for the booking workflow.

    Every business rule is checked before anything is written; notifications
    go out after the commit and never fail the operation.
    """

    def __init__(self, db: Session, notifier: BookingNotifier, clock: Clock = system_clock):
        self.db = db
        self.notifier = notifier
        self.clock = clock
        self.repo = BookingRepository()
        self.salons = SalonService(db)
        self.catalog = CatalogService(db)

    def _future_date(self, value: str) -> date:
        """Parse a booking date and require it to be after today"""
        try:
            booking_date = parse_calendar_date(value)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        if booking_date <= self.clock().date():
            raise ValidationError("Booking date must be in the future")
        return booking_date

    def _get_booking(self, booking_id: str) -> Booking:
        booking = self.repo.get_booking_by_id(self.db, booking_id)
        if not booking:
            raise NotFound("Booking not found")
        return booking

    def _get_own_booking(self, booking_id: str, actor: Actor) -> Booking:
        """Booking the acting customer made"""
        booking = self._get_booking(booking_id)
        if not isinstance(actor, Customer) or booking.user_id != actor.user_id:
            logger.warning(f"⚠️ User {actor.user_id} attempted to modify booking {booking_id}")
            raise Forbidden("You don't have permission to modify this booking")
        return booking

    def _get_salon_booking(self, booking_id: str, actor: Actor) -> Booking:
        """Booking at a salon the acting owner manages"""
        booking = self._get_booking(booking_id)
        if not isinstance(actor, SalonOwner) or booking.salon.owner_id != actor.user_id:
            logger.warning(f"⚠️ User {actor.user_id} attempted to review booking {booking_id}")
            raise Forbidden("You don't have permission to manage this booking")
        return booking

    def _ensure_slot_free(
        self,
        salon_id: str,
        booking_date: date,
        start_time: str,
        end_time: str,
        exclude_booking_id: Optional[str] = None,
    ) -> None:
        # Held until commit/rollback so concurrent writers for the salon queue up here
        self.repo.lock_salon(self.db, salon_id)
        if has_conflict(
            self.db, salon_id, booking_date, start_time, end_time, exclude_booking_id
        ):
            self.db.rollback()
            raise Conflict("Time slot is already booked")

    # ------------------------------------------------------------------
    # Customer
    # ------------------------------------------------------------------

    async def create_booking(self, data: BookingCreate, actor: Actor) -> Booking:
        """Request a booking; it starts pending until the salon owner reviews it"""
        customer = _require_customer(actor)

        if not data.salonId or not data.serviceId or not data.bookingDate or not data.startTime:
            raise ValidationError(
                "All fields are required (salonId, serviceId, bookingDate, startTime)"
            )

        booking_date = self._future_date(data.bookingDate)
        start_time = normalize_time(data.startTime)
        try:
            notes = normalize_text(data.notes)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        salon = self.salons.get_salon(data.salonId)
        service = self.catalog.get_bookable_service(salon.id, data.serviceId)
        if not service:
            raise NotFound("Service not found")

        end_time = compute_end_time(start_time, service.duration)

        logger.info(
            f"📥 Booking request from {customer.user_id} for salon {salon.id} "
            f"on {booking_date} {start_time}-{end_time}"
        )
        self._ensure_slot_free(salon.id, booking_date, start_time, end_time)

        booking = self.repo.create_booking(
            self.db,
            user_id=customer.user_id,
            salon_id=salon.id,
            service_id=service.id,
            booking_date=booking_date,
            start_time=start_time,
            end_time=end_time,
            status=INITIAL_STATUS.value,
            notes=notes,
        )
        logger.info(f"✅ Booking {booking.id} created (pending)")

        await self.notifier.booking_created(booking)
        return booking

    def get_booking_history(self, actor: Actor) -> list[Booking]:
        customer = _require_customer(actor)
        return self.repo.get_customer_bookings(self.db, customer.user_id)

    async def cancel_booking(self, booking_id: str, actor: Actor) -> Booking:
        booking = self._get_own_booking(booking_id, actor)
        booking.status = next_status(booking.status, BookingAction.CANCEL).value
        booking = self.repo.save(self.db, booking)
        logger.info(f"✅ Booking {booking_id} cancelled by customer")

        await self.notifier.booking_cancelled(booking)
        return booking

    async def reschedule_booking(
        self, booking_id: str, data: RescheduleRequest, actor: Actor
    ) -> Booking:
        """Move a booking to a new slot; it goes back to pending for re-approval"""
        booking = self._get_own_booking(booking_id, actor)

        if not data.newBookingDate or not data.newStartTime:
            raise ValidationError("New booking date and start time are required")

        new_status = next_status(booking.status, BookingAction.RESCHEDULE)
        new_date = self._future_date(data.newBookingDate)
        new_start = normalize_time(data.newStartTime)
        # Duration comes from the service as it is now, even if soft-deleted since
        new_end = compute_end_time(new_start, booking.service.duration)

        self._ensure_slot_free(
            booking.salon_id, new_date, new_start, new_end, exclude_booking_id=booking.id
        )

        old_date, old_start = booking.booking_date.isoformat(), booking.start_time
        booking.booking_date = new_date
        booking.start_time = new_start
        booking.end_time = new_end
        booking.status = new_status.value
        booking = self.repo.save(self.db, booking)
        logger.info(
            f"✅ Booking {booking_id} rescheduled from {old_date} {old_start} "
            f"to {new_date} {new_start}"
        )

        await self.notifier.booking_rescheduled(booking, old_date, old_start)
        return booking

    def get_booking(self, booking_id: str, actor: Actor) -> Booking:
        """A booking is visible to the customer who made it and to the salon owner"""
        booking = self._get_booking(booking_id)
        is_customer = isinstance(actor, Customer) and booking.user_id == actor.user_id
        is_owner = isinstance(actor, SalonOwner) and booking.salon.owner_id == actor.user_id
        if not is_customer and not is_owner:
            raise Forbidden("You don't have permission to view this booking")
        return booking

    # ------------------------------------------------------------------
    # Salon owner
    # ------------------------------------------------------------------

    def get_salon_bookings(self, salon_id: str, actor: Actor) -> tuple[list[Booking], dict]:
        """Bookings of an owned salon plus a count per status"""
        self.salons.get_owned_salon(salon_id, actor)
        bookings = self.repo.get_salon_bookings(self.db, salon_id)

        summary = {status.value: 0 for status in BookingStatus}
        for booking in bookings:
            summary[booking.status] = summary.get(booking.status, 0) + 1
        return bookings, summary

    async def approve_booking(self, booking_id: str, actor: Actor) -> Booking:
        booking = self._get_salon_booking(booking_id, actor)
        booking.status = next_status(booking.status, BookingAction.APPROVE).value
        booking = self.repo.save(self.db, booking)
        logger.info(f"✅ Booking {booking_id} approved")

        await self.notifier.booking_approved(booking)
        return booking

    async def reject_booking(
        self, booking_id: str, reason: Optional[str], actor: Actor
    ) -> Booking:
        booking = self._get_salon_booking(booking_id, actor)
        new_status = next_status(booking.status, BookingAction.REJECT)
        try:
            reason = normalize_text(reason)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        booking.status = new_status.value
        booking.rejection_reason = reason
        booking = self.repo.save(self.db, booking)
        logger.info(f"⚠️ Booking {booking_id} rejected")

        await self.notifier.booking_rejected(booking, reason)
        return booking
