"""Conflict detection between a proposed slot and a salon's active bookings"""

import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Booking
from .repository import BookingRepository
from .time_slots import normalize_time, slots_overlap

logger = logging.getLogger(__name__)


def find_conflict(
    db: Session,
    salon_id: str,
    booking_date: date,
    proposed_start: str,
    proposed_end: str,
    exclude_booking_id: Optional[str] = None,
) -> Optional[Booking]:
    """Return the first non-cancelled booking overlapping the proposed slot, if any"""
    start, end = normalize_time(proposed_start), normalize_time(proposed_end)
    candidates = BookingRepository.find_overlapping_bookings(
        db, salon_id, booking_date, start, end, exclude_booking_id=exclude_booking_id
    )
    # The query compares HH:MM strings; confirm in minutes before calling it a conflict
    for booking in candidates:
        if slots_overlap(booking.start_time, booking.end_time, start, end):
            return booking
    return None


def has_conflict(
    db: Session,
    salon_id: str,
    booking_date: date,
    proposed_start: str,
    proposed_end: str,
    exclude_booking_id: Optional[str] = None,
) -> bool:
    """
    Whether [proposed_start, proposed_end) overlaps an active booking of the salon
    on the same calendar day. Touching slots do not conflict; cancelled bookings
    and `exclude_booking_id` are ignored.
    """
    existing = find_conflict(
        db, salon_id, booking_date, proposed_start, proposed_end, exclude_booking_id
    )
    if existing:
        logger.info(
            f"⚠️ Slot {booking_date} {proposed_start}-{proposed_end} for salon {salon_id} "
            f"overlaps booking {existing.id} ({existing.start_time}-{existing.end_time})"
        )
        return True
    return False
