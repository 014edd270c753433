"""Booking repository - Database operations for bookings"""

from datetime import date, timedelta
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Booking, Salon
from .lifecycle import BookingStatus


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def create_booking(db: Session, **booking_data) -> Booking:
        """Create a new booking"""
        booking = Booking(**booking_data)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def save(db: Session, booking: Booking) -> Booking:
        """Persist changes made to a booking in a single write"""
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: str) -> Optional[Booking]:
        """Get a booking with its salon, service and customer loaded"""
        return (
            db.query(Booking)
            .options(
                joinedload(Booking.salon),
                joinedload(Booking.service),
                joinedload(Booking.customer),
            )
            .filter(Booking.id == booking_id)
            .first()
        )

    @staticmethod
    def get_customer_bookings(db: Session, user_id: str) -> list[Booking]:
        """All bookings of a customer, newest booking date first"""
        return (
            db.query(Booking)
            .options(joinedload(Booking.salon), joinedload(Booking.service))
            .filter(Booking.user_id == user_id)
            .order_by(Booking.booking_date.desc(), Booking.start_time.desc())
            .all()
        )

    @staticmethod
    def get_salon_bookings(db: Session, salon_id: str) -> list[Booking]:
        """All bookings of a salon, newest booking date first"""
        return (
            db.query(Booking)
            .options(joinedload(Booking.customer), joinedload(Booking.service))
            .filter(Booking.salon_id == salon_id)
            .order_by(Booking.booking_date.desc(), Booking.start_time.desc())
            .all()
        )

    @staticmethod
    def find_overlapping_bookings(
        db: Session,
        salon_id: str,
        booking_date: date,
        start_time: str,
        end_time: str,
        exclude_booking_id: Optional[str] = None,
    ) -> list[Booking]:
        """
        Active bookings of the salon on that calendar day whose slot overlaps
        [start_time, end_time). Times are zero-padded HH:MM so string order is time order.
        """
        query = db.query(Booking).filter(
            Booking.salon_id == salon_id,
            Booking.booking_date >= booking_date,
            Booking.booking_date < booking_date + timedelta(days=1),
            Booking.status != BookingStatus.CANCELLED.value,
            Booking.start_time < end_time,
            Booking.end_time > start_time,
        )
        if exclude_booking_id is not None:
            query = query.filter(Booking.id != exclude_booking_id)
        return query.order_by(Booking.start_time.asc()).all()

    @staticmethod
    def lock_salon(db: Session, salon_id: str) -> Optional[Salon]:
        """
        Take a row lock on the salon for the rest of the transaction so concurrent
        writers for the same salon serialise between conflict check and insert.
        No-op on SQLite.
        """
        return db.query(Salon).filter(Salon.id == salon_id).with_for_update().first()
