"""Salon repository - Database operations for salons"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Booking, Salon, Service


class SalonRepository:
    """Repository for salon database operations"""

    @staticmethod
    def get_salon_by_id(db: Session, salon_id: str) -> Optional[Salon]:
        return db.query(Salon).filter(Salon.id == salon_id).first()

    @staticmethod
    def get_salons(db: Session, status: Optional[str] = None) -> list[Salon]:
        """Get all salons, optionally filtered by approval status, newest first"""
        query = db.query(Salon).options(joinedload(Salon.owner))
        if status:
            query = query.filter(Salon.status == status)
        return query.order_by(Salon.created_at.desc()).all()

    @staticmethod
    def create_salon(db: Session, owner_id: str, **salon_data) -> Salon:
        salon = Salon(owner_id=owner_id, **salon_data)
        db.add(salon)
        db.commit()
        db.refresh(salon)
        return salon

    @staticmethod
    def update_salon(db: Session, salon: Salon, **updates) -> Salon:
        """Update a salon with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(salon, key):
                setattr(salon, key, value)

        db.commit()
        db.refresh(salon)
        return salon

    @staticmethod
    def count_bookings(db: Session, salon_id: str) -> int:
        return db.query(Booking).filter(Booking.salon_id == salon_id).count()

    @staticmethod
    def delete_salon(db: Session, salon: Salon) -> None:
        """Delete a salon together with its service catalog"""
        db.query(Service).filter(Service.salon_id == salon.id).delete(synchronize_session=False)
        db.delete(salon)
        db.commit()
