"""Service catalog - Business logic for the services a salon offers"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...actors import Actor
from ...errors import NotFound, ValidationError
from ...models import Service
from ..salons.service import SalonService
from .repository import ServiceRepository
from .schemas import ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)


def _validate_price(price: float) -> None:
    if price < 0:
        raise ValidationError("Price must be >= 0")


def _validate_duration(duration: int) -> None:
    if duration < 1:
        raise ValidationError("Duration must be >= 1 minute")


class CatalogService:
    """Service layer for salon service catalogs"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ServiceRepository()
        self.salons = SalonService(db)

    def get_bookable_service(self, salon_id: str, service_id: str) -> Optional[Service]:
        """Lookup used by bookings; soft-deleted services count as missing"""
        return self.repo.get_active_service(self.db, salon_id, service_id)

    def get_services(self, salon_id: str) -> list[Service]:
        self.salons.get_salon(salon_id)
        return self.repo.get_services(self.db, salon_id)

    def get_service(self, salon_id: str, service_id: str) -> Service:
        self.salons.get_salon(salon_id)
        service = self.get_bookable_service(salon_id, service_id)
        if not service:
            raise NotFound("Service not found")
        return service

    def get_all_services(self, salon_id: str, actor: Actor) -> list[Service]:
        """All services including soft-deleted ones, for the salon owner"""
        self.salons.get_owned_salon(salon_id, actor)
        return self.repo.get_services(self.db, salon_id, include_deleted=True)

    def create_service(self, salon_id: str, data: ServiceCreate, actor: Actor) -> Service:
        self.salons.get_owned_salon(salon_id, actor)

        if not data.name or not data.description or data.price is None or data.duration is None:
            raise ValidationError(
                "All fields are required (name, description, price, duration)"
            )
        _validate_price(data.price)
        _validate_duration(data.duration)

        logger.info(f"📥 Creating service '{data.name}' for salon {salon_id}")
        return self.repo.create_service(
            self.db,
            salon_id,
            name=data.name.strip(),
            description=data.description.strip(),
            price=data.price,
            duration=data.duration,
            is_deleted=False,
        )

    def update_service(
        self, salon_id: str, service_id: str, data: ServiceUpdate, actor: Actor
    ) -> Service:
        self.salons.get_owned_salon(salon_id, actor)
        service = self.get_bookable_service(salon_id, service_id)
        if not service:
            raise NotFound("Service not found")

        if data.price is not None:
            _validate_price(data.price)
        if data.duration is not None:
            _validate_duration(data.duration)

        # Existing bookings keep the end time computed when they were made
        return self.repo.update_service(
            self.db,
            service,
            name=data.name,
            description=data.description,
            price=data.price,
            duration=data.duration,
        )

    def delete_service(self, salon_id: str, service_id: str, actor: Actor) -> dict:
        """Soft delete; the row stays for booking history"""
        self.salons.get_owned_salon(salon_id, actor)
        service = self.get_bookable_service(salon_id, service_id)
        if not service:
            raise NotFound("Service not found")

        self.repo.update_service(self.db, service, is_deleted=True)
        logger.info(f"✅ Service {service_id} soft-deleted from salon {salon_id}")
        return {"success": True, "message": "Service deleted successfully"}
