"""Service catalog repository"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Service


class ServiceRepository:
    """Repository for salon service database operations"""

    @staticmethod
    def get_active_service(db: Session, salon_id: str, service_id: str) -> Optional[Service]:
        """Get a service of the salon unless it has been soft-deleted"""
        return (
            db.query(Service)
            .filter(
                Service.id == service_id,
                Service.salon_id == salon_id,
                Service.is_deleted.is_(False),
            )
            .first()
        )

    @staticmethod
    def get_services(db: Session, salon_id: str, include_deleted: bool = False) -> list[Service]:
        query = db.query(Service).filter(Service.salon_id == salon_id)
        if not include_deleted:
            query = query.filter(Service.is_deleted.is_(False))
        return query.order_by(Service.created_at.asc()).all()

    @staticmethod
    def create_service(db: Session, salon_id: str, **service_data) -> Service:
        service = Service(salon_id=salon_id, **service_data)
        db.add(service)
        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def update_service(db: Session, service: Service, **updates) -> Service:
        """Update a service with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(service, key):
                setattr(service, key, value)

        db.commit()
        db.refresh(service)
        return service
