"""Service catalog router - FastAPI endpoints for salon services"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...actors import Actor
from ...auth import get_current_actor
from ...database import get_db
from ...models import Service
from .schemas import ServiceCreate, ServiceResponse, ServiceUpdate
from .service import CatalogService

router = APIRouter(prefix="/salons/{salon_id}/services", tags=["Services"])


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    """Dependency injection for CatalogService"""
    return CatalogService(db)


def service_response(service: Service) -> ServiceResponse:
    return ServiceResponse(
        id=service.id,
        salonId=service.salon_id,
        name=service.name,
        description=service.description,
        price=service.price,
        duration=service.duration,
        isDeleted=service.is_deleted,
        createdAt=service.created_at,
    )


@router.post("", response_model=ServiceResponse, status_code=201)
async def create_service(
    salon_id: str,
    data: ServiceCreate,
    actor: Actor = Depends(get_current_actor),
    catalog: CatalogService = Depends(get_catalog_service),
):
    return service_response(catalog.create_service(salon_id, data, actor))


@router.get("")
async def get_services(salon_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    """Active services of a salon (public)"""
    services = catalog.get_services(salon_id)
    return {
        "success": True,
        "count": len(services),
        "services": [service_response(s) for s in services],
    }


@router.get("/all")
async def get_all_services(
    salon_id: str,
    actor: Actor = Depends(get_current_actor),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Every service including soft-deleted ones (owner only)"""
    services = catalog.get_all_services(salon_id, actor)
    deleted_count = sum(1 for s in services if s.is_deleted)
    return {
        "success": True,
        "count": len(services),
        "activeCount": len(services) - deleted_count,
        "deletedCount": deleted_count,
        "services": [service_response(s) for s in services],
    }


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(
    salon_id: str, service_id: str, catalog: CatalogService = Depends(get_catalog_service)
):
    return service_response(catalog.get_service(salon_id, service_id))


@router.put("/{service_id}", response_model=ServiceResponse)
async def update_service(
    salon_id: str,
    service_id: str,
    data: ServiceUpdate,
    actor: Actor = Depends(get_current_actor),
    catalog: CatalogService = Depends(get_catalog_service),
):
    return service_response(catalog.update_service(salon_id, service_id, data, actor))


@router.delete("/{service_id}")
async def delete_service(
    salon_id: str,
    service_id: str,
    actor: Actor = Depends(get_current_actor),
    catalog: CatalogService = Depends(get_catalog_service),
):
    return catalog.delete_service(salon_id, service_id, actor)
