"""Salon router - FastAPI endpoints for salons and admin review"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...actors import Actor, Admin
from ...auth import get_current_actor, require_admin
from ...database import get_db
from ...models import Salon
from .schemas import (
    HolidayCreate,
    OwnerSummary,
    SalonCreate,
    SalonResponse,
    WorkingHoursUpdate,
)
from .service import SalonService

router = APIRouter(prefix="/salons", tags=["Salons"])
admin_router = APIRouter(prefix="/admin/salons", tags=["Admin"])


def get_salon_service(db: Session = Depends(get_db)) -> SalonService:
    """Dependency injection for SalonService"""
    return SalonService(db)


def salon_response(salon: Salon, include_owner: bool = False) -> SalonResponse:
    owner = None
    if include_owner and salon.owner:
        owner = OwnerSummary(
            id=salon.owner.id, firstname=salon.owner.firstname, email=salon.owner.email
        )
    return SalonResponse(
        id=salon.id,
        salonName=salon.salon_name,
        location=salon.location,
        phone=salon.phone,
        email=salon.email,
        description=salon.description,
        status=salon.status,
        ownerId=salon.owner_id,
        workingHours=salon.working_hours or [],
        holidays=salon.holidays or [],
        createdAt=salon.created_at,
        owner=owner,
    )


# ============================================================================
# SALON OWNER / PUBLIC
# ============================================================================


@router.post("", response_model=SalonResponse, status_code=201)
async def create_salon(
    data: SalonCreate,
    actor: Actor = Depends(get_current_actor),
    service: SalonService = Depends(get_salon_service),
):
    """Register a salon (pending admin approval)"""
    return salon_response(service.create_salon(data, actor))


@router.get("")
async def get_salons(
    status: Optional[str] = Query(None),
    service: SalonService = Depends(get_salon_service),
):
    """Public salon listing"""
    salons = service.get_salons(status)
    return {"success": True, "count": len(salons), "salons": [salon_response(s) for s in salons]}


@router.put("/{salon_id}/working-hours", response_model=SalonResponse)
async def set_working_hours(
    salon_id: str,
    data: WorkingHoursUpdate,
    actor: Actor = Depends(get_current_actor),
    service: SalonService = Depends(get_salon_service),
):
    return salon_response(service.set_working_hours(salon_id, data.workingHours, actor))


@router.get("/{salon_id}/working-hours")
async def get_working_hours(salon_id: str, service: SalonService = Depends(get_salon_service)):
    return {"success": True, "workingHours": service.get_working_hours(salon_id)}


@router.post("/{salon_id}/holidays", status_code=201)
async def add_holiday(
    salon_id: str,
    data: HolidayCreate,
    actor: Actor = Depends(get_current_actor),
    service: SalonService = Depends(get_salon_service),
):
    return {"success": True, "holiday": service.add_holiday(salon_id, data, actor)}


@router.get("/{salon_id}/holidays")
async def get_holidays(
    salon_id: str,
    actor: Actor = Depends(get_current_actor),
    service: SalonService = Depends(get_salon_service),
):
    holidays = service.get_holidays(salon_id, actor)
    return {"success": True, "count": len(holidays), "holidays": holidays}


@router.delete("/{salon_id}/holidays/{holiday_id}")
async def delete_holiday(
    salon_id: str,
    holiday_id: str,
    actor: Actor = Depends(get_current_actor),
    service: SalonService = Depends(get_salon_service),
):
    return service.delete_holiday(salon_id, holiday_id, actor)


@router.get("/{salon_id}", response_model=SalonResponse)
async def get_salon(salon_id: str, service: SalonService = Depends(get_salon_service)):
    return salon_response(service.get_salon(salon_id))


@router.delete("/{salon_id}")
async def delete_salon(
    salon_id: str,
    actor: Actor = Depends(get_current_actor),
    service: SalonService = Depends(get_salon_service),
):
    return service.delete_salon(salon_id, actor)


# ============================================================================
# ADMIN
# ============================================================================


@admin_router.get("")
async def admin_get_salons(
    status: Optional[str] = Query(None),
    _admin: Admin = Depends(require_admin),
    service: SalonService = Depends(get_salon_service),
):
    """All salons for review, optionally filtered by status"""
    salons = service.get_salons(status)
    return {
        "success": True,
        "count": len(salons),
        "salons": [salon_response(s, include_owner=True) for s in salons],
    }


@admin_router.get("/{salon_id}", response_model=SalonResponse)
async def admin_get_salon(
    salon_id: str,
    _admin: Admin = Depends(require_admin),
    service: SalonService = Depends(get_salon_service),
):
    return salon_response(service.get_salon(salon_id), include_owner=True)


@admin_router.patch("/{salon_id}/approve", response_model=SalonResponse)
async def approve_salon(
    salon_id: str,
    _admin: Admin = Depends(require_admin),
    service: SalonService = Depends(get_salon_service),
):
    return salon_response(service.approve_salon(salon_id), include_owner=True)


@admin_router.patch("/{salon_id}/block", response_model=SalonResponse)
async def block_salon(
    salon_id: str,
    _admin: Admin = Depends(require_admin),
    service: SalonService = Depends(get_salon_service),
):
    return salon_response(service.block_salon(salon_id), include_owner=True)


@admin_router.patch("/{salon_id}/reactivate", response_model=SalonResponse)
async def reactivate_salon(
    salon_id: str,
    _admin: Admin = Depends(require_admin),
    service: SalonService = Depends(get_salon_service),
):
    return salon_response(service.reactivate_salon(salon_id), include_owner=True)
