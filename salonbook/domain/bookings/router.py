"""Booking router - FastAPI endpoints for the booking workflow"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ...actors import Actor
from ...auth import get_current_actor
from ...database import get_db
from ...models import Booking
from .schemas import (
    BookingCreate,
    BookingResponse,
    CustomerSummary,
    RejectRequest,
    RescheduleRequest,
    SalonSummary,
    ServiceSummary,
    StatusSummary,
)
from .service import BookingService

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def get_booking_service(request: Request, db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db, request.app.state.notifier, request.app.state.clock)


def booking_response(
    booking: Booking,
    include_salon: bool = False,
    include_service: bool = False,
    include_customer: bool = False,
) -> BookingResponse:
    salon = service = customer = None
    if include_salon and booking.salon:
        salon = SalonSummary(
            id=booking.salon.id,
            salonName=booking.salon.salon_name,
            location=booking.salon.location,
            phone=booking.salon.phone,
            email=booking.salon.email,
        )
    if include_service and booking.service:
        service = ServiceSummary(
            id=booking.service.id,
            name=booking.service.name,
            description=booking.service.description,
            price=booking.service.price,
            duration=booking.service.duration,
        )
    if include_customer and booking.customer:
        customer = CustomerSummary(
            id=booking.customer.id,
            firstname=booking.customer.firstname,
            email=booking.customer.email,
        )
    return BookingResponse(
        id=booking.id,
        userId=booking.user_id,
        salonId=booking.salon_id,
        serviceId=booking.service_id,
        bookingDate=booking.booking_date,
        startTime=booking.start_time,
        endTime=booking.end_time,
        status=booking.status,
        notes=booking.notes,
        rejectionReason=booking.rejection_reason,
        createdAt=booking.created_at,
        updatedAt=booking.updated_at,
        salon=salon,
        service=service,
        customer=customer,
    )


# ============================================================================
# CUSTOMER
# ============================================================================


@router.post("", status_code=201)
async def create_booking(
    data: BookingCreate,
    actor: Actor = Depends(get_current_actor),
    service: BookingService = Depends(get_booking_service),
):
    booking = await service.create_booking(data, actor)
    return {
        "success": True,
        "message": "Booking created successfully. Awaiting salon owner approval.",
        "booking": booking_response(booking),
    }


@router.get("/customer/history")
async def get_booking_history(
    actor: Actor = Depends(get_current_actor),
    service: BookingService = Depends(get_booking_service),
):
    """Customer's bookings, newest first"""
    bookings = service.get_booking_history(actor)
    return {
        "success": True,
        "count": len(bookings),
        "bookings": [
            booking_response(b, include_salon=True, include_service=True) for b in bookings
        ],
    }


@router.put("/{booking_id}/cancel")
async def cancel_booking(
    booking_id: str,
    actor: Actor = Depends(get_current_actor),
    service: BookingService = Depends(get_booking_service),
):
    booking = await service.cancel_booking(booking_id, actor)
    return {
        "success": True,
        "message": "Booking cancelled successfully",
        "booking": booking_response(booking),
    }


@router.put("/{booking_id}/reschedule")
async def reschedule_booking(
    booking_id: str,
    data: RescheduleRequest,
    actor: Actor = Depends(get_current_actor),
    service: BookingService = Depends(get_booking_service),
):
    booking = await service.reschedule_booking(booking_id, data, actor)
    return {
        "success": True,
        "message": "Booking rescheduled successfully. Awaiting approval.",
        "booking": booking_response(booking),
    }


# ============================================================================
# SALON OWNER
# ============================================================================


@router.get("/salon/{salon_id}/bookings")
async def get_salon_bookings(
    salon_id: str,
    actor: Actor = Depends(get_current_actor),
    service: BookingService = Depends(get_booking_service),
):
    bookings, counts = service.get_salon_bookings(salon_id, actor)
    return {
        "success": True,
        "count": len(bookings),
        "summary": StatusSummary(total=len(bookings), **counts),
        "bookings": [
            booking_response(b, include_service=True, include_customer=True) for b in bookings
        ],
    }


@router.put("/{booking_id}/approve")
async def approve_booking(
    booking_id: str,
    actor: Actor = Depends(get_current_actor),
    service: BookingService = Depends(get_booking_service),
):
    booking = await service.approve_booking(booking_id, actor)
    return {
        "success": True,
        "message": "Booking approved successfully",
        "booking": booking_response(booking),
    }


@router.put("/{booking_id}/reject")
async def reject_booking(
    booking_id: str,
    data: Optional[RejectRequest] = None,
    actor: Actor = Depends(get_current_actor),
    service: BookingService = Depends(get_booking_service),
):
    reason = data.rejectionReason if data else None
    booking = await service.reject_booking(booking_id, reason, actor)
    return {
        "success": True,
        "message": "Booking rejected successfully",
        "booking": booking_response(booking),
    }


# Declared last so /customer/history is matched first
@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str,
    actor: Actor = Depends(get_current_actor),
    service: BookingService = Depends(get_booking_service),
):
    booking = service.get_booking(booking_id, actor)
    return booking_response(booking, include_salon=True, include_service=True, include_customer=True)
