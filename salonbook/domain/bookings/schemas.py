"""Booking domain schemas - Pydantic models for validation"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


class BookingCreate(BaseModel):
    """Schema for requesting a booking; required fields are checked by the service"""

    salonId: Optional[str] = None
    serviceId: Optional[str] = None
    bookingDate: Optional[str] = None
    startTime: Optional[str] = None
    notes: Optional[str] = None


class RescheduleRequest(BaseModel):
    newBookingDate: Optional[str] = None
    newStartTime: Optional[str] = None


class RejectRequest(BaseModel):
    rejectionReason: Optional[str] = None


class SalonSummary(BaseModel):
    id: str
    salonName: str
    location: str
    phone: str
    email: str


class ServiceSummary(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    price: float
    duration: int


class CustomerSummary(BaseModel):
    id: str
    firstname: str
    email: Optional[str] = None


class BookingResponse(BaseModel):
    """Schema for booking response"""

    id: str
    userId: str
    salonId: str
    serviceId: str
    bookingDate: date
    startTime: str
    endTime: str
    status: str
    notes: Optional[str] = None
    rejectionReason: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
    salon: Optional[SalonSummary] = None
    service: Optional[ServiceSummary] = None
    customer: Optional[CustomerSummary] = None


class StatusSummary(BaseModel):
    total: int = 0
    pending: int = 0
    confirmed: int = 0
    completed: int = 0
    cancelled: int = 0
