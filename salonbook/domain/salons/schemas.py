"""Salon domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class WorkingHoursEntry(BaseModel):
    day: str
    isOpen: bool = True
    openingTime: Optional[str] = None
    closingTime: Optional[str] = None


class SalonCreate(BaseModel):
    """Schema for registering a salon"""

    salonName: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    description: Optional[str] = None
    workingHours: Optional[list[WorkingHoursEntry]] = None


class WorkingHoursUpdate(BaseModel):
    workingHours: list[WorkingHoursEntry]


class HolidayCreate(BaseModel):
    date: Optional[str] = None
    description: Optional[str] = None


class OwnerSummary(BaseModel):
    id: str
    firstname: str
    email: Optional[str] = None


class SalonResponse(BaseModel):
    """Schema for salon response"""

    id: str
    salonName: str
    location: str
    phone: str
    email: str
    description: Optional[str] = None
    status: str
    ownerId: str
    workingHours: list[dict] = []
    holidays: list[dict] = []
    createdAt: Optional[datetime] = None
    owner: Optional[OwnerSummary] = None
