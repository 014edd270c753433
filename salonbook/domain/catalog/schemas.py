"""Service catalog schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ServiceCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    duration: Optional[int] = None


class ServiceUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    duration: Optional[int] = None


class ServiceResponse(BaseModel):
    id: str
    salonId: str
    name: str
    description: str
    price: float
    duration: int
    isDeleted: bool
    createdAt: Optional[datetime] = None
