import enum
import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_id():
    """Generate an opaque unique identifier"""
    return str(uuid.uuid4())


class UserRole(str, enum.Enum):
    CUSTOMER = "Customer"
    SALON_OWNER = "Salon Owner"
    ADMIN = "Admin"


class SalonStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    BLOCKED = "blocked"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    firstname = Column(String(255), default="", nullable=False)
    # Mirrors the identity service; email is absent when the token carries none
    email = Column(String(255), unique=True, index=True, nullable=True)
    role = Column(String(20), default=UserRole.CUSTOMER.value, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    salons = relationship("Salon", back_populates="owner")
    bookings = relationship("Booking", back_populates="customer")


class Salon(Base):
    __tablename__ = "salons"

    id = Column(String(36), primary_key=True, default=generate_id)
    salon_name = Column(String(255), nullable=False)
    location = Column(String(500), nullable=False)
    phone = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), default=SalonStatus.PENDING.value, nullable=False, index=True)
    owner_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    # [{"day": "Monday", "isOpen": true, "openingTime": "09:00", "closingTime": "18:00"}]
    working_hours = Column(JSON, default=list, nullable=False)
    # [{"id": "...", "date": "2026-12-25", "description": "Christmas"}]
    holidays = Column(JSON, default=list, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    owner = relationship("User", back_populates="salons")
    services = relationship("Service", back_populates="salon")
    bookings = relationship("Booking", back_populates="salon")


class Service(Base):
    __tablename__ = "services"

    id = Column(String(36), primary_key=True, default=generate_id)
    salon_id = Column(String(36), ForeignKey("salons.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    duration = Column(Integer, nullable=False)  # minutes, >= 1
    is_deleted = Column(Boolean, default=False, nullable=False)  # soft delete flag
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    salon = relationship("Salon", back_populates="services")
    bookings = relationship("Booking", back_populates="service")


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (Index("ix_bookings_salon_date", "salon_id", "booking_date"),)

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    salon_id = Column(String(36), ForeignKey("salons.id"), nullable=False)
    service_id = Column(String(36), ForeignKey("services.id"), nullable=False)
    booking_date = Column(Date, nullable=False)
    start_time = Column(String(5), nullable=False)  # HH:MM
    end_time = Column(String(5), nullable=False)  # HH:MM, derived from service duration
    status = Column(String(20), default="pending", nullable=False)
    notes = Column(Text, nullable=True)
    rejection_reason = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    customer = relationship("User", back_populates="bookings")
    salon = relationship("Salon", back_populates="bookings")
    service = relationship("Service", back_populates="bookings")
