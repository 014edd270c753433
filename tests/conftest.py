"""Shared fixtures: in-memory database, recording mail sender, fixed clock, tokens."""

import asyncio
from datetime import date, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from jose import jwt as jose_jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from salonbook import models
from salonbook.config import Settings
from salonbook.database import Base
from salonbook.services.notification_service import BookingNotifier
from salonbook.shared.clock import fixed_clock

NOW = datetime(2026, 6, 1, 9, 0)
TOMORROW = (NOW.date() + timedelta(days=1)).isoformat()


class RecordingSend:
    """Stand-in for the email sender that records every message."""

    def __init__(self):
        self.calls = []
        self.error = None
        self.delay = 0.0

    async def __call__(self, to, subject, mjml_content):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        self.calls.append((to, subject, mjml_content))
        return {"id": "email-test"}

    def recipients(self):
        return [to for to, _, _ in self.calls]


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        jwt_secret="test-secret",
        resend_api_key="re_test",
        notification_timeout_seconds=0.2,
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def sent():
    return RecordingSend()


@pytest.fixture
def notifier(settings, sent):
    return BookingNotifier(settings, send=sent)


@pytest.fixture
def clock():
    return fixed_clock(NOW)


@pytest.fixture
def users(db):
    """A customer, a salon owner, a second owner and an admin."""
    rows = {
        "customer": models.User(firstname="Ana", email="ana@example.com", role="Customer"),
        "other_customer": models.User(firstname="Ben", email="ben@example.com", role="Customer"),
        "owner": models.User(firstname="Olga", email="olga@example.com", role="Salon Owner"),
        "other_owner": models.User(firstname="Omar", email="omar@example.com", role="Salon Owner"),
        "admin": models.User(firstname="Ada", email="ada@example.com", role="Admin"),
    }
    db.add_all(rows.values())
    db.commit()
    return rows


@pytest.fixture
def salon(db, users):
    salon = models.Salon(
        salon_name="Shear Joy",
        location="12 High Street",
        phone="555-0100",
        email="hello@shearjoy.example",
        status="approved",
        owner_id=users["owner"].id,
        working_hours=[],
        holidays=[],
    )
    db.add(salon)
    db.commit()
    return salon


@pytest.fixture
def haircut(db, salon):
    """A 30 minute service."""
    service = models.Service(
        salon_id=salon.id, name="Haircut", description="Wash and cut", price=25.0, duration=30
    )
    db.add(service)
    db.commit()
    return service


@pytest.fixture
def colouring(db, salon):
    """A 90 minute service."""
    service = models.Service(
        salon_id=salon.id, name="Colouring", description="Full colour", price=80.0, duration=90
    )
    db.add(service)
    db.commit()
    return service


@pytest.fixture
def make_booking(db, users, salon, haircut):
    """Insert a booking row directly, bypassing the workflow."""

    def _make(start="10:00", end="10:30", status="pending", booking_date=None, **overrides):
        booking = models.Booking(
            user_id=overrides.pop("user_id", users["customer"].id),
            salon_id=overrides.pop("salon_id", salon.id),
            service_id=overrides.pop("service_id", haircut.id),
            booking_date=booking_date or date.fromisoformat(TOMORROW),
            start_time=start,
            end_time=end,
            status=status,
            **overrides,
        )
        db.add(booking)
        db.commit()
        return booking

    return _make


@pytest.fixture
def token_for(settings):
    def _token(user):
        payload = {"userId": user.id, "role": user.role, "email": user.email}
        return jose_jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return _token


@pytest.fixture
def auth_headers(token_for):
    def _headers(user):
        return {"Authorization": f"Bearer {token_for(user)}"}

    return _headers


@pytest.fixture
def client(settings, engine, notifier, clock):
    """Test client wired to the in-memory database and recording notifier."""
    from salonbook.main import create_app

    return TestClient(create_app(settings=settings, engine=engine, notifier=notifier, clock=clock))
