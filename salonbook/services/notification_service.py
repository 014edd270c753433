"""
Booking Notification Service
Emails customers and salon owners about booking workflow events.
Delivery is best effort: failures and timeouts are logged and never raised.
"""

import asyncio
import logging
from functools import partial
from typing import Awaitable, Callable, Optional

from ..config import Settings
from ..email_service import send_email
from ..email_templates import (
    booking_cancelled_template,
    booking_confirmed_template,
    booking_received_template,
    booking_rejected_template,
    booking_rescheduled_template,
    new_booking_request_template,
)
from ..models import Booking

logger = logging.getLogger(__name__)

SendFunc = Callable[[str, str, str], Awaitable[object]]


def _customer_contact(booking: Booking) -> tuple[Optional[str], str]:
    customer = booking.customer
    if not customer:
        return None, "there"
    return customer.email, customer.firstname or "there"


def _owner_contact(booking: Booking) -> tuple[Optional[str], str]:
    owner = booking.salon.owner if booking.salon else None
    if not owner:
        return None, "there"
    return owner.email, owner.firstname or "there"


class BookingNotifier:
    """Sends the booking emails; every method returns once all sends have settled"""

    def __init__(self, settings: Settings, send: Optional[SendFunc] = None):
        self.settings = settings
        self.timeout = settings.notification_timeout_seconds
        self._send = send or partial(send_email, settings=settings)

    async def _deliver(self, to: Optional[str], subject: str, mjml_content: str, event: str) -> bool:
        if not to:
            logger.debug(f"⚠️ No email address for {event} notification")
            return False
        try:
            logger.info(f"📧 Sending {event} email to {to}")
            await asyncio.wait_for(self._send(to, subject, mjml_content), timeout=self.timeout)
            logger.info(f"✅ {event} email sent successfully to {to}")
            return True
        except asyncio.TimeoutError:
            logger.error(f"❌ {event} email to {to} timed out after {self.timeout}s")
        except Exception as e:
            logger.error(f"❌ Failed to send {event} email to {to}: {e}")
        return False

    async def booking_created(self, booking: Booking) -> None:
        customer_email, customer_name = _customer_contact(booking)
        owner_email, owner_name = _owner_contact(booking)
        salon_name = booking.salon.salon_name
        service = booking.service

        await self._deliver(
            customer_email,
            "Booking Confirmation - Awaiting Approval",
            booking_received_template(
                customer_name=customer_name,
                salon_name=salon_name,
                service_name=service.name,
                booking_date=booking.booking_date.isoformat(),
                start_time=booking.start_time,
                end_time=booking.end_time,
                duration=service.duration,
                price=service.price,
            ),
            "booking received",
        )
        await self._deliver(
            owner_email,
            f"New Booking Request - {salon_name}",
            new_booking_request_template(
                owner_name=owner_name,
                customer_name=customer_name,
                service_name=service.name,
                booking_date=booking.booking_date.isoformat(),
                start_time=booking.start_time,
                end_time=booking.end_time,
                price=service.price,
                notes=booking.notes,
                dashboard_url=f"{self.settings.frontend_url}/owner/bookings",
            ),
            "new booking request",
        )

    async def booking_cancelled(self, booking: Booking) -> None:
        customer_email, customer_name = _customer_contact(booking)
        owner_email, owner_name = _owner_contact(booking)

        await self._deliver(
            customer_email,
            "Booking Cancelled",
            booking_cancelled_template(customer_name, booking.id, by_customer=True),
            "booking cancelled",
        )
        await self._deliver(
            owner_email,
            "Booking Cancelled by Customer",
            booking_cancelled_template(owner_name, booking.id, by_customer=False),
            "booking cancelled (owner)",
        )

    async def booking_rescheduled(self, booking: Booking, old_date: str, old_start_time: str) -> None:
        customer_email, customer_name = _customer_contact(booking)
        await self._deliver(
            customer_email,
            "Booking Rescheduled",
            booking_rescheduled_template(
                customer_name=customer_name,
                old_date=old_date,
                old_start_time=old_start_time,
                new_date=booking.booking_date.isoformat(),
                new_start_time=booking.start_time,
                new_end_time=booking.end_time,
            ),
            "booking rescheduled",
        )

    async def booking_approved(self, booking: Booking) -> None:
        customer_email, customer_name = _customer_contact(booking)
        await self._deliver(
            customer_email,
            "Booking Confirmed!",
            booking_confirmed_template(
                customer_name=customer_name,
                salon_name=booking.salon.salon_name,
                service_name=booking.service.name,
                booking_date=booking.booking_date.isoformat(),
                start_time=booking.start_time,
                end_time=booking.end_time,
                price=booking.service.price,
            ),
            "booking approved",
        )

    async def booking_rejected(self, booking: Booking, reason: Optional[str] = None) -> None:
        customer_email, customer_name = _customer_contact(booking)
        await self._deliver(
            customer_email,
            "Booking Request Declined",
            booking_rejected_template(customer_name, reason),
            "booking rejected",
        )
