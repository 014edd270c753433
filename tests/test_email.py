"""Tests for email templates, the Resend sender and the booking notifier."""

import asyncio

import pytest

from salonbook import email_service
from salonbook.config import Settings
from salonbook.email_templates import (
    booking_cancelled_template,
    booking_received_template,
    booking_rejected_template,
    new_booking_request_template,
)
from salonbook.services.notification_service import BookingNotifier


class TestTemplates:
    """Tests for the MJML templates."""

    def test_booking_received_lists_details(self):
        mjml = booking_received_template(
            customer_name="Ana",
            salon_name="Shear Joy",
            service_name="Haircut",
            booking_date="2026-06-02",
            start_time="10:00",
            end_time="10:30",
            duration=30,
            price=25.0,
        )
        assert mjml.strip().startswith("<mjml>")
        assert "Shear Joy" in mjml
        assert "10:00 - 10:30" in mjml
        assert "30 minutes" in mjml
        assert "$25.00" in mjml

    def test_free_text_is_escaped(self):
        mjml = new_booking_request_template(
            owner_name="Olga",
            customer_name="<b>Ana</b>",
            service_name="Haircut",
            booking_date="2026-06-02",
            start_time="10:00",
            end_time="10:30",
            price=25.0,
            notes="<script>alert(1)</script>",
        )
        assert "<script>" not in mjml
        assert "&lt;script&gt;" in mjml
        assert "&lt;b&gt;Ana&lt;/b&gt;" in mjml

    def test_empty_notes_are_left_out(self):
        mjml = new_booking_request_template(
            owner_name="Olga",
            customer_name="Ana",
            service_name="Haircut",
            booking_date="2026-06-02",
            start_time="10:00",
            end_time="10:30",
            price=25.0,
        )
        assert "Notes:" not in mjml

    def test_dashboard_button_only_with_url(self):
        kwargs = dict(
            owner_name="Olga",
            customer_name="Ana",
            service_name="Haircut",
            booking_date="2026-06-02",
            start_time="10:00",
            end_time="10:30",
            price=25.0,
        )
        assert "mj-button" not in new_booking_request_template(**kwargs)
        with_url = new_booking_request_template(dashboard_url="https://app/owner", **kwargs)
        assert "https://app/owner" in with_url

    def test_cancelled_wording(self):
        assert "Your booking has been cancelled" in booking_cancelled_template("Ana", "b1", True)
        assert "A customer has cancelled" in booking_cancelled_template("Olga", "b1", False)

    def test_rejected_reason_optional(self):
        assert "Reason:" in booking_rejected_template("Ana", "Fully booked")
        assert "Reason:" not in booking_rejected_template("Ana")


class TestSendEmail:
    """Tests for send_email()."""

    @pytest.fixture
    def captured(self, monkeypatch):
        calls = []
        monkeypatch.setattr(email_service, "mjml_to_html", lambda mjml: {"html": "<p>hi</p>"})
        monkeypatch.setattr(
            email_service.resend.Emails, "send", lambda data: calls.append(data) or {"id": "e1"}
        )
        return calls

    @pytest.mark.asyncio
    async def test_sends_compiled_html(self, captured):
        settings = Settings(resend_api_key="re_test", email_from_address="SalonBook <a@b.c>")
        response = await email_service.send_email("ana@example.com", "Hi", "<mjml/>", settings)
        assert response == {"id": "e1"}
        assert captured == [
            {
                "from": "SalonBook <a@b.c>",
                "to": ["ana@example.com"],
                "subject": "Hi",
                "html": "<p>hi</p>",
            }
        ]

    @pytest.mark.asyncio
    async def test_requires_api_key(self, captured):
        with pytest.raises(Exception, match="not configured"):
            await email_service.send_email("ana@example.com", "Hi", "<mjml/>", Settings())
        assert captured == []

    @pytest.mark.asyncio
    async def test_provider_error_is_raised(self, monkeypatch):
        monkeypatch.setattr(email_service, "mjml_to_html", lambda mjml: {"html": ""})

        def boom(data):
            raise RuntimeError("rate limited")

        monkeypatch.setattr(email_service.resend.Emails, "send", boom)
        with pytest.raises(Exception, match="Failed to send email"):
            await email_service.send_email(
                "ana@example.com", "Hi", "<mjml/>", Settings(resend_api_key="re_test")
            )

    def test_compile_mjml_result_object(self, monkeypatch):
        class Result:
            html = "<html/>"
            errors = []

        monkeypatch.setattr(email_service, "mjml_to_html", lambda mjml: Result())
        assert email_service.compile_mjml_to_html("<mjml/>") == "<html/>"


class TestBookingNotifier:
    """Tests for BookingNotifier delivery handling."""

    @pytest.mark.asyncio
    async def test_deliver_reports_success(self):
        sent = []

        async def send(to, subject, mjml):
            sent.append(to)

        notifier = BookingNotifier(Settings(), send=send)
        assert await notifier._deliver("ana@example.com", "Hi", "<mjml/>", "test")
        assert sent == ["ana@example.com"]

    @pytest.mark.asyncio
    async def test_deliver_skips_missing_address(self):
        async def send(to, subject, mjml):
            raise AssertionError("should not send")

        notifier = BookingNotifier(Settings(), send=send)
        assert not await notifier._deliver(None, "Hi", "<mjml/>", "test")

    @pytest.mark.asyncio
    async def test_deliver_swallows_timeout(self):
        async def slow(to, subject, mjml):
            await asyncio.sleep(1)

        notifier = BookingNotifier(Settings(notification_timeout_seconds=0.05), send=slow)
        assert not await notifier._deliver("ana@example.com", "Hi", "<mjml/>", "test")

    @pytest.mark.asyncio
    async def test_deliver_swallows_errors(self):
        async def failing(to, subject, mjml):
            raise ConnectionError("down")

        notifier = BookingNotifier(Settings(), send=failing)
        assert not await notifier._deliver("ana@example.com", "Hi", "<mjml/>", "test")
