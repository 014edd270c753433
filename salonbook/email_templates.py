"""
MJML Email Templates
Booking notification templates using MJML for responsive, cross-client compatibility
"""

from typing import Optional

from .utils.sanitization import sanitize_string

# App theme colors - Rose/Slate color scheme
THEME = {
    "primary": "#e11d48",
    "primary_dark": "#be123c",
    "primary_light": "#ffe4e6",
    "background": "#f8fafc",
    "card_bg": "#ffffff",
    "text_primary": "#0f172a",
    "text_secondary": "#334155",
    "text_muted": "#64748b",
    "border": "#e2e8f0",
    "success": "#16a34a",
    "warning": "#f59e0b",
    "danger": "#ef4444",
}


def get_base_template(
    title: str,
    preview_text: str,
    content_sections: str,
    cta_url: Optional[str] = None,
    cta_label: Optional[str] = None,
) -> str:
    """Base MJML template wrapper for all emails"""

    cta_section = ""
    if cta_url and cta_label:
        cta_section = f"""
        <mj-section padding="20px 0">
          <mj-column>
            <mj-button
              href="{cta_url}"
              background-color="{THEME['primary']}"
              color="#ffffff"
              font-weight="600"
              border-radius="8px"
              padding="18px 40px"
              font-size="16px">
              {cta_label}
            </mj-button>
          </mj-column>
        </mj-section>
        """

    return f"""
    <mjml>
      <mj-head>
        <mj-title>{title}</mj-title>
        <mj-preview>{preview_text}</mj-preview>
        <mj-attributes>
          <mj-all font-family="-apple-system, BlinkMacSystemFont, 'Segoe UI', 'Helvetica Neue', Arial, sans-serif" />
          <mj-text font-size="16px" line-height="1.6" color="{THEME['text_secondary']}" />
        </mj-attributes>
      </mj-head>
      <mj-body background-color="{THEME['background']}">
        <!-- Main Content -->
        <mj-section background-color="#ffffff" padding="40px 40px 48px 40px">
          <mj-column>
            <mj-text font-size="24px" font-weight="600" color="{THEME['text_primary']}" line-height="1.3" padding="0 0 16px 0">
              {title}
            </mj-text>

            {content_sections}
          </mj-column>
        </mj-section>

        {cta_section}

        <!-- Footer -->
        <mj-section padding="32px 20px">
          <mj-column>
            <mj-text align="center" font-size="13px" color="#94a3b8" padding="0">
              You're receiving this because you have an account with SalonBook.
            </mj-text>
          </mj-column>
        </mj-section>
      </mj-body>
    </mjml>
    """


def _details_block(rows: list[tuple[str, Optional[str]]]) -> str:
    lines = "<br/>".join(
        f"<strong>{label}:</strong> {sanitize_string(str(value))}"
        for label, value in rows
        if value not in (None, "")
    )
    return f"""
    <mj-divider border-color="{THEME['border']}" border-width="1px" padding="8px 0" />
    <mj-text>
      {lines}
    </mj-text>
    <mj-divider border-color="{THEME['border']}" border-width="1px" padding="8px 0" />
    """


def booking_received_template(
    customer_name: str,
    salon_name: str,
    service_name: str,
    booking_date: str,
    start_time: str,
    end_time: str,
    duration: int,
    price: float,
) -> str:
    """Customer confirmation that a booking request was received"""
    details = _details_block(
        [
            ("Salon", salon_name),
            ("Service", service_name),
            ("Date", booking_date),
            ("Time", f"{start_time} - {end_time}"),
            ("Duration", f"{duration} minutes"),
            ("Price", f"${price:,.2f}"),
        ]
    )
    content = f"""
    <mj-text>
      Hi {sanitize_string(customer_name)},
    </mj-text>
    <mj-text>
      Your booking has been received and is awaiting approval.
    </mj-text>
    {details}
    <mj-text color="{THEME['text_muted']}">
      The salon owner will review and confirm your booking shortly. You will receive
      another email once your booking is approved or rejected.
    </mj-text>
    """
    return get_base_template(
        title="Booking Confirmation",
        preview_text=f"Your booking at {sanitize_string(salon_name)} is awaiting approval",
        content_sections=content,
    )


def new_booking_request_template(
    owner_name: str,
    customer_name: str,
    service_name: str,
    booking_date: str,
    start_time: str,
    end_time: str,
    price: float,
    notes: Optional[str] = None,
    dashboard_url: Optional[str] = None,
) -> str:
    """Salon owner alert for a new booking request"""
    details = _details_block(
        [
            ("Customer", customer_name),
            ("Service", service_name),
            ("Date", booking_date),
            ("Time", f"{start_time} - {end_time}"),
            ("Price", f"${price:,.2f}"),
            ("Notes", notes),
        ]
    )
    content = f"""
    <mj-text>
      Hi {sanitize_string(owner_name)},
    </mj-text>
    <mj-text>
      You have received a new booking request.
    </mj-text>
    {details}
    <mj-text color="{THEME['text_muted']}">
      Please log in to your dashboard to approve or reject this booking.
    </mj-text>
    """
    return get_base_template(
        title="New Booking Request",
        preview_text=f"New booking request from {sanitize_string(customer_name)}",
        content_sections=content,
        cta_url=dashboard_url,
        cta_label="Review Booking" if dashboard_url else None,
    )


def booking_cancelled_template(recipient_name: str, booking_id: str, by_customer: bool) -> str:
    """Cancellation notice, worded for the customer or for the salon owner"""
    message = (
        "A customer has cancelled their booking."
        if not by_customer
        else "Your booking has been cancelled."
    )
    details = _details_block([("Booking ID", booking_id)])
    content = f"""
    <mj-text>
      Hi {sanitize_string(recipient_name)},
    </mj-text>
    <mj-text>
      {message}
    </mj-text>
    {details}
    """
    if by_customer:
        content += """
    <mj-text>
      If you have any questions, please contact the salon.
    </mj-text>
    """
    return get_base_template(
        title="Booking Cancelled",
        preview_text="Booking cancelled",
        content_sections=content,
    )


def booking_rescheduled_template(
    customer_name: str,
    old_date: str,
    old_start_time: str,
    new_date: str,
    new_start_time: str,
    new_end_time: str,
) -> str:
    old_slot = _details_block([("Date", old_date), ("Time", old_start_time)])
    new_slot = _details_block([("Date", new_date), ("Time", f"{new_start_time} - {new_end_time}")])
    content = f"""
    <mj-text>
      Hi {sanitize_string(customer_name)},
    </mj-text>
    <mj-text>
      Your booking has been rescheduled and is awaiting approval.
    </mj-text>
    <mj-text font-weight="600">Previous slot</mj-text>
    {old_slot}
    <mj-text font-weight="600">New slot</mj-text>
    {new_slot}
    <mj-text color="{THEME['text_muted']}">
      The salon owner will review your reschedule request.
    </mj-text>
    """
    return get_base_template(
        title="Booking Rescheduled",
        preview_text=f"Rescheduled to {new_date} {new_start_time}",
        content_sections=content,
    )


def booking_confirmed_template(
    customer_name: str,
    salon_name: str,
    service_name: str,
    booking_date: str,
    start_time: str,
    end_time: str,
    price: float,
) -> str:
    details = _details_block(
        [
            ("Salon", salon_name),
            ("Service", service_name),
            ("Date", booking_date),
            ("Time", f"{start_time} - {end_time}"),
            ("Price", f"${price:,.2f}"),
        ]
    )
    content = f"""
    <mj-text>
      Hi {sanitize_string(customer_name)},
    </mj-text>
    <mj-text>
      Great news! Your booking has been approved and confirmed.
    </mj-text>
    {details}
    <mj-text>
      Thank you for booking with us!
    </mj-text>
    """
    return get_base_template(
        title="Booking Confirmed",
        preview_text=f"Your booking at {sanitize_string(salon_name)} is confirmed",
        content_sections=content,
    )


def booking_rejected_template(customer_name: str, reason: Optional[str] = None) -> str:
    reason_block = _details_block([("Reason", reason)]) if reason else ""
    content = f"""
    <mj-text>
      Hi {sanitize_string(customer_name)},
    </mj-text>
    <mj-text>
      Unfortunately, your booking has been rejected.
    </mj-text>
    {reason_block}
    <mj-text color="{THEME['text_muted']}">
      Please feel free to try another time slot or contact the salon for more information.
    </mj-text>
    """
    return get_base_template(
        title="Booking Rejected",
        preview_text="Your booking request was not accepted",
        content_sections=content,
    )
