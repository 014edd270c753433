"""Shared validation utilities"""

import re
from datetime import date, datetime
from typing import Optional

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")

DAYS_OF_WEEK = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def parse_calendar_date(value: str) -> date:
    """
    Parse a YYYY-MM-DD calendar date.

    A full ISO timestamp (date, then "T" or a space, then a time) is accepted
    too; only its date part is kept since bookings are compared per calendar day.

    Raises:
        ValueError: If the value is not a valid date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Invalid date format, expected YYYY-MM-DD")

    text = value.strip()
    try:
        if _DATE_PATTERN.match(text):
            return date.fromisoformat(text)
        if _TIMESTAMP_PATTERN.match(text):
            return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    raise ValueError(f"Invalid date format: {value!r}, expected YYYY-MM-DD")


def validate_day_name(day: str) -> str:
    """
    Validate a weekday name (Monday..Sunday, case-insensitive).

    Returns:
        Canonical capitalised day name

    Raises:
        ValueError: If the name is not a weekday
    """
    if isinstance(day, str):
        canonical = day.strip().capitalize()
        if canonical in DAYS_OF_WEEK:
            return canonical
    raise ValueError(f"Invalid day name: {day!r}. Expected one of {', '.join(DAYS_OF_WEEK)}")
