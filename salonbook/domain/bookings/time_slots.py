"""
Time-slot arithmetic on naive wall-clock "HH:MM" strings.

Slots never cross midnight: an end time that would reach 24:00 or later is
rejected with CrossesMidnight instead of wrapping to an earlier hour.
"""

import re

from ...errors import CrossesMidnight, InvalidTimeFormat, ValidationError

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})$")


def parse_time(value: str) -> tuple[int, int]:
    """Parse "HH:MM" into (hour, minute)"""
    if not isinstance(value, str):
        raise InvalidTimeFormat(f"Invalid time {value!r}, expected HH:MM")

    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise InvalidTimeFormat(f"Invalid time {value!r}, expected HH:MM")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeFormat(f"Invalid time {value!r}, hour must be 00-23 and minute 00-59")
    return hour, minute


def to_minutes(value: str) -> int:
    hour, minute = parse_time(value)
    return hour * 60 + minute


def format_time(total_minutes: int) -> str:
    hour, minute = divmod(total_minutes, 60)
    return f"{hour:02d}:{minute:02d}"


def normalize_time(value: str) -> str:
    """Validate and return the canonical zero-padded form"""
    return format_time(to_minutes(value))


def compute_end_time(start_time: str, duration_minutes: int) -> str:
    """
    Derive a slot's end time from its start and the service duration.

    Raises:
        InvalidTimeFormat: start_time is not a valid HH:MM
        ValidationError: duration is not a positive whole number of minutes
        CrossesMidnight: the slot would end at or after 24:00
    """
    if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int):
        raise ValidationError("Service duration must be a whole number of minutes")
    if duration_minutes < 1:
        raise ValidationError("Service duration must be at least 1 minute")

    end = to_minutes(start_time) + duration_minutes
    if end >= MINUTES_PER_DAY:
        raise CrossesMidnight(
            f"A {duration_minutes}-minute service starting at {start_time} would end after midnight"
        )
    return format_time(end)


def slots_overlap(start_a: str, end_a: str, start_b: str, end_b: str) -> bool:
    """Half-open overlap: [a) and [b) conflict iff a starts before b ends and ends after b starts"""
    return to_minutes(start_a) < to_minutes(end_b) and to_minutes(end_a) > to_minutes(start_b)
