"""Injectable source of "now" so date checks are testable without the wall clock"""

from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    # Naive local time; bookings carry no timezone
    return datetime.now()


def fixed_clock(moment: datetime) -> Clock:
    """Clock that always returns the given moment"""
    return lambda: moment
