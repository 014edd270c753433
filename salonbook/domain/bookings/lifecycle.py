"""Booking lifecycle - legal status transitions"""

import enum

from ...errors import InvalidTransition


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class BookingAction(str, enum.Enum):
    APPROVE = "approve"
    REJECT = "reject"
    CANCEL = "cancel"
    RESCHEDULE = "reschedule"
    COMPLETE = "complete"


INITIAL_STATUS = BookingStatus.PENDING

TERMINAL_STATUSES = frozenset({BookingStatus.CANCELLED, BookingStatus.COMPLETED})

# (action, from status) -> to status
TRANSITIONS: dict[tuple[BookingAction, BookingStatus], BookingStatus] = {
    (BookingAction.APPROVE, BookingStatus.PENDING): BookingStatus.CONFIRMED,
    (BookingAction.REJECT, BookingStatus.PENDING): BookingStatus.CANCELLED,
    (BookingAction.CANCEL, BookingStatus.PENDING): BookingStatus.CANCELLED,
    (BookingAction.CANCEL, BookingStatus.CONFIRMED): BookingStatus.CANCELLED,
    (BookingAction.RESCHEDULE, BookingStatus.PENDING): BookingStatus.PENDING,
    (BookingAction.RESCHEDULE, BookingStatus.CONFIRMED): BookingStatus.PENDING,
    (BookingAction.COMPLETE, BookingStatus.CONFIRMED): BookingStatus.COMPLETED,
}

_REFUSALS = {
    BookingAction.APPROVE: "Only pending bookings can be approved",
    BookingAction.REJECT: "Only pending bookings can be rejected",
    BookingAction.CANCEL: "Cannot cancel a {status} booking",
    BookingAction.RESCHEDULE: "Cannot reschedule a {status} booking",
    BookingAction.COMPLETE: "Only confirmed bookings can be completed",
}


def is_terminal(status: str) -> bool:
    return BookingStatus(status) in TERMINAL_STATUSES


def can_transition(current: str, action: BookingAction) -> bool:
    return (action, BookingStatus(current)) in TRANSITIONS


def next_status(current: str, action: BookingAction) -> BookingStatus:
    """
    Status a booking moves to when `action` is applied.

    Raises:
        InvalidTransition: the action is not allowed from `current`
    """
    status = BookingStatus(current)
    try:
        return TRANSITIONS[(action, status)]
    except KeyError:
        raise InvalidTransition(_REFUSALS[action].format(status=status.value)) from None
