"""Tests for the booking status state machine."""

import pytest

from salonbook.domain.bookings.lifecycle import (
    INITIAL_STATUS,
    BookingAction,
    BookingStatus,
    can_transition,
    is_terminal,
    next_status,
)
from salonbook.errors import InvalidTransition


class TestTransitions:
    """Legal moves between statuses."""

    def test_initial_status_is_pending(self):
        assert INITIAL_STATUS == BookingStatus.PENDING

    @pytest.mark.parametrize(
        "current,action,expected",
        [
            ("pending", BookingAction.APPROVE, BookingStatus.CONFIRMED),
            ("pending", BookingAction.REJECT, BookingStatus.CANCELLED),
            ("pending", BookingAction.CANCEL, BookingStatus.CANCELLED),
            ("confirmed", BookingAction.CANCEL, BookingStatus.CANCELLED),
            ("pending", BookingAction.RESCHEDULE, BookingStatus.PENDING),
            ("confirmed", BookingAction.RESCHEDULE, BookingStatus.PENDING),
            ("confirmed", BookingAction.COMPLETE, BookingStatus.COMPLETED),
        ],
    )
    def test_allowed(self, current, action, expected):
        assert can_transition(current, action)
        assert next_status(current, action) == expected

    @pytest.mark.parametrize(
        "current,action",
        [
            ("confirmed", BookingAction.APPROVE),
            ("confirmed", BookingAction.REJECT),
            ("pending", BookingAction.COMPLETE),
        ],
    )
    def test_not_listed_is_refused(self, current, action):
        assert not can_transition(current, action)
        with pytest.raises(InvalidTransition):
            next_status(current, action)


class TestTerminalStates:
    """Nothing leaves cancelled or completed."""

    @pytest.mark.parametrize("status", ["cancelled", "completed"])
    @pytest.mark.parametrize("action", list(BookingAction))
    def test_every_action_refused(self, status, action):
        with pytest.raises(InvalidTransition):
            next_status(status, action)

    def test_is_terminal(self):
        assert is_terminal("cancelled")
        assert is_terminal("completed")
        assert not is_terminal("pending")
        assert not is_terminal("confirmed")

    def test_refusal_names_the_status(self):
        with pytest.raises(InvalidTransition, match="completed"):
            next_status("completed", BookingAction.CANCEL)
