"""
Booking Engine Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class CallerRole(str, Enum):
    """Role supplied by the identity provider for every gated call"""

    student = "student"
    tutor = "tutor"


class BookingStatus(str, Enum):
    """Booking lifecycle status"""

    pending = "pending"
    confirmed = "confirmed"
    rejected = "rejected"
    cancelled = "cancelled"
    completed = "completed"


class SessionStatus(str, Enum):
    """Live session status"""

    scheduled = "scheduled"
    active = "active"
    completed = "completed"
    no_show = "no_show"


class AccessState(str, Enum):
    """Where "now" falls relative to a session's scheduled window"""

    too_early = "too_early"
    pre_session = "pre_session"
    during_session = "during_session"
    post_session = "post_session"
    expired = "expired"


# Bookings in these states still occupy their slot
ACTIVE_BOOKING_STATUSES = (BookingStatus.pending, BookingStatus.confirmed)

# Sessions in these states have ended
ENDED_SESSION_STATUSES = (SessionStatus.completed, SessionStatus.no_show)

# Bookings whose session may still be used for chat
SESSION_BOOKING_STATUSES = (BookingStatus.confirmed, BookingStatus.completed)
