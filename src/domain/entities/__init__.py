"""
Booking Engine Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ACTIVE_BOOKING_STATUSES,
    ENDED_SESSION_STATUSES,
    SESSION_BOOKING_STATUSES,
    AccessState,
    BookingStatus,
    CallerRole,
    SessionStatus,
)

# Export all entities
from .tutor import Tutor
from .tutor_time_slot import TutorTimeSlot
from .blackout_date import BlackoutDate
from .booking import BOOKING_DURATION, Booking
from .session import Session
from .session_message import SessionMessage
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "AccessState",
    "BookingStatus",
    "CallerRole",
    "SessionStatus",
    "ACTIVE_BOOKING_STATUSES",
    "ENDED_SESSION_STATUSES",
    "SESSION_BOOKING_STATUSES",
    # Entities
    "Tutor",
    "TutorTimeSlot",
    "BlackoutDate",
    "Booking",
    "BOOKING_DURATION",
    "Session",
    "SessionMessage",
    "AuditEvent",
]
