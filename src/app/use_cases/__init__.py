"""
Use Cases

Organized into domain folders:
- tutors/: Tutor registry (administrator)
- availability/: Availability template, blackout dates, open slots
- bookings/: Booking ledger
- sessions/: Session access, lifecycle and chat

Import from subdirectories for better organization.
"""

from .tutors import (
    CreateTutorUseCase,
    DeleteTutorUseCase,
)
from .availability import (
    ReplaceAvailabilityUseCase,
    SetSlotAvailabilityUseCase,
    GetAvailabilityTemplateUseCase,
    AddBlackoutDateUseCase,
    ListBlackoutDatesUseCase,
    ResolveOpenSlotsUseCase,
)
from .bookings import (
    CreateBookingUseCase,
    AcceptBookingUseCase,
    RejectBookingUseCase,
    CancelBookingUseCase,
    ListBookingsUseCase,
    GetBookingHistoryUseCase,
)
from .sessions import (
    CheckAccessUseCase,
    StartSessionUseCase,
    CompleteSessionUseCase,
    SendMessageUseCase,
    ListMessagesUseCase,
    GetSessionByBookingUseCase,
    GetActiveSessionUseCase,
)

__all__ = [
    # Tutors
    "CreateTutorUseCase",
    "DeleteTutorUseCase",
    # Availability
    "ReplaceAvailabilityUseCase",
    "SetSlotAvailabilityUseCase",
    "GetAvailabilityTemplateUseCase",
    "AddBlackoutDateUseCase",
    "ListBlackoutDatesUseCase",
    "ResolveOpenSlotsUseCase",
    # Bookings
    "CreateBookingUseCase",
    "AcceptBookingUseCase",
    "RejectBookingUseCase",
    "CancelBookingUseCase",
    "ListBookingsUseCase",
    "GetBookingHistoryUseCase",
    # Sessions
    "CheckAccessUseCase",
    "StartSessionUseCase",
    "CompleteSessionUseCase",
    "SendMessageUseCase",
    "ListMessagesUseCase",
    "GetSessionByBookingUseCase",
    "GetActiveSessionUseCase",
]
