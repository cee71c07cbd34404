"""
Booking Use Cases

Booking ledger: creation and status transitions.
"""

from .accept_booking_use_case import AcceptBookingUseCase
from .cancel_booking_use_case import DEFAULT_CANCELLATION_CUTOFF, CancelBookingUseCase
from .create_booking_use_case import CreateBookingUseCase
from .dtos import (
    AcceptBookingResponse,
    BookingEventResponse,
    BookingHistoryResponse,
    BookingResponse,
    BookingsResponse,
)
from .get_booking_history_use_case import GetBookingHistoryUseCase
from .list_bookings_use_case import ListBookingsUseCase
from .reject_booking_use_case import RejectBookingUseCase

__all__ = [
    "CreateBookingUseCase",
    "AcceptBookingUseCase",
    "RejectBookingUseCase",
    "CancelBookingUseCase",
    "ListBookingsUseCase",
    "GetBookingHistoryUseCase",
    "DEFAULT_CANCELLATION_CUTOFF",
    "BookingResponse",
    "BookingsResponse",
    "AcceptBookingResponse",
    "BookingEventResponse",
    "BookingHistoryResponse",
]
