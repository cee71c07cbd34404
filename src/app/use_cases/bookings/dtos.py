"""
Booking Use Case DTOs (Data Transfer Objects)

All Response classes for the booking domain.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.sessions.dtos import SessionResponse
from src.domain.entities import AuditEvent, Booking


# ============================================================================
# Response DTOs
# ============================================================================


class BookingResponse(BaseModel):
    """A single booking"""

    id: UUID
    student_id: UUID
    tutor_id: UUID
    scheduled_start_time: datetime
    scheduled_end_time: datetime
    status: str
    cancellation_reason: Optional[str]
    cancelled_by: Optional[UUID]
    created_at: datetime

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=booking.id,
            student_id=booking.student_id,
            tutor_id=booking.tutor_id,
            scheduled_start_time=booking.scheduled_start_time,
            scheduled_end_time=booking.scheduled_end_time,
            status=booking.status.value,
            cancellation_reason=booking.cancellation_reason,
            cancelled_by=booking.cancelled_by,
            created_at=booking.created_at,
        )


class AcceptBookingResponse(BaseModel):
    """Response for accept booking use case"""

    booking: BookingResponse
    session: SessionResponse


class BookingsResponse(BaseModel):
    """Bookings visible to the caller"""

    bookings: List[BookingResponse]


class BookingEventResponse(BaseModel):
    """One audit entry in a booking's history"""

    action: str
    user_id: Optional[UUID]
    metadata: Optional[Dict[str, Any]]
    created_at: datetime

    @classmethod
    def from_entity(cls, event: AuditEvent) -> "BookingEventResponse":
        return cls(
            action=event.action,
            user_id=event.user_id,
            metadata=event.event_metadata,
            created_at=event.created_at,
        )


class BookingHistoryResponse(BaseModel):
    """Lifecycle trail of a booking, oldest first"""

    booking_id: UUID
    events: List[BookingEventResponse]
