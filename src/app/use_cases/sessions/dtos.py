"""
Session Use Case DTOs (Data Transfer Objects)

All Response classes for the session domain.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import Booking, Session, SessionMessage


# ============================================================================
# Response DTOs
# ============================================================================


class SessionResponse(BaseModel):
    """Session with its booking's schedule"""

    id: UUID
    booking_id: UUID
    status: str
    actual_start_time: Optional[datetime]
    actual_end_time: Optional[datetime]
    notes: Optional[str]
    scheduled_start: Optional[datetime] = None
    scheduled_end: Optional[datetime] = None
    tutor_id: Optional[UUID] = None
    student_id: Optional[UUID] = None

    @classmethod
    def from_entity(
        cls, session: Session, booking: Optional[Booking] = None
    ) -> "SessionResponse":
        response = cls(
            id=session.id,
            booking_id=session.booking_id,
            status=session.status.value,
            actual_start_time=session.actual_start_time,
            actual_end_time=session.actual_end_time,
            notes=session.notes,
        )
        if booking is not None:
            response.scheduled_start = booking.scheduled_start_time
            response.scheduled_end = booking.scheduled_end_time
            response.tutor_id = booking.tutor_id
            response.student_id = booking.student_id
        return response


class SessionAccessResponse(BaseModel):
    """Response for check access use case"""

    session_id: UUID
    access_status: str
    access_message: str
    can_message: bool
    can_start: bool
    session: SessionResponse


class StartSessionResponse(BaseModel):
    """Response for start session use case"""

    message: str
    started: bool
    session: SessionResponse


class CompleteSessionResponse(BaseModel):
    """Response for complete session use case"""

    session: SessionResponse
    booking_status: str
    messages_expire_at: datetime


class MessageResponse(BaseModel):
    """A single chat message"""

    id: UUID
    session_id: UUID
    sender_id: UUID
    message_content: str
    sent_at: datetime
    expires_at: datetime
    is_me: bool = False

    @classmethod
    def from_entity(
        cls, message: SessionMessage, viewer_id: Optional[UUID] = None
    ) -> "MessageResponse":
        return cls(
            id=message.id,
            session_id=message.session_id,
            sender_id=message.sender_id,
            message_content=message.message_content,
            sent_at=message.sent_at,
            expires_at=message.expires_at,
            is_me=viewer_id is not None and message.sender_id == viewer_id,
        )


class MessagesResponse(BaseModel):
    """Unexpired messages of a session"""

    session_id: UUID
    messages: List[MessageResponse]
    total_messages: int


class ActiveSessionResponse(BaseModel):
    """The caller's active session, if any"""

    active_session: Optional[SessionResponse]
