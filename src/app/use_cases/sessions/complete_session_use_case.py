"""
Complete Session Use Case

Ends an active session, closes its booking and shortens the chat lifetime.
"""

import logging
from typing import Optional
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, BookingStatus, CallerRole, SessionStatus
from src.domain.errors import ForbiddenError, InvalidStateError
from src.domain.session_access import ACCESS_WINDOW

from .dtos import CompleteSessionResponse, SessionResponse
from .participant import booking_state_error, load_participant_session

logger = logging.getLogger(__name__)


class CompleteSessionUseCase:
    """
    Use case for a tutor completing a session.

    Business Rules:
    - Only the booking's tutor can complete
    - Only active sessions of confirmed bookings can be completed
    - One commit: session -> completed (actual_end_time, notes),
      booking -> completed, every message expires_at = now + 1h
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        session_id: UUID,
        tutor_id: UUID,
        role: CallerRole,
        notes: Optional[str] = None,
    ) -> Result[CompleteSessionResponse]:
        if role != CallerRole.tutor:
            return Return.err(
                ForbiddenError("TUTOR_ONLY", "Only the tutor can complete a session")
            )

        async with self.uow:
            loaded = await load_participant_session(self.uow, session_id, tutor_id, role)
            if loaded.is_err():
                return Return.err(loaded.error)
            session, booking = loaded.value

            booking_error = booking_state_error(booking)
            if booking_error is not None:
                return Return.err(booking_error)

            if session.status != SessionStatus.active:
                return Return.err(
                    InvalidStateError(
                        "SESSION_NOT_ACTIVE",
                        f"Session is {session.status.value}, only active sessions can be completed",
                    )
                )

            now = self.clock.now()
            messages_expire_at = now + ACCESS_WINDOW

            session.status = SessionStatus.completed
            session.actual_end_time = now
            session.notes = notes
            session = await self.uow.sessions.update(session)

            booking.status = BookingStatus.completed
            booking = await self.uow.bookings.update(booking)

            expired_count = await self.uow.messages.set_expiry_for_session(
                session.id, messages_expire_at
            )

            audit = AuditEvent(
                user_id=tutor_id,
                booking_id=booking.id,
                action="session_completed",
                event_metadata={
                    "session_id": str(session.id),
                    "messages_expire_at": messages_expire_at.isoformat(),
                },
            )
            await self.uow.audit_events.create(audit)

            # Session, booking and messages land in the same commit
            await self.uow.commit()

            logger.info(
                f"Session {session.id} completed by tutor {tutor_id}; "
                f"{expired_count} messages now expire at {messages_expire_at.isoformat()}"
            )

            return Return.ok(
                CompleteSessionResponse(
                    session=SessionResponse.from_entity(session, booking),
                    booking_status=booking.status.value,
                    messages_expire_at=messages_expire_at,
                )
            )
