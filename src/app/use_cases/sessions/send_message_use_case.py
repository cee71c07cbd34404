"""
Send Message Use Case

Posts a chat message while the session's messaging window is open.
"""

import logging
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    SESSION_BOOKING_STATUSES,
    AccessState,
    CallerRole,
    SessionMessage,
)
from src.domain.errors import InvalidStateError, ValidationError
from src.domain.session_access import SessionAccessGate

from .dtos import MessageResponse
from .participant import booking_state_error, load_participant_session

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE_MAX_LENGTH = 1000


class SendMessageUseCase:
    """
    Use case for sending a session message.

    Business Rules:
    - Participants only, on a confirmed or completed booking
    - Content is 1..max_length characters after trimming
    - Allowed only while the access gate grants can_message
    - expires_at = scheduled end + 1h
    """

    def __init__(
        self, uow: UnitOfWork, clock: Clock, max_length: int = DEFAULT_MESSAGE_MAX_LENGTH
    ):
        self.uow = uow
        self.clock = clock
        self.max_length = max_length

    async def execute(
        self, session_id: UUID, user_id: UUID, role: CallerRole, content: str
    ) -> Result[MessageResponse]:
        content = (content or "").strip()
        if not content:
            return Return.err(ValidationError("EMPTY_MESSAGE", "Message cannot be empty"))
        if len(content) > self.max_length:
            return Return.err(
                ValidationError(
                    "MESSAGE_TOO_LONG",
                    f"Message cannot exceed {self.max_length} characters",
                )
            )

        async with self.uow:
            loaded = await load_participant_session(self.uow, session_id, user_id, role)
            if loaded.is_err():
                return Return.err(loaded.error)
            session, booking = loaded.value

            booking_error = booking_state_error(booking, SESSION_BOOKING_STATUSES)
            if booking_error is not None:
                return Return.err(booking_error)

            now = self.clock.now()
            access = SessionAccessGate.evaluate(
                now,
                booking.scheduled_start_time,
                booking.scheduled_end_time,
                session.status,
                role,
            )

            if not access.can_message:
                if access.state == AccessState.too_early:
                    return Return.err(
                        InvalidStateError(
                            "MESSAGING_NOT_OPEN",
                            "Messaging opens 1 hour before the session",
                        )
                    )
                return Return.err(
                    InvalidStateError("MESSAGING_CLOSED", "Messaging window has expired")
                )

            message = SessionMessage(
                session_id=session.id,
                sender_id=user_id,
                message_content=content,
                sent_at=now,
                expires_at=SessionAccessGate.message_expiry(booking.scheduled_end_time),
            )
            message = await self.uow.messages.create(message)

            await self.uow.commit()

            logger.debug(f"Message {message.id} sent in session {session.id}")

            return Return.ok(MessageResponse.from_entity(message, viewer_id=user_id))
