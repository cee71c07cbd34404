"""
Start Session Use Case

Tutor starts the session; a student (or a tutor on an already running
session) simply joins.
"""

import logging
from datetime import datetime
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    ENDED_SESSION_STATUSES,
    AccessState,
    AuditEvent,
    CallerRole,
    SessionStatus,
)
from src.domain.errors import InvalidStateError
from src.domain.session_access import SessionAccessGate

from .dtos import SessionResponse, StartSessionResponse
from .participant import booking_state_error, load_participant_session

logger = logging.getLogger(__name__)


class StartSessionUseCase:
    """
    Use case for starting or joining a session.

    Business Rules:
    - Participants only
    - Booking must be confirmed
    - Not before scheduled start - 1h, not after scheduled end + 1h
    - Ended sessions (completed / no_show) cannot be started
    - Tutor on a scheduled session: scheduled -> active, actual_start_time = now
    - Anyone else joins without changing state
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, session_id: UUID, user_id: UUID, role: CallerRole
    ) -> Result[StartSessionResponse]:
        async with self.uow:
            loaded = await load_participant_session(self.uow, session_id, user_id, role)
            if loaded.is_err():
                return Return.err(loaded.error)
            session, booking = loaded.value

            now = self.clock.now()

            if session.status in ENDED_SESSION_STATUSES:
                return Return.err(
                    InvalidStateError("SESSION_ENDED", "Session has already ended")
                )

            booking_error = booking_state_error(booking)
            if booking_error is not None:
                return Return.err(booking_error)

            access = SessionAccessGate.evaluate(
                now,
                booking.scheduled_start_time,
                booking.scheduled_end_time,
                session.status,
                role,
            )

            if access.state == AccessState.too_early:
                opens_at = SessionAccessGate.opens_at(booking.scheduled_start_time)
                return Return.err(
                    InvalidStateError(
                        "SESSION_TOO_EARLY",
                        f"Session can be started from {opens_at.isoformat()}",
                    )
                )

            if access.state == AccessState.expired:
                return Return.err(
                    InvalidStateError("SESSION_EXPIRED", "Session access has expired")
                )

            if not access.can_start:
                return Return.ok(
                    StartSessionResponse(
                        message="Joined session",
                        started=False,
                        session=SessionResponse.from_entity(session, booking),
                    )
                )

            session.status = SessionStatus.active
            session.actual_start_time = now
            session = await self.uow.sessions.update(session)

            await self._audit(user_id, booking.id, session.id, now)

            await self.uow.commit()

            logger.info(f"Session {session.id} started by tutor {user_id}")

            return Return.ok(
                StartSessionResponse(
                    message="Session started",
                    started=True,
                    session=SessionResponse.from_entity(session, booking),
                )
            )

    async def _audit(self, tutor_id: UUID, booking_id: UUID, session_id: UUID, now: datetime):
        audit = AuditEvent(
            user_id=tutor_id,
            booking_id=booking_id,
            action="session_started",
            event_metadata={"session_id": str(session_id), "started_at": now.isoformat()},
        )
        await self.uow.audit_events.create(audit)
