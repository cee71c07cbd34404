"""
Check Access Use Case

Reports what a participant may do with a session right now.
"""

from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CallerRole
from src.domain.session_access import SessionAccessGate

from .dtos import SessionAccessResponse, SessionResponse
from .participant import load_participant_session


class CheckAccessUseCase:
    """
    Use case for evaluating session access.

    Business Rules:
    - Participants only
    - Read-only: state is recomputed from the clock on every call
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, session_id: UUID, user_id: UUID, role: CallerRole
    ) -> Result[SessionAccessResponse]:
        async with self.uow:
            loaded = await load_participant_session(self.uow, session_id, user_id, role)
            if loaded.is_err():
                return Return.err(loaded.error)
            session, booking = loaded.value

            access = SessionAccessGate.evaluate(
                self.clock.now(),
                booking.scheduled_start_time,
                booking.scheduled_end_time,
                session.status,
                role,
            )

            return Return.ok(
                SessionAccessResponse(
                    session_id=session.id,
                    access_status=access.state.value,
                    access_message=access.message,
                    can_message=access.can_message,
                    can_start=access.can_start,
                    session=SessionResponse.from_entity(session, booking),
                )
            )
