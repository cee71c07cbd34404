from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CallerRole

from .dtos import ActiveSessionResponse, SessionResponse


class GetActiveSessionUseCase:
    """The caller's session currently in status active, or none"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, role: CallerRole) -> Result[ActiveSessionResponse]:
        async with self.uow:
            session = await self.uow.sessions.get_active_for_participant(user_id, role)
            if session is None:
                return Return.ok(ActiveSessionResponse(active_session=None))

            booking = await self.uow.bookings.get_by_id(session.booking_id)
            return Return.ok(
                ActiveSessionResponse(active_session=SessionResponse.from_entity(session, booking))
            )
