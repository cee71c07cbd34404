from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CallerRole
from src.domain.errors import ForbiddenError, NotFoundError

from .dtos import SessionResponse
from .participant import is_participant


class GetSessionByBookingUseCase:
    """Session attached to a booking; only accepted bookings have one"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, booking_id: UUID, user_id: UUID, role: CallerRole
    ) -> Result[SessionResponse]:
        async with self.uow:
            booking = await self.uow.bookings.get_by_id(booking_id)
            if booking is None:
                return Return.err(NotFoundError("BOOKING_NOT_FOUND", "Booking not found"))

            if not is_participant(booking, user_id, role):
                return Return.err(
                    ForbiddenError(
                        "NOT_SESSION_PARTICIPANT", "Not authorized to access this session"
                    )
                )

            session = await self.uow.sessions.get_by_booking_id(booking_id)
            if session is None:
                return Return.err(
                    NotFoundError("SESSION_NOT_FOUND", "No session for this booking")
                )

            return Return.ok(SessionResponse.from_entity(session, booking))
