from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CallerRole

from .dtos import BookingResponse, BookingsResponse


class ListBookingsUseCase:
    """List the caller's bookings, newest start first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, role: CallerRole) -> Result[BookingsResponse]:
        async with self.uow:
            if role == CallerRole.tutor:
                bookings = await self.uow.bookings.get_by_tutor_id(user_id)
            else:
                bookings = await self.uow.bookings.get_by_student_id(user_id)

            return Return.ok(
                BookingsResponse(bookings=[BookingResponse.from_entity(b) for b in bookings])
            )
