"""
Get Booking History Use Case

Returns the audit trail recorded for one booking.
"""

from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CallerRole
from src.domain.errors import ForbiddenError, NotFoundError

from .dtos import BookingEventResponse, BookingHistoryResponse


class GetBookingHistoryUseCase:
    """
    Use case for reading a booking's lifecycle events.

    Business Rules:
    - Caller must be the booking's student or tutor
    - Events ordered oldest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, role: CallerRole, booking_id: UUID
    ) -> Result[BookingHistoryResponse]:
        async with self.uow:
            booking = await self.uow.bookings.get_by_id(booking_id)
            if booking is None:
                return Return.err(NotFoundError("BOOKING_NOT_FOUND", "Booking not found"))

            owner_id = booking.tutor_id if role == CallerRole.tutor else booking.student_id
            if owner_id != user_id:
                return Return.err(
                    ForbiddenError(
                        "NOT_BOOKING_PARTICIPANT", "Not authorized to view this booking"
                    )
                )

            events = await self.uow.audit_events.get_by_booking_id(booking.id)

            return Return.ok(
                BookingHistoryResponse(
                    booking_id=booking.id,
                    events=[BookingEventResponse.from_entity(e) for e in events],
                )
            )
