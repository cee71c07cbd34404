"""
Accept Booking Use Case

Confirms a pending booking and opens its session.
"""

import logging
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sessions.dtos import SessionResponse
from src.domain.entities import AuditEvent, BookingStatus, CallerRole, Session, SessionStatus
from src.domain.errors import ForbiddenError, InvalidStateError, NotFoundError

from .dtos import AcceptBookingResponse, BookingResponse

logger = logging.getLogger(__name__)


class AcceptBookingUseCase:
    """
    Use case for a tutor accepting a booking.

    Business Rules:
    - Only the booking's tutor can accept
    - Only pending bookings can be accepted
    - Booking -> confirmed and Session(scheduled) are committed together;
      a confirmed booking never exists without its session
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tutor_id: UUID, role: CallerRole, booking_id: UUID
    ) -> Result[AcceptBookingResponse]:
        async with self.uow:
            booking = await self.uow.bookings.get_by_id(booking_id)
            if booking is None:
                return Return.err(NotFoundError("BOOKING_NOT_FOUND", "Booking not found"))

            if role != CallerRole.tutor or booking.tutor_id != tutor_id:
                return Return.err(
                    ForbiddenError(
                        "NOT_BOOKING_TUTOR", "Not authorized to modify this booking"
                    )
                )

            if booking.status != BookingStatus.pending:
                return Return.err(
                    InvalidStateError(
                        "BOOKING_NOT_PENDING",
                        f"Booking is {booking.status.value}, only pending bookings can be accepted",
                    )
                )

            booking.status = BookingStatus.confirmed
            booking = await self.uow.bookings.update(booking)

            session = await self.uow.sessions.create(
                Session(booking_id=booking.id, status=SessionStatus.scheduled)
            )

            audit = AuditEvent(
                user_id=tutor_id,
                booking_id=booking.id,
                action="booking_accepted",
                event_metadata={"session_id": str(session.id)},
            )
            await self.uow.audit_events.create(audit)

            # Booking and session land in the same commit
            await self.uow.commit()

            logger.info(f"Booking {booking.id} accepted, session {session.id} scheduled")

            return Return.ok(
                AcceptBookingResponse(
                    booking=BookingResponse.from_entity(booking),
                    session=SessionResponse.from_entity(session, booking),
                )
            )
