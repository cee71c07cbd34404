"""
Reject Booking Use Case

Declines a pending booking and frees its slot.
"""

import logging
from typing import Optional
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, BookingStatus, CallerRole
from src.domain.errors import ForbiddenError, InvalidStateError, NotFoundError

from .dtos import BookingResponse

logger = logging.getLogger(__name__)


class RejectBookingUseCase:
    """
    Use case for a tutor rejecting a booking.

    Business Rules:
    - Only the booking's tutor can reject
    - Only pending bookings can be rejected
    - Records who rejected and why
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tutor_id: UUID,
        role: CallerRole,
        booking_id: UUID,
        reason: Optional[str] = None,
    ) -> Result[BookingResponse]:
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
                        f"Booking is {booking.status.value}, only pending bookings can be rejected",
                    )
                )

            booking.status = BookingStatus.rejected
            booking.cancelled_by = tutor_id
            booking.cancellation_reason = reason
            booking = await self.uow.bookings.update(booking)

            audit = AuditEvent(
                user_id=tutor_id,
                booking_id=booking.id,
                action="booking_rejected",
                event_metadata={"reason": reason},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Booking {booking.id} rejected by tutor {tutor_id}")

            return Return.ok(BookingResponse.from_entity(booking))
