"""
Cancel Booking Use Case

Lets either participant withdraw from a pending or confirmed booking.
"""

import logging
from datetime import timedelta
from typing import Optional
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ACTIVE_BOOKING_STATUSES, AuditEvent, BookingStatus, CallerRole
from src.domain.errors import ForbiddenError, InvalidStateError, NotFoundError

from .dtos import BookingResponse

logger = logging.getLogger(__name__)

DEFAULT_CANCELLATION_CUTOFF = timedelta(hours=2)


class CancelBookingUseCase:
    """
    Use case for cancelling a booking.

    Business Rules:
    - Caller must be the booking's student or tutor
    - Only pending or confirmed bookings can be cancelled
    - A confirmed booking cannot be cancelled once its start is closer than
      the cutoff (None disables the cutoff); pending bookings always can
    - Records who cancelled and why
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Clock,
        cutoff: Optional[timedelta] = DEFAULT_CANCELLATION_CUTOFF,
    ):
        self.uow = uow
        self.clock = clock
        self.cutoff = cutoff

    async def execute(
        self,
        user_id: UUID,
        role: CallerRole,
        booking_id: UUID,
        reason: Optional[str] = None,
    ) -> Result[BookingResponse]:
        """
        Execute cancel booking use case.

        Args:
            user_id: Caller ID from JWT
            role: Caller role from JWT
            booking_id: Booking to cancel
            reason: Optional cancellation reason

        Returns:
            Result with the cancelled booking, or Error
        """
        async with self.uow:
            booking = await self.uow.bookings.get_by_id(booking_id)
            if booking is None:
                return Return.err(NotFoundError("BOOKING_NOT_FOUND", "Booking not found"))

            is_owner = (role == CallerRole.student and booking.student_id == user_id) or (
                role == CallerRole.tutor and booking.tutor_id == user_id
            )
            if not is_owner:
                return Return.err(
                    ForbiddenError(
                        "NOT_BOOKING_PARTICIPANT", "Not authorized to cancel this booking"
                    )
                )

            if booking.status not in ACTIVE_BOOKING_STATUSES:
                return Return.err(
                    InvalidStateError(
                        "BOOKING_NOT_CANCELLABLE",
                        f"Booking cannot be cancelled in status {booking.status.value}",
                    )
                )

            if booking.status == BookingStatus.confirmed and self.cutoff is not None:
                time_to_start = booking.scheduled_start_time - self.clock.now()
                if time_to_start < self.cutoff:
                    hours = self.cutoff.total_seconds() / 3600
                    return Return.err(
                        InvalidStateError(
                            "CANCELLATION_WINDOW_CLOSED",
                            f"Confirmed bookings cannot be cancelled within {hours:g} hours of the start",
                        )
                    )

            booking.status = BookingStatus.cancelled
            booking.cancelled_by = user_id
            booking.cancellation_reason = reason
            booking = await self.uow.bookings.update(booking)

            audit = AuditEvent(
                user_id=user_id,
                booking_id=booking.id,
                action="booking_cancelled",
                event_metadata={"reason": reason, "role": role.value},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Booking {booking.id} cancelled by {role.value} {user_id}")

            return Return.ok(BookingResponse.from_entity(booking))
