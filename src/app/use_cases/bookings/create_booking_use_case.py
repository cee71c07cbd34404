"""
Create Booking Use Case

Claims one hour-slot of a tutor for a student.
"""

import logging
from datetime import datetime
from uuid import UUID

from src.libs.result import Result, Return
from src.app.repositories.errors import DuplicateEntryError
from src.app.services.clock import Clock
from src.app.services.slot_resolver import SlotResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import BOOKING_DURATION, AuditEvent, Booking, BookingStatus, CallerRole
from src.domain.errors import (
    ForbiddenError,
    NotFoundError,
    SlotUnavailableError,
    ValidationError,
)

from .dtos import BookingResponse

logger = logging.getLogger(__name__)


class CreateBookingUseCase:
    """
    Use case for booking a slot.

    Business Rules:
    - Only students create bookings
    - Start must fall exactly on the hour; end is start + 1 hour
    - Slot availability is re-checked here; what the UI showed is advisory
    - A concurrent booking that wins the same slot makes this one fail with
      SLOT_UNAVAILABLE; nothing is retried
    - New bookings start as pending and already hold the slot
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, student_id: UUID, role: CallerRole, tutor_id: UUID, scheduled_start: datetime
    ) -> Result[BookingResponse]:
        """
        Execute create booking use case.

        Args:
            student_id: Student ID from JWT
            role: Caller role from JWT (must be student)
            tutor_id: Tutor to book
            scheduled_start: Slot start, naive UTC

        Returns:
            Result with BookingResponse DTO, or Error
        """
        if role != CallerRole.student:
            return Return.err(
                ForbiddenError("STUDENT_ONLY", "Only students can create bookings")
            )

        if scheduled_start.minute or scheduled_start.second or scheduled_start.microsecond:
            return Return.err(
                ValidationError(
                    "INVALID_START_TIME", "Bookings must start exactly on the hour"
                )
            )

        if scheduled_start <= self.clock.now():
            return Return.err(
                SlotUnavailableError("SLOT_IN_PAST", "Time slot has already started")
            )

        async with self.uow:
            tutor = await self.uow.tutors.get_by_id(tutor_id)
            if tutor is None:
                return Return.err(NotFoundError("TUTOR_NOT_FOUND", "Tutor not found"))

            resolver = SlotResolver(self.uow)
            if not await resolver.is_slot_available(tutor_id, scheduled_start):
                return Return.err(
                    SlotUnavailableError("SLOT_UNAVAILABLE", "Time slot is not available")
                )

            booking = Booking(
                student_id=student_id,
                tutor_id=tutor_id,
                scheduled_start_time=scheduled_start,
                scheduled_end_time=scheduled_start + BOOKING_DURATION,
                status=BookingStatus.pending,
            )

            try:
                booking = await self.uow.bookings.create(booking)
            except DuplicateEntryError:
                logger.warning(
                    f"Lost race for tutor {tutor_id} slot {scheduled_start.isoformat()}"
                )
                return Return.err(
                    SlotUnavailableError("SLOT_UNAVAILABLE", "Time slot is not available")
                )

            audit = AuditEvent(
                user_id=student_id,
                booking_id=booking.id,
                action="booking_created",
                event_metadata={
                    "tutor_id": str(tutor_id),
                    "scheduled_start_time": scheduled_start.isoformat(),
                },
            )
            await self.uow.audit_events.create(audit)

            # Commit transaction
            await self.uow.commit()

            logger.info(
                f"Booking {booking.id} created: student {student_id}, "
                f"tutor {tutor_id}, {scheduled_start.isoformat()}"
            )

            return Return.ok(BookingResponse.from_entity(booking))
