"""
Set Slot Availability Use Case

Toggles a single hour of a tutor's template.
"""

from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.availability import is_valid_hour
from src.domain.entities import AuditEvent, CallerRole
from src.domain.errors import ForbiddenError, NotFoundError, ValidationError

from .dtos import TimeSlotResponse


class SetSlotAvailabilityUseCase:
    """
    Use case for toggling one hour of availability.

    Business Rules:
    - Only the tutor can change their own template
    - hour must be within 0-23
    - Other hours are not touched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tutor_id: UUID, role: CallerRole, hour: int, is_available: bool
    ) -> Result[TimeSlotResponse]:
        if role != CallerRole.tutor:
            return Return.err(
                ForbiddenError("TUTOR_ONLY", "Only tutors can update availability")
            )

        if not is_valid_hour(hour):
            return Return.err(
                ValidationError("INVALID_HOUR", "Hour must be between 0 and 23")
            )

        async with self.uow:
            tutor = await self.uow.tutors.get_by_id(tutor_id)
            if tutor is None:
                return Return.err(NotFoundError("TUTOR_NOT_FOUND", "Tutor not found"))

            slot = await self.uow.time_slots.upsert_slot(tutor_id, hour, is_available)

            audit = AuditEvent(
                user_id=tutor_id,
                action="availability_slot_updated",
                event_metadata={"hour_start": hour, "is_available": is_available},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(
                TimeSlotResponse(
                    tutor_id=tutor_id,
                    hour_start=slot.hour_start,
                    is_available=slot.is_available,
                )
            )
