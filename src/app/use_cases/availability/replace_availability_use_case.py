"""
Replace Availability Use Case

Replaces a tutor's whole 24-hour template in one unit of work.
"""

import logging
from typing import List
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.availability import AvailabilityTemplate, is_valid_hour
from src.domain.entities import AuditEvent, CallerRole
from src.domain.errors import ForbiddenError, NotFoundError, ValidationError

from .dtos import AvailabilityTemplateResponse

logger = logging.getLogger(__name__)


class ReplaceAvailabilityUseCase:
    """
    Use case for replacing a tutor's recurring availability.

    Business Rules:
    - Only the tutor can change their own template
    - Every hour 0-23 is written: open if listed, closed otherwise
    - Idempotent: the same hour set twice leaves the same template
    - Existing bookings in hours that become closed are left untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tutor_id: UUID, role: CallerRole, available_hours: List[int]
    ) -> Result[AvailabilityTemplateResponse]:
        """
        Execute replace availability use case.

        Args:
            tutor_id: Tutor ID from JWT
            role: Caller role from JWT (must be tutor)
            available_hours: Hours (0-23) the tutor is open

        Returns:
            Result with the new template, or Error
        """
        if role != CallerRole.tutor:
            return Return.err(
                ForbiddenError("TUTOR_ONLY", "Only tutors can update availability")
            )

        invalid = [hour for hour in available_hours if not is_valid_hour(hour)]
        if invalid:
            return Return.err(
                ValidationError(
                    "INVALID_HOUR",
                    f"Hours must be integers between 0 and 23, got: {invalid}",
                )
            )

        template = AvailabilityTemplate.from_hours(available_hours)

        async with self.uow:
            tutor = await self.uow.tutors.get_by_id(tutor_id)
            if tutor is None:
                return Return.err(NotFoundError("TUTOR_NOT_FOUND", "Tutor not found"))

            await self.uow.time_slots.save_template(tutor_id, template)

            audit = AuditEvent(
                user_id=tutor_id,
                action="availability_updated",
                event_metadata={"available_hours": template.available_hours()},
            )
            await self.uow.audit_events.create(audit)

            # Commit transaction
            await self.uow.commit()

            logger.info(
                f"Availability replaced for tutor {tutor_id}: {template.available_hours()}"
            )

            return Return.ok(
                AvailabilityTemplateResponse(
                    tutor_id=tutor_id, available_hours=template.available_hours()
                )
            )
