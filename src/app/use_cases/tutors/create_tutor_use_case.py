"""
Create Tutor Use Case

Registers a tutor and initializes the 24-row availability template.
"""

import logging
from typing import Iterable, Optional
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.availability import AvailabilityTemplate, is_valid_hour
from src.domain.entities import AuditEvent, Tutor
from src.domain.errors import ConflictError, ValidationError

from .dtos import TutorResponse

logger = logging.getLogger(__name__)


class CreateTutorUseCase:
    """
    Use case for creating a tutor (administrator only).

    Business Rules:
    - All 24 template rows are written at creation
    - Hours listed in initial_hours start open, every other hour closed
    - tutor_id may be supplied to reuse the identity provider's user id
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        display_name: str,
        initial_hours: Optional[Iterable[int]] = None,
        tutor_id: Optional[UUID] = None,
    ) -> Result[TutorResponse]:
        """
        Execute create tutor use case.

        Args:
            display_name: Name shown to students
            initial_hours: Hours (0-23) open from the start
            tutor_id: Optional explicit ID

        Returns:
            Result with TutorResponse DTO, or Error
        """
        hours = list(initial_hours or [])
        invalid = [hour for hour in hours if not is_valid_hour(hour)]
        if invalid:
            return Return.err(
                ValidationError(
                    "INVALID_HOUR",
                    f"Hours must be integers between 0 and 23, got: {invalid}",
                )
            )

        if not display_name or not display_name.strip():
            return Return.err(
                ValidationError("INVALID_DISPLAY_NAME", "Display name is required")
            )

        template = AvailabilityTemplate.from_hours(hours)

        async with self.uow:
            if tutor_id is not None:
                existing = await self.uow.tutors.get_by_id(tutor_id)
                if existing is not None:
                    return Return.err(
                        ConflictError("TUTOR_EXISTS", "A tutor with this ID already exists")
                    )

            tutor = Tutor(display_name=display_name.strip())
            if tutor_id is not None:
                tutor.id = tutor_id
            tutor = await self.uow.tutors.create(tutor)

            # Upsert semantics: safe even if rows already exist for this ID
            await self.uow.time_slots.save_template(tutor.id, template)

            audit = AuditEvent(
                user_id=tutor.id,
                action="tutor_created",
                event_metadata={"available_hours": template.available_hours()},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Tutor {tutor.id} created with hours {template.available_hours()}")

            return Return.ok(
                TutorResponse(
                    id=tutor.id,
                    display_name=tutor.display_name,
                    available_hours=template.available_hours(),
                    created_at=tutor.created_at,
                )
            )
