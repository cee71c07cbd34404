"""
Add Blackout Date Use Case

Marks a whole calendar date as unbookable for a tutor.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from src.libs.result import Result, Return
from src.app.repositories.errors import DuplicateEntryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, BlackoutDate, CallerRole
from src.domain.errors import ConflictError, ForbiddenError, NotFoundError

from .dtos import BlackoutDateResponse


class AddBlackoutDateUseCase:
    """
    Use case for adding a blackout date.

    Business Rules:
    - Only the tutor can black out their own dates
    - (tutor, date) is unique; a duplicate fails with 409 Conflict
    - Existing bookings on that date are left untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tutor_id: UUID,
        role: CallerRole,
        blackout_date: date,
        reason: Optional[str] = None,
    ) -> Result[BlackoutDateResponse]:
        """
        Execute add blackout date use case.

        Args:
            tutor_id: Tutor ID from JWT
            role: Caller role from JWT (must be tutor)
            blackout_date: Calendar date to block
            reason: Optional free-text reason

        Returns:
            Result with the created blackout date, or Error
        """
        if role != CallerRole.tutor:
            return Return.err(
                ForbiddenError("TUTOR_ONLY", "Only tutors can add blackout dates")
            )

        async with self.uow:
            tutor = await self.uow.tutors.get_by_id(tutor_id)
            if tutor is None:
                return Return.err(NotFoundError("TUTOR_NOT_FOUND", "Tutor not found"))

            try:
                blackout = await self.uow.blackout_dates.create(
                    BlackoutDate(tutor_id=tutor_id, blackout_date=blackout_date, reason=reason)
                )
            except DuplicateEntryError:
                return Return.err(
                    ConflictError(
                        "BLACKOUT_DATE_EXISTS",
                        f"{blackout_date.isoformat()} is already marked unavailable",
                    )
                )

            audit = AuditEvent(
                user_id=tutor_id,
                action="blackout_added",
                event_metadata={"blackout_date": blackout_date.isoformat(), "reason": reason},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            return Return.ok(BlackoutDateResponse.from_entity(blackout))
