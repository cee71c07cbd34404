"""
Delete Tutor Use Case

Removes a tutor with its template rows and blackout dates.
"""

import logging
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent
from src.domain.errors import ConflictError, NotFoundError

from .dtos import DeleteTutorResponse

logger = logging.getLogger(__name__)


class DeleteTutorUseCase:
    """
    Use case for deleting a tutor (administrator only).

    Business Rules:
    - Template rows and blackout dates go with the tutor
    - Bookings are never deleted: a tutor with bookings cannot be removed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tutor_id: UUID) -> Result[DeleteTutorResponse]:
        async with self.uow:
            tutor = await self.uow.tutors.get_by_id(tutor_id)
            if tutor is None:
                return Return.err(NotFoundError("TUTOR_NOT_FOUND", "Tutor not found"))

            bookings = await self.uow.bookings.get_by_tutor_id(tutor_id)
            if bookings:
                return Return.err(
                    ConflictError(
                        "TUTOR_HAS_BOOKINGS",
                        "Tutor has bookings and cannot be deleted",
                    )
                )

            await self.uow.tutors.delete(tutor)

            audit = AuditEvent(user_id=tutor_id, action="tutor_deleted")
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Tutor {tutor_id} deleted")

            return Return.ok(DeleteTutorResponse(status="deleted"))
