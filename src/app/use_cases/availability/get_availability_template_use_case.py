from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.availability import AvailabilityTemplate
from src.domain.errors import NotFoundError

from .dtos import AvailabilityTemplateResponse


class GetAvailabilityTemplateUseCase:
    """Read a tutor's recurring availability as a list of open hours"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tutor_id: UUID) -> Result[AvailabilityTemplateResponse]:
        async with self.uow:
            tutor = await self.uow.tutors.get_by_id(tutor_id)
            if tutor is None:
                return Return.err(NotFoundError("TUTOR_NOT_FOUND", "Tutor not found"))

            rows = await self.uow.time_slots.get_by_tutor_id(tutor_id)
            template = AvailabilityTemplate.from_rows(rows)

            return Return.ok(
                AvailabilityTemplateResponse(
                    tutor_id=tutor_id, available_hours=template.available_hours()
                )
            )
