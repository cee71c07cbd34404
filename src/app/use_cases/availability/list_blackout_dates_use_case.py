from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import NotFoundError

from .dtos import BlackoutDateResponse, BlackoutDatesResponse


class ListBlackoutDatesUseCase:
    """List a tutor's blackout dates, earliest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tutor_id: UUID) -> Result[BlackoutDatesResponse]:
        async with self.uow:
            tutor = await self.uow.tutors.get_by_id(tutor_id)
            if tutor is None:
                return Return.err(NotFoundError("TUTOR_NOT_FOUND", "Tutor not found"))

            blackouts = await self.uow.blackout_dates.get_by_tutor_id(tutor_id)

            return Return.ok(
                BlackoutDatesResponse(
                    tutor_id=tutor_id,
                    blackout_dates=[BlackoutDateResponse.from_entity(b) for b in blackouts],
                )
            )
