"""
Resolve Open Slots Use Case

Lists the hours of a date a student can still book with a tutor.
"""

from datetime import date
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.slot_resolver import SlotResolver
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import NotFoundError

from .dtos import OpenSlotsResponse


class ResolveOpenSlotsUseCase:
    """
    Use case for the open-slot query.

    Business Rules:
    - Blacked-out date: no slots at all
    - Otherwise template hours minus hours held by pending/confirmed bookings
    - Result is advisory; booking creation re-checks the slot
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tutor_id: UUID, on_date: date) -> Result[OpenSlotsResponse]:
        async with self.uow:
            tutor = await self.uow.tutors.get_by_id(tutor_id)
            if tutor is None:
                return Return.err(NotFoundError("TUTOR_NOT_FOUND", "Tutor not found"))

            hours = await SlotResolver(self.uow).resolve_open_slots(tutor_id, on_date)

            return Return.ok(
                OpenSlotsResponse(
                    tutor_id=tutor_id,
                    date=on_date,
                    available_hours=hours,
                    available_slots=[f"{hour:02d}:00" for hour in hours],
                )
            )
