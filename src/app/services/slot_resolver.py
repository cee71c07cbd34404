"""
Slot Resolver

Combines a tutor's availability template, blackout dates and existing
bookings into the hours that can still be booked. Both the listing query and
the single-slot check used at booking time go through ``_open_hours`` so what
is shown and what is allowed cannot drift apart.

Runs inside the caller's unit of work; it never opens or commits one.
"""

from datetime import date, datetime, time
from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.availability import AvailabilityTemplate


class SlotResolver:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def resolve_open_slots(self, tutor_id: UUID, on_date: date) -> List[int]:
        """Bookable hours for the date, ascending"""
        return await self._open_hours(tutor_id, on_date)

    async def is_slot_available(self, tutor_id: UUID, start: datetime) -> bool:
        """Whether the hour beginning at ``start`` can be booked right now"""
        return start.hour in await self._open_hours(tutor_id, start.date())

    async def _open_hours(self, tutor_id: UUID, on_date: date) -> List[int]:
        # Blackout wins over everything else
        if await self.uow.blackout_dates.exists(tutor_id, on_date):
            return []

        rows = await self.uow.time_slots.get_by_tutor_id(tutor_id)
        template = AvailabilityTemplate.from_rows(rows)

        bookings = await self.uow.bookings.get_active_by_tutor_between(
            tutor_id,
            datetime.combine(on_date, time.min),
            datetime.combine(on_date, time.max),
        )
        booked_hours = {booking.scheduled_start_time.hour for booking in bookings}

        return [hour for hour in template.available_hours() if hour not in booked_hours]
