from datetime import datetime
from typing import Dict, List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.time_slot_repository import ITimeSlotRepository
from src.domain.availability import HOURS_PER_DAY, AvailabilityTemplate
from src.domain.entities import TutorTimeSlot


class TimeSlotRepository(ITimeSlotRepository):
    """TutorTimeSlot repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_tutor_id(self, tutor_id: UUID) -> List[TutorTimeSlot]:
        """Get all template rows for a tutor, ordered by hour"""
        stmt = (
            select(TutorTimeSlot)
            .where(TutorTimeSlot.tutor_id == tutor_id)
            .order_by(TutorTimeSlot.hour_start)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def save_template(self, tutor_id: UUID, template: AvailabilityTemplate) -> None:
        """Upsert all 24 rows so they match the template"""
        rows = await self._rows_by_hour(tutor_id)
        now = datetime.utcnow()

        for hour in range(HOURS_PER_DAY):
            is_available = template.is_available(hour)
            row = rows.get(hour)
            if row is None:
                self.session.add(
                    TutorTimeSlot(
                        tutor_id=tutor_id, hour_start=hour, is_available=is_available
                    )
                )
            elif row.is_available != is_available:
                row.is_available = is_available
                row.updated_at = now
                self.session.add(row)

        await self.session.flush()

    async def upsert_slot(
        self, tutor_id: UUID, hour_start: int, is_available: bool
    ) -> TutorTimeSlot:
        """Set a single hour, creating its row if missing"""
        stmt = select(TutorTimeSlot).where(
            TutorTimeSlot.tutor_id == tutor_id,
            TutorTimeSlot.hour_start == hour_start,
        )
        result = await self.session.execute(stmt)
        row = result.scalar_one_or_none()

        if row is None:
            row = TutorTimeSlot(
                tutor_id=tutor_id, hour_start=hour_start, is_available=is_available
            )
        else:
            row.is_available = is_available
            row.updated_at = datetime.utcnow()

        self.session.add(row)
        await self.session.flush()
        await self.session.refresh(row)
        return row

    async def _rows_by_hour(self, tutor_id: UUID) -> Dict[int, TutorTimeSlot]:
        return {row.hour_start: row for row in await self.get_by_tutor_id(tutor_id)}
