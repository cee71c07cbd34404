from datetime import date
from typing import List
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.blackout_date_repository import IBlackoutDateRepository
from src.app.repositories.errors import DuplicateEntryError
from src.domain.entities import BlackoutDate


class BlackoutDateRepository(IBlackoutDateRepository):
    """BlackoutDate repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, blackout: BlackoutDate) -> BlackoutDate:
        """Create a blackout date; a duplicate raises DuplicateEntryError"""
        self.session.add(blackout)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateEntryError(
                f"Blackout date {blackout.blackout_date} already exists"
            ) from e
        await self.session.refresh(blackout)
        return blackout

    async def exists(self, tutor_id: UUID, on_date: date) -> bool:
        """Check whether the tutor is blacked out on a calendar date"""
        stmt = select(BlackoutDate.id).where(
            BlackoutDate.tutor_id == tutor_id,
            BlackoutDate.blackout_date == on_date,
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def get_by_tutor_id(self, tutor_id: UUID) -> List[BlackoutDate]:
        """Get all blackout dates for a tutor, earliest first"""
        stmt = (
            select(BlackoutDate)
            .where(BlackoutDate.tutor_id == tutor_id)
            .order_by(BlackoutDate.blackout_date)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
