from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.tutor_repository import ITutorRepository
from src.domain.entities import BlackoutDate, Tutor, TutorTimeSlot


class TutorRepository(ITutorRepository):
    """Tutor repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, tutor_id: UUID) -> Optional[Tutor]:
        """Get tutor by ID"""
        stmt = select(Tutor).where(Tutor.id == tutor_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, tutor: Tutor) -> Tutor:
        """Create a new tutor"""
        self.session.add(tutor)
        await self.session.flush()
        await self.session.refresh(tutor)
        return tutor

    async def delete(self, tutor: Tutor) -> None:
        """Delete a tutor together with its template rows and blackout dates"""
        # Bulk deletes so the cascade does not depend on SQLite foreign key pragmas
        await self.session.execute(
            delete(TutorTimeSlot).where(TutorTimeSlot.tutor_id == tutor.id)
        )
        await self.session.execute(
            delete(BlackoutDate).where(BlackoutDate.tutor_id == tutor.id)
        )
        await self.session.execute(delete(Tutor).where(Tutor.id == tutor.id))
        await self.session.flush()
