from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Booking, CallerRole, Session, SessionStatus


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        stmt = select(Session).where(Session.id == session_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_booking_id(self, booking_id: UUID) -> Optional[Session]:
        """Get the session attached to a booking"""
        stmt = select(Session).where(Session.booking_id == booking_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_for_participant(
        self, user_id: UUID, role: CallerRole
    ) -> Optional[Session]:
        """Get the participant's session currently in status active"""
        participant_column = (
            Booking.tutor_id if role == CallerRole.tutor else Booking.student_id
        )
        stmt = (
            select(Session)
            .join(Booking, Booking.id == Session.booking_id)
            .where(participant_column == user_id, Session.status == SessionStatus.active)
            .order_by(Booking.scheduled_start_time)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def update(self, session_obj: Session) -> Session:
        """Update existing session"""
        session_obj.updated_at = datetime.utcnow()
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj
