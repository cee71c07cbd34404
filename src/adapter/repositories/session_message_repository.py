from datetime import datetime
from typing import List
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_message_repository import ISessionMessageRepository
from src.domain.entities import SessionMessage


class SessionMessageRepository(ISessionMessageRepository):
    """SessionMessage repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, message: SessionMessage) -> SessionMessage:
        """Create a new message"""
        self.session.add(message)
        await self.session.flush()
        await self.session.refresh(message)
        return message

    async def get_unexpired_by_session_id(
        self, session_id: UUID, now: datetime
    ) -> List[SessionMessage]:
        """Get messages with expires_at >= now, oldest first"""
        stmt = (
            select(SessionMessage)
            .where(
                SessionMessage.session_id == session_id,
                SessionMessage.expires_at >= now,
            )
            .order_by(SessionMessage.sent_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def set_expiry_for_session(self, session_id: UUID, expires_at: datetime) -> int:
        """Move expires_at of every message in the session; returns row count"""
        stmt = (
            update(SessionMessage)
            .where(SessionMessage.session_id == session_id)
            .values(expires_at=expires_at)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
