from abc import ABC, abstractmethod
from datetime import datetime
from typing import List
from uuid import UUID

from src.domain.entities import SessionMessage


class ISessionMessageRepository(ABC):
    """SessionMessage repository interface - application layer"""

    @abstractmethod
    async def create(self, message: SessionMessage) -> SessionMessage:
        """Create a new message"""
        pass

    @abstractmethod
    async def get_unexpired_by_session_id(
        self, session_id: UUID, now: datetime
    ) -> List[SessionMessage]:
        """Get messages with expires_at >= now, oldest first"""
        pass

    @abstractmethod
    async def set_expiry_for_session(self, session_id: UUID, expires_at: datetime) -> int:
        """Move expires_at of every message in the session; returns row count"""
        pass
