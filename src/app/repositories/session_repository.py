from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import CallerRole, Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def get_by_booking_id(self, booking_id: UUID) -> Optional[Session]:
        """Get the session attached to a booking"""
        pass

    @abstractmethod
    async def get_active_for_participant(
        self, user_id: UUID, role: CallerRole
    ) -> Optional[Session]:
        """Get the participant's session currently in status active"""
        pass

    @abstractmethod
    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session_obj: Session) -> Session:
        """Update existing session"""
        pass
