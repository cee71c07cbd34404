from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """AuditEvent repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        pass

    @abstractmethod
    async def get_by_booking_id(self, booking_id: UUID) -> List[AuditEvent]:
        """Get the lifecycle trail of a booking, oldest first"""
        pass
