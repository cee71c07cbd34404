from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.availability import AvailabilityTemplate
from src.domain.entities import TutorTimeSlot


class ITimeSlotRepository(ABC):
    """TutorTimeSlot repository interface - application layer"""

    @abstractmethod
    async def get_by_tutor_id(self, tutor_id: UUID) -> List[TutorTimeSlot]:
        """Get all template rows for a tutor, ordered by hour"""
        pass

    @abstractmethod
    async def save_template(self, tutor_id: UUID, template: AvailabilityTemplate) -> None:
        """Upsert all 24 rows so they match the template"""
        pass

    @abstractmethod
    async def upsert_slot(
        self, tutor_id: UUID, hour_start: int, is_available: bool
    ) -> TutorTimeSlot:
        """Set a single hour, creating its row if missing"""
        pass
