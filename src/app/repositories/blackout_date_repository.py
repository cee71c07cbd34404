from abc import ABC, abstractmethod
from datetime import date
from typing import List
from uuid import UUID

from src.domain.entities import BlackoutDate


class IBlackoutDateRepository(ABC):
    """BlackoutDate repository interface - application layer"""

    @abstractmethod
    async def create(self, blackout: BlackoutDate) -> BlackoutDate:
        """
        Create a blackout date.

        Raises:
            DuplicateEntryError: the tutor already has this date blacked out
        """
        pass

    @abstractmethod
    async def exists(self, tutor_id: UUID, on_date: date) -> bool:
        """Check whether the tutor is blacked out on a calendar date"""
        pass

    @abstractmethod
    async def get_by_tutor_id(self, tutor_id: UUID) -> List[BlackoutDate]:
        """Get all blackout dates for a tutor, earliest first"""
        pass
