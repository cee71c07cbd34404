from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Tutor


class ITutorRepository(ABC):
    """Tutor repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tutor_id: UUID) -> Optional[Tutor]:
        """Get tutor by ID"""
        pass

    @abstractmethod
    async def create(self, tutor: Tutor) -> Tutor:
        """Create a new tutor"""
        pass

    @abstractmethod
    async def delete(self, tutor: Tutor) -> None:
        """Delete a tutor together with its template rows and blackout dates"""
        pass
