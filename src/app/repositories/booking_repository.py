from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Booking


class IBookingRepository(ABC):
    """Booking repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, booking_id: UUID) -> Optional[Booking]:
        """Get booking by ID"""
        pass

    @abstractmethod
    async def create(self, booking: Booking) -> Booking:
        """
        Create a new booking.

        Raises:
            DuplicateEntryError: another pending/confirmed booking holds the slot
        """
        pass

    @abstractmethod
    async def update(self, booking: Booking) -> Booking:
        """Update existing booking"""
        pass

    @abstractmethod
    async def get_active_by_tutor_between(
        self, tutor_id: UUID, start: datetime, end: datetime
    ) -> List[Booking]:
        """Get pending/confirmed bookings whose start falls in [start, end]"""
        pass

    @abstractmethod
    async def get_by_student_id(self, student_id: UUID) -> List[Booking]:
        """Get all bookings of a student, newest start first"""
        pass

    @abstractmethod
    async def get_by_tutor_id(self, tutor_id: UUID) -> List[Booking]:
        """Get all bookings of a tutor, newest start first"""
        pass
