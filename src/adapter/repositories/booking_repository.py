from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.booking_repository import IBookingRepository
from src.app.repositories.errors import DuplicateEntryError
from src.domain.entities import ACTIVE_BOOKING_STATUSES, Booking


class BookingRepository(IBookingRepository):
    """Booking repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, booking_id: UUID) -> Optional[Booking]:
        """Get booking by ID"""
        stmt = select(Booking).where(Booking.id == booking_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, booking: Booking) -> Booking:
        """
        Create a new booking.

        The partial unique index on (tutor_id, scheduled_start_time) rejects a
        second pending/confirmed booking for the same slot. That surfaces here
        as DuplicateEntryError; the unit of work must then be rolled back.
        """
        self.session.add(booking)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateEntryError(
                f"Slot {booking.scheduled_start_time.isoformat()} is already booked"
            ) from e
        await self.session.refresh(booking)
        return booking

    async def update(self, booking: Booking) -> Booking:
        """Update existing booking"""
        booking.updated_at = datetime.utcnow()
        self.session.add(booking)
        await self.session.flush()
        await self.session.refresh(booking)
        return booking

    async def get_active_by_tutor_between(
        self, tutor_id: UUID, start: datetime, end: datetime
    ) -> List[Booking]:
        """Get pending/confirmed bookings whose start falls in [start, end]"""
        stmt = select(Booking).where(
            Booking.tutor_id == tutor_id,
            Booking.scheduled_start_time >= start,
            Booking.scheduled_start_time <= end,
            Booking.status.in_(ACTIVE_BOOKING_STATUSES),
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_student_id(self, student_id: UUID) -> List[Booking]:
        """Get all bookings of a student, newest start first"""
        stmt = (
            select(Booking)
            .where(Booking.student_id == student_id)
            .order_by(Booking.scheduled_start_time.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_tutor_id(self, tutor_id: UUID) -> List[Booking]:
        """Get all bookings of a tutor, newest start first"""
        stmt = (
            select(Booking)
            .where(Booking.tutor_id == tutor_id)
            .order_by(Booking.scheduled_start_time.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
