"""
Booking Entity

A student's claim on one hour-slot of a tutor.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import ACTIVE_BOOKING_STATUSES, BookingStatus

BOOKING_DURATION = timedelta(hours=1)

_ACTIVE_SLOT_PREDICATE = text(
    "status IN ({})".format(", ".join(f"'{s.value}'" for s in ACTIVE_BOOKING_STATUSES))
)


class Booking(SQLModel, table=True):
    """
    Booking entity - one-hour session request.

    Business Rules:
    - scheduled_end_time is always scheduled_start_time + 1 hour
    - At most one pending/confirmed booking per (tutor, start instant),
      enforced by the partial unique index below
    - pending -> confirmed | rejected | cancelled
    - confirmed -> cancelled | completed
    - rejected, cancelled, completed are terminal
    """

    __tablename__ = "bookings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    student_id: UUID = Field(nullable=False, index=True)
    tutor_id: UUID = Field(foreign_key="tutors.id", nullable=False)

    scheduled_start_time: datetime = Field(sa_column=Column(DateTime, nullable=False))
    scheduled_end_time: datetime = Field(sa_column=Column(DateTime, nullable=False))

    status: BookingStatus = Field(default=BookingStatus.pending)
    cancellation_reason: Optional[str] = Field(default=None, max_length=500)
    cancelled_by: Optional[UUID] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_booking_tutor_start", "tutor_id", "scheduled_start_time"),
        Index(
            "uq_booking_active_slot",
            "tutor_id",
            "scheduled_start_time",
            unique=True,
            sqlite_where=_ACTIVE_SLOT_PREDICATE,
            postgresql_where=_ACTIVE_SLOT_PREDICATE,
        ),
        Index("idx_booking_status", "status"),
    )