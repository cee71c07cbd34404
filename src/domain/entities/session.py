"""
Session Entity

The live lesson attached to a confirmed booking.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import SessionStatus


class Session(SQLModel, table=True):
    """
    Session entity - 1:1 with a confirmed booking.

    Business Rules:
    - Created in the same transaction that confirms the booking
    - scheduled -> active (tutor starts) -> completed (tutor ends)
    - no_show exists in the schema but nothing transitions into it
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    booking_id: UUID = Field(foreign_key="bookings.id", nullable=False, unique=True)

    status: SessionStatus = Field(default=SessionStatus.scheduled)
    actual_start_time: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    actual_end_time: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    notes: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_session_status", "status"),)
