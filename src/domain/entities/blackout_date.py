"""
BlackoutDate Entity

A calendar date on which a tutor cannot be booked at all.
"""

from datetime import date, datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

if TYPE_CHECKING:
    from .tutor import Tutor


class BlackoutDate(SQLModel, table=True):
    """
    BlackoutDate entity - whole-day unavailability.

    Business Rules:
    - (tutor_id, blackout_date) must be unique
    - Overrides the recurring template for that date
    - No delete path; removed only together with the tutor
    """

    __tablename__ = "tutor_blackout_dates"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tutor_id: UUID = Field(foreign_key="tutors.id", nullable=False, index=True)
    blackout_date: date = Field(nullable=False)
    reason: Optional[str] = Field(default=None, max_length=500)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    # Relationships
    tutor: "Tutor" = Relationship(back_populates="blackout_dates")

    __table_args__ = (
        Index("idx_blackout_tutor_date", "tutor_id", "blackout_date", unique=True),
    )
