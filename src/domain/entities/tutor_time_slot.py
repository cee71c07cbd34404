"""
TutorTimeSlot Entity

One row of a tutor's recurring 24-hour availability template.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

if TYPE_CHECKING:
    from .tutor import Tutor


class TutorTimeSlot(SQLModel, table=True):
    """
    TutorTimeSlot entity - availability flag for one hour of the day.

    Business Rules:
    - Exactly one row per (tutor_id, hour_start) once initialized
    - A missing row means the hour is unavailable
    - Rows are only mutated (replace-all or single toggle), never deleted
      except together with the tutor
    """

    __tablename__ = "tutor_time_slots"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tutor_id: UUID = Field(foreign_key="tutors.id", nullable=False, index=True)
    hour_start: int = Field(ge=0, le=23)
    is_available: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    # Relationships
    tutor: "Tutor" = Relationship(back_populates="time_slots")

    __table_args__ = (
        Index("idx_time_slot_tutor_hour", "tutor_id", "hour_start", unique=True),
    )
