"""
Tutor Entity

Anchor record that owns a tutor's availability template and blackout dates.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .blackout_date import BlackoutDate
    from .tutor_time_slot import TutorTimeSlot


class Tutor(SQLModel, table=True):
    """
    Tutor entity - owner of availability data.

    Business Rules:
    - Created by an administrator, which also initializes the 24-hour template
    - Profile data (bio, expertise, ...) lives with the identity provider
    - Deleting a tutor removes its template rows and blackout dates
    """

    __tablename__ = "tutors"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    display_name: str = Field(max_length=255)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    # Relationships
    time_slots: list["TutorTimeSlot"] = Relationship(
        back_populates="tutor",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
    blackout_dates: list["BlackoutDate"] = Relationship(
        back_populates="tutor",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
