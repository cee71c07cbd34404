"""
Availability Use Case DTOs (Data Transfer Objects)

Response classes for template, blackout and open-slot use cases.
"""

import datetime as dt
from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import BlackoutDate


# ============================================================================
# Response DTOs
# ============================================================================


class AvailabilityTemplateResponse(BaseModel):
    """A tutor's recurring availability"""

    tutor_id: UUID
    available_hours: List[int]


class TimeSlotResponse(BaseModel):
    """Response for single-slot toggle"""

    tutor_id: UUID
    hour_start: int
    is_available: bool


class BlackoutDateResponse(BaseModel):
    """A single blackout date"""

    id: UUID
    tutor_id: UUID
    blackout_date: date
    reason: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, blackout: BlackoutDate) -> "BlackoutDateResponse":
        return cls(
            id=blackout.id,
            tutor_id=blackout.tutor_id,
            blackout_date=blackout.blackout_date,
            reason=blackout.reason,
            created_at=blackout.created_at,
        )


class BlackoutDatesResponse(BaseModel):
    """All blackout dates of a tutor"""

    tutor_id: UUID
    blackout_dates: List[BlackoutDateResponse]


class OpenSlotsResponse(BaseModel):
    """Bookable hours of a tutor on one date"""

    tutor_id: UUID
    date: dt.date
    available_hours: List[int]
    available_slots: List[str]  # "HH:00" labels
