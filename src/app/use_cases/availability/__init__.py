"""
Availability Use Cases

Recurring template, blackout dates and open-slot resolution.
"""

from .add_blackout_date_use_case import AddBlackoutDateUseCase
from .dtos import (
    AvailabilityTemplateResponse,
    BlackoutDateResponse,
    BlackoutDatesResponse,
    OpenSlotsResponse,
    TimeSlotResponse,
)
from .get_availability_template_use_case import GetAvailabilityTemplateUseCase
from .list_blackout_dates_use_case import ListBlackoutDatesUseCase
from .replace_availability_use_case import ReplaceAvailabilityUseCase
from .resolve_open_slots_use_case import ResolveOpenSlotsUseCase
from .set_slot_availability_use_case import SetSlotAvailabilityUseCase

__all__ = [
    "ReplaceAvailabilityUseCase",
    "SetSlotAvailabilityUseCase",
    "GetAvailabilityTemplateUseCase",
    "AddBlackoutDateUseCase",
    "ListBlackoutDatesUseCase",
    "ResolveOpenSlotsUseCase",
    "AvailabilityTemplateResponse",
    "TimeSlotResponse",
    "BlackoutDateResponse",
    "BlackoutDatesResponse",
    "OpenSlotsResponse",
]
