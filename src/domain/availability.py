"""
Availability Template

Fixed 24-slot view of a tutor's recurring daily availability. Rows in
``tutor_time_slots`` are loaded into this value before any slot arithmetic,
so a missing row and an ``is_available=False`` row look the same.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .entities import TutorTimeSlot

HOURS_PER_DAY = 24


def is_valid_hour(hour) -> bool:
    """True for an int in 0..23 (bools are rejected)"""
    return isinstance(hour, int) and not isinstance(hour, bool) and 0 <= hour < HOURS_PER_DAY


@dataclass(frozen=True)
class AvailabilityTemplate:
    slots: Tuple[bool, ...] = field(default=(False,) * HOURS_PER_DAY)

    def __post_init__(self):
        if len(self.slots) != HOURS_PER_DAY:
            raise ValueError(f"Template needs {HOURS_PER_DAY} slots, got {len(self.slots)}")

    @classmethod
    def from_hours(cls, hours: Iterable[int]) -> "AvailabilityTemplate":
        open_hours = set(hours)
        invalid = [h for h in open_hours if not is_valid_hour(h)]
        if invalid:
            raise ValueError(f"Invalid hours: {sorted(invalid, key=str)}")
        return cls(tuple(hour in open_hours for hour in range(HOURS_PER_DAY)))

    @classmethod
    def from_rows(cls, rows: Iterable[TutorTimeSlot]) -> "AvailabilityTemplate":
        slots = [False] * HOURS_PER_DAY
        for row in rows:
            if is_valid_hour(row.hour_start):
                slots[row.hour_start] = bool(row.is_available)
        return cls(tuple(slots))

    def is_available(self, hour: int) -> bool:
        return self.slots[hour]

    def available_hours(self) -> List[int]:
        return [hour for hour, is_open in enumerate(self.slots) if is_open]
