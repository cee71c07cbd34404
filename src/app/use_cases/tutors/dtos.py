"""
Tutor Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel


class TutorResponse(BaseModel):
    """Response for create tutor use case"""

    id: UUID
    display_name: str
    available_hours: List[int]
    created_at: datetime


class DeleteTutorResponse(BaseModel):
    """Response for delete tutor use case"""

    status: str
