"""
Tutor Availability Routes

Public reads (open slots, template, blackout dates) and the calling tutor's
own writes under /tutors/me.
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.availability import (
    AddBlackoutDateUseCase,
    AvailabilityTemplateResponse,
    BlackoutDateResponse,
    BlackoutDatesResponse,
    GetAvailabilityTemplateUseCase,
    ListBlackoutDatesUseCase,
    OpenSlotsResponse,
    ReplaceAvailabilityUseCase,
    ResolveOpenSlotsUseCase,
    SetSlotAvailabilityUseCase,
    TimeSlotResponse,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/tutors", tags=["Tutors"])


class ReplaceAvailabilityRequest(BaseModel):
    """Full template replacement; hours not listed become unavailable"""

    available_hours: List[int] = Field(..., description="Open hours, 0-23")


class SetSlotRequest(BaseModel):
    hour_start: int = Field(..., description="Hour of day, 0-23")
    is_available: bool


class AddBlackoutDateRequest(BaseModel):
    blackout_date: date
    reason: Optional[str] = Field(None, max_length=500)


@router.put(
    "/me/availability",
    status_code=status.HTTP_200_OK,
    response_model=AvailabilityTemplateResponse,
)
async def replace_availability(
    request: ReplaceAvailabilityRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Replace Availability

    Rewrites all 24 template rows of the calling tutor. Idempotent.
    Existing bookings are left untouched.

    Raises:
        - 400 Bad Request: INVALID_HOUR
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: TUTOR_ONLY
        - 404 Not Found: TUTOR_NOT_FOUND
    """
    use_case = ReplaceAvailabilityUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"], current_user["role"], request.available_hours
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/me/availability/slot",
    status_code=status.HTTP_200_OK,
    response_model=TimeSlotResponse,
)
async def set_slot_availability(
    request: SetSlotRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Set Slot Availability

    Opens or closes a single hour of the calling tutor's template.

    Raises:
        - 400 Bad Request: INVALID_HOUR
        - 403 Forbidden: TUTOR_ONLY
        - 404 Not Found: TUTOR_NOT_FOUND
    """
    use_case = SetSlotAvailabilityUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"],
        current_user["role"],
        request.hour_start,
        request.is_available,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/me/blackout-dates",
    status_code=status.HTTP_201_CREATED,
    response_model=BlackoutDateResponse,
)
async def add_blackout_date(
    request: AddBlackoutDateRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add Blackout Date

    Makes the calling tutor unavailable for a whole calendar date.

    Raises:
        - 403 Forbidden: TUTOR_ONLY
        - 404 Not Found: TUTOR_NOT_FOUND
        - 409 Conflict: BLACKOUT_DATE_EXISTS
    """
    use_case = AddBlackoutDateUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"],
        current_user["role"],
        request.blackout_date,
        request.reason,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{tutor_id}/availability",
    status_code=status.HTTP_200_OK,
    response_model=OpenSlotsResponse,
)
async def get_open_slots(
    tutor_id: UUID,
    on_date: date = Query(..., alias="date", description="Calendar date, YYYY-MM-DD"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Open Slots

    Hours of the given date a student can book: template hours, minus
    pending/confirmed bookings, and none at all on a blackout date.

    Raises:
        - 404 Not Found: TUTOR_NOT_FOUND
    """
    use_case = ResolveOpenSlotsUseCase(uow)
    result = await use_case.execute(tutor_id, on_date)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{tutor_id}/template",
    status_code=status.HTTP_200_OK,
    response_model=AvailabilityTemplateResponse,
)
async def get_availability_template(
    tutor_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Weekly-independent 24-hour template of a tutor"""
    use_case = GetAvailabilityTemplateUseCase(uow)
    result = await use_case.execute(tutor_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{tutor_id}/blackout-dates",
    status_code=status.HTTP_200_OK,
    response_model=BlackoutDatesResponse,
)
async def list_blackout_dates(
    tutor_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Blackout dates of a tutor, ascending"""
    use_case = ListBlackoutDatesUseCase(uow)
    result = await use_case.execute(tutor_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
