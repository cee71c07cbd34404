"""
Booking Routes

Students create bookings; tutors accept or reject them; either side may
cancel.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.utils.time import to_utc_naive
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.bookings import (
    AcceptBookingResponse,
    AcceptBookingUseCase,
    BookingResponse,
    BookingsResponse,
    CancelBookingUseCase,
    BookingHistoryResponse,
    CreateBookingUseCase,
    GetBookingHistoryUseCase,
    ListBookingsUseCase,
    RejectBookingUseCase,
)
from src.depends import get_clock, get_current_user, get_unit_of_work

router = APIRouter(prefix="/bookings", tags=["Bookings"])


class CreateBookingRequest(BaseModel):
    tutor_id: UUID
    scheduled_start_time: datetime = Field(
        ..., description="Slot start on the hour; naive values are taken as UTC"
    )


class BookingReasonRequest(BaseModel):
    reason: Optional[str] = Field(None, max_length=500)


def cancellation_cutoff() -> Optional[timedelta]:
    if not ApplicationConfig.ENFORCE_CANCELLATION_CUTOFF:
        return None
    return timedelta(hours=ApplicationConfig.CANCELLATION_CUTOFF_HOURS)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=BookingResponse,
)
async def create_booking(
    request: CreateBookingRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Create Booking

    Claims a one-hour slot. The booking starts pending and already blocks
    the slot for every other student.

    Raises:
        - 400 Bad Request: INVALID_START_TIME
        - 403 Forbidden: STUDENT_ONLY
        - 404 Not Found: TUTOR_NOT_FOUND
        - 409 Conflict: SLOT_UNAVAILABLE, SLOT_IN_PAST
    """
    use_case = CreateBookingUseCase(uow, clock)
    result = await use_case.execute(
        current_user["user_id"],
        current_user["role"],
        request.tutor_id,
        to_utc_naive(request.scheduled_start_time),
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=BookingsResponse,
)
async def list_bookings(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Bookings of the caller (as student or as tutor), newest first"""
    use_case = ListBookingsUseCase(uow)
    result = await use_case.execute(current_user["user_id"], current_user["role"])

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{booking_id}/history",
    status_code=status.HTTP_200_OK,
    response_model=BookingHistoryResponse,
)
async def get_booking_history(
    booking_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Booking History

    Audit trail of the booking (created, accepted, cancelled, ...), oldest first.

    Raises:
        - 403 Forbidden: NOT_BOOKING_PARTICIPANT
        - 404 Not Found: BOOKING_NOT_FOUND
    """
    use_case = GetBookingHistoryUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"], current_user["role"], booking_id
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{booking_id}/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptBookingResponse,
)
async def accept_booking(
    booking_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Booking

    Confirms a pending booking and schedules its session.

    Raises:
        - 403 Forbidden: NOT_BOOKING_TUTOR
        - 404 Not Found: BOOKING_NOT_FOUND
        - 409 Conflict: BOOKING_NOT_PENDING
    """
    use_case = AcceptBookingUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"], current_user["role"], booking_id
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{booking_id}/reject",
    status_code=status.HTTP_200_OK,
    response_model=BookingResponse,
)
async def reject_booking(
    booking_id: UUID,
    request: Optional[BookingReasonRequest] = None,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reject Booking

    Raises:
        - 403 Forbidden: NOT_BOOKING_TUTOR
        - 404 Not Found: BOOKING_NOT_FOUND
        - 409 Conflict: BOOKING_NOT_PENDING
    """
    use_case = RejectBookingUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"],
        current_user["role"],
        booking_id,
        request.reason if request else None,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{booking_id}/cancel",
    status_code=status.HTTP_200_OK,
    response_model=BookingResponse,
)
async def cancel_booking(
    booking_id: UUID,
    request: Optional[BookingReasonRequest] = None,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Cancel Booking

    Either participant may cancel a pending booking. A confirmed booking can
    only be cancelled until the configured cutoff before its start.

    Raises:
        - 403 Forbidden: NOT_BOOKING_PARTICIPANT
        - 404 Not Found: BOOKING_NOT_FOUND
        - 409 Conflict: BOOKING_NOT_CANCELLABLE, CANCELLATION_WINDOW_CLOSED
    """
    use_case = CancelBookingUseCase(uow, clock, cutoff=cancellation_cutoff())
    result = await use_case.execute(
        current_user["user_id"],
        current_user["role"],
        booking_id,
        request.reason if request else None,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
