"""
Session Routes

Access checks, start / complete and the time-boxed chat.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sessions import (
    ActiveSessionResponse,
    CheckAccessUseCase,
    CompleteSessionResponse,
    CompleteSessionUseCase,
    GetActiveSessionUseCase,
    GetSessionByBookingUseCase,
    ListMessagesUseCase,
    MessageResponse,
    MessagesResponse,
    SendMessageUseCase,
    SessionAccessResponse,
    SessionResponse,
    StartSessionResponse,
    StartSessionUseCase,
)
from src.depends import get_clock, get_current_user, get_unit_of_work

router = APIRouter(prefix="/sessions", tags=["Sessions"])


class CompleteSessionRequest(BaseModel):
    notes: Optional[str] = Field(None, max_length=5000)


class SendMessageRequest(BaseModel):
    message_content: str


@router.get(
    "/active",
    status_code=status.HTTP_200_OK,
    response_model=ActiveSessionResponse,
)
async def get_active_session(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """The caller's session currently in progress, if any"""
    use_case = GetActiveSessionUseCase(uow)
    result = await use_case.execute(current_user["user_id"], current_user["role"])

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/booking/{booking_id}",
    status_code=status.HTTP_200_OK,
    response_model=SessionResponse,
)
async def get_session_by_booking(
    booking_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Session of a booking

    Raises:
        - 403 Forbidden: NOT_SESSION_PARTICIPANT
        - 404 Not Found: BOOKING_NOT_FOUND, SESSION_NOT_FOUND
    """
    use_case = GetSessionByBookingUseCase(uow)
    result = await use_case.execute(
        booking_id, current_user["user_id"], current_user["role"]
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{session_id}/access",
    status_code=status.HTTP_200_OK,
    response_model=SessionAccessResponse,
)
async def check_session_access(
    session_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Check Access

    Current access state (too_early, pre_session, during_session,
    post_session, expired) and what the caller may do.

    Raises:
        - 403 Forbidden: NOT_SESSION_PARTICIPANT
        - 404 Not Found: SESSION_NOT_FOUND
    """
    use_case = CheckAccessUseCase(uow, clock)
    result = await use_case.execute(
        session_id, current_user["user_id"], current_user["role"]
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{session_id}/start",
    status_code=status.HTTP_200_OK,
    response_model=StartSessionResponse,
)
async def start_session(
    session_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Start Session

    The tutor starts a scheduled session; anyone else joins.

    Raises:
        - 403 Forbidden: NOT_SESSION_PARTICIPANT
        - 404 Not Found: SESSION_NOT_FOUND
        - 409 Conflict: SESSION_TOO_EARLY, SESSION_ENDED, SESSION_EXPIRED
    """
    use_case = StartSessionUseCase(uow, clock)
    result = await use_case.execute(
        session_id, current_user["user_id"], current_user["role"]
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{session_id}/complete",
    status_code=status.HTTP_200_OK,
    response_model=CompleteSessionResponse,
)
async def complete_session(
    session_id: UUID,
    request: Optional[CompleteSessionRequest] = None,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Complete Session

    Ends an active session and its booking. Chat messages stay readable for
    one more hour.

    Raises:
        - 403 Forbidden: TUTOR_ONLY, NOT_SESSION_PARTICIPANT
        - 404 Not Found: SESSION_NOT_FOUND
        - 409 Conflict: SESSION_NOT_ACTIVE
    """
    use_case = CompleteSessionUseCase(uow, clock)
    result = await use_case.execute(
        session_id,
        current_user["user_id"],
        current_user["role"],
        request.notes if request else None,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{session_id}/messages",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
)
async def send_message(
    session_id: UUID,
    request: SendMessageRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """
    Send Message

    Raises:
        - 400 Bad Request: EMPTY_MESSAGE, MESSAGE_TOO_LONG
        - 403 Forbidden: NOT_SESSION_PARTICIPANT
        - 404 Not Found: SESSION_NOT_FOUND
        - 409 Conflict: MESSAGING_NOT_OPEN, MESSAGING_CLOSED
    """
    use_case = SendMessageUseCase(
        uow, clock, max_length=ApplicationConfig.MESSAGE_MAX_LENGTH
    )
    result = await use_case.execute(
        session_id,
        current_user["user_id"],
        current_user["role"],
        request.message_content,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{session_id}/messages",
    status_code=status.HTTP_200_OK,
    response_model=MessagesResponse,
)
async def list_messages(
    session_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    clock: Clock = Depends(get_clock),
):
    """Unexpired messages of the session, oldest first"""
    use_case = ListMessagesUseCase(uow, clock)
    result = await use_case.execute(
        session_id, current_user["user_id"], current_user["role"]
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
