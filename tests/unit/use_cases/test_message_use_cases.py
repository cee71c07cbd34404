from datetime import datetime
from uuid import uuid4

import pytest

from src.app.use_cases.sessions import ListMessagesUseCase, SendMessageUseCase
from src.domain.entities import (
    Booking,
    BookingStatus,
    CallerRole,
    Session,
    SessionMessage,
    SessionStatus,
)
from src.domain.errors import ForbiddenError, InvalidStateError, ValidationError
from tests.fixtures.clock import FixedClock


@pytest.fixture
def booking(mock_uow, session_day):
    start, end = session_day
    booking = Booking(
        id=uuid4(),
        student_id=uuid4(),
        tutor_id=uuid4(),
        scheduled_start_time=start,
        scheduled_end_time=end,
        status=BookingStatus.confirmed,
    )
    mock_uow.bookings.get_by_id.return_value = booking
    return booking


@pytest.fixture
def session(mock_uow, booking):
    session = Session(id=uuid4(), booking_id=booking.id, status=SessionStatus.scheduled)
    mock_uow.sessions.get_by_id.return_value = session
    return session


def at(hour, minute=0):
    return FixedClock(datetime(2024, 1, 10, hour, minute))


@pytest.mark.asyncio
async def test_message_expires_one_hour_after_scheduled_end(mock_uow, booking, session):
    result = await SendMessageUseCase(mock_uow, at(14, 30)).execute(
        session.id, booking.student_id, CallerRole.student, "  Hello!  "
    )

    assert result.is_ok()
    assert result.value.message_content == "Hello!"
    assert result.value.sent_at == datetime(2024, 1, 10, 14, 30)
    assert result.value.expires_at == datetime(2024, 1, 10, 16, 0)
    assert result.value.is_me is True
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_messaging_allowed_before_session(mock_uow, booking, session):
    result = await SendMessageUseCase(mock_uow, at(13, 0)).execute(
        session.id, booking.tutor_id, CallerRole.tutor, "See you soon"
    )

    assert result.is_ok()


@pytest.mark.asyncio
async def test_messaging_too_early(mock_uow, booking, session):
    result = await SendMessageUseCase(mock_uow, at(12, 59)).execute(
        session.id, booking.student_id, CallerRole.student, "Hi"
    )

    assert isinstance(result.error, InvalidStateError)
    assert result.error.code == "MESSAGING_NOT_OPEN"
    mock_uow.messages.create.assert_not_called()


@pytest.mark.asyncio
async def test_messaging_after_window(mock_uow, booking, session):
    result = await SendMessageUseCase(mock_uow, at(16, 1)).execute(
        session.id, booking.student_id, CallerRole.student, "Hi"
    )

    assert result.error.code == "MESSAGING_CLOSED"


@pytest.mark.asyncio
@pytest.mark.parametrize("content", ["", "   ", "x" * 1001])
async def test_message_content_length(mock_uow, booking, session, content):
    result = await SendMessageUseCase(mock_uow, at(14, 30)).execute(
        session.id, booking.student_id, CallerRole.student, content
    )

    assert isinstance(result.error, ValidationError)
    mock_uow.sessions.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_message_at_max_length_is_accepted(mock_uow, booking, session):
    result = await SendMessageUseCase(mock_uow, at(14, 30)).execute(
        session.id, booking.student_id, CallerRole.student, "x" * 1000
    )

    assert result.is_ok()


@pytest.mark.asyncio
async def test_message_from_stranger_is_forbidden(mock_uow, booking, session):
    result = await SendMessageUseCase(mock_uow, at(14, 30)).execute(
        session.id, uuid4(), CallerRole.student, "Hi"
    )

    assert isinstance(result.error, ForbiddenError)


@pytest.mark.asyncio
async def test_messaging_closed_once_booking_cancelled(mock_uow, booking, session):
    booking.status = BookingStatus.cancelled

    result = await SendMessageUseCase(mock_uow, at(14, 30)).execute(
        session.id, booking.student_id, CallerRole.student, "Still on?"
    )

    assert isinstance(result.error, InvalidStateError)
    assert result.error.code == "BOOKING_NOT_CONFIRMED"
    mock_uow.messages.create.assert_not_called()


@pytest.mark.asyncio
async def test_messaging_allowed_after_completion(mock_uow, booking, session):
    booking.status = BookingStatus.completed
    session.status = SessionStatus.completed

    result = await SendMessageUseCase(mock_uow, at(15, 30)).execute(
        session.id, booking.student_id, CallerRole.student, "Thanks!"
    )

    assert result.is_ok()


@pytest.mark.asyncio
async def test_list_messages_filters_on_now(mock_uow, booking, session):
    message = SessionMessage(
        session_id=session.id,
        sender_id=booking.student_id,
        message_content="Hello",
        sent_at=datetime(2024, 1, 10, 14, 30),
        expires_at=datetime(2024, 1, 10, 16, 0),
    )
    mock_uow.messages.get_unexpired_by_session_id.return_value = [message]

    result = await ListMessagesUseCase(mock_uow, at(15, 45)).execute(
        session.id, booking.tutor_id, CallerRole.tutor
    )

    assert result.value.total_messages == 1
    assert result.value.messages[0].is_me is False
    mock_uow.messages.get_unexpired_by_session_id.assert_awaited_once_with(
        session.id, datetime(2024, 1, 10, 15, 45)
    )
