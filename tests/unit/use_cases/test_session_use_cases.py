from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.use_cases.sessions import (
    CheckAccessUseCase,
    CompleteSessionUseCase,
    GetActiveSessionUseCase,
    GetSessionByBookingUseCase,
    StartSessionUseCase,
)
from src.domain.entities import Booking, BookingStatus, CallerRole, Session, SessionStatus
from src.domain.errors import ForbiddenError, InvalidStateError, NotFoundError
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


# ----------------------------------------------------------------------------
# check access
# ----------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_check_access_reports_state(mock_uow, booking, session):
    result = await CheckAccessUseCase(mock_uow, at(13, 30)).execute(
        session.id, booking.tutor_id, CallerRole.tutor
    )

    assert result.value.access_status == "pre_session"
    assert result.value.can_message is True
    assert result.value.can_start is True
    assert result.value.session.scheduled_start == booking.scheduled_start_time


@pytest.mark.asyncio
async def test_check_access_is_participants_only(mock_uow, booking, session):
    result = await CheckAccessUseCase(mock_uow, at(13, 30)).execute(
        session.id, uuid4(), CallerRole.student
    )

    assert isinstance(result.error, ForbiddenError)


@pytest.mark.asyncio
async def test_check_access_unknown_session(mock_uow):
    mock_uow.sessions.get_by_id.return_value = None

    result = await CheckAccessUseCase(mock_uow, at(13)).execute(
        uuid4(), uuid4(), CallerRole.student
    )

    assert isinstance(result.error, NotFoundError)


# ----------------------------------------------------------------------------
# start
# ----------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_tutor_starts_scheduled_session(mock_uow, booking, session):
    result = await StartSessionUseCase(mock_uow, at(13, 55)).execute(
        session.id, booking.tutor_id, CallerRole.tutor
    )

    assert result.value.started is True
    assert result.value.session.status == "active"
    assert result.value.session.actual_start_time == datetime(2024, 1, 10, 13, 55)
    assert mock_uow.audit_events.create.call_args.args[0].action == "session_started"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_student_joins_without_changing_state(mock_uow, booking, session):
    result = await StartSessionUseCase(mock_uow, at(14, 5)).execute(
        session.id, booking.student_id, CallerRole.student
    )

    assert result.value.started is False
    assert result.value.session.status == "scheduled"
    mock_uow.sessions.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_tutor_rejoins_active_session(mock_uow, booking, session):
    session.status = SessionStatus.active

    result = await StartSessionUseCase(mock_uow, at(14, 20)).execute(
        session.id, booking.tutor_id, CallerRole.tutor
    )

    assert result.value.started is False
    mock_uow.sessions.update.assert_not_called()


@pytest.mark.asyncio
async def test_start_too_early(mock_uow, booking, session):
    result = await StartSessionUseCase(mock_uow, at(12, 59)).execute(
        session.id, booking.tutor_id, CallerRole.tutor
    )

    assert isinstance(result.error, InvalidStateError)
    assert result.error.code == "SESSION_TOO_EARLY"


@pytest.mark.asyncio
async def test_start_after_window_expired(mock_uow, booking, session):
    result = await StartSessionUseCase(mock_uow, at(16, 1)).execute(
        session.id, booking.tutor_id, CallerRole.tutor
    )

    assert result.error.code == "SESSION_EXPIRED"


@pytest.mark.asyncio
async def test_start_completed_session(mock_uow, booking, session):
    session.status = SessionStatus.completed

    result = await StartSessionUseCase(mock_uow, at(14, 30)).execute(
        session.id, booking.tutor_id, CallerRole.tutor
    )

    assert result.error.code == "SESSION_ENDED"


@pytest.mark.asyncio
async def test_start_refused_once_booking_cancelled(mock_uow, booking, session):
    booking.status = BookingStatus.cancelled

    result = await StartSessionUseCase(mock_uow, at(14, 10)).execute(
        session.id, booking.tutor_id, CallerRole.tutor
    )

    assert isinstance(result.error, InvalidStateError)
    assert result.error.code == "BOOKING_NOT_CONFIRMED"
    mock_uow.sessions.update.assert_not_called()
    mock_uow.commit.assert_not_called()


# ----------------------------------------------------------------------------
# complete
# ----------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_complete_closes_session_booking_and_chat(mock_uow, booking, session):
    session.status = SessionStatus.active
    mock_uow.messages.set_expiry_for_session.return_value = 3

    result = await CompleteSessionUseCase(mock_uow, at(14, 50)).execute(
        session.id, booking.tutor_id, CallerRole.tutor, "Covered chapter 3"
    )

    assert result.is_ok()
    assert result.value.session.status == "completed"
    assert result.value.session.actual_end_time == datetime(2024, 1, 10, 14, 50)
    assert result.value.session.notes == "Covered chapter 3"
    assert result.value.booking_status == "completed"
    assert result.value.messages_expire_at == datetime(2024, 1, 10, 15, 50)

    mock_uow.messages.set_expiry_for_session.assert_awaited_once_with(
        session.id, datetime(2024, 1, 10, 15, 50)
    )
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_complete_requires_active_session(mock_uow, booking, session):
    result = await CompleteSessionUseCase(mock_uow, at(14, 50)).execute(
        session.id, booking.tutor_id, CallerRole.tutor
    )

    assert isinstance(result.error, InvalidStateError)
    assert result.error.code == "SESSION_NOT_ACTIVE"
    mock_uow.messages.set_expiry_for_session.assert_not_called()


@pytest.mark.asyncio
async def test_complete_refused_once_booking_cancelled(mock_uow, booking, session):
    session.status = SessionStatus.active
    booking.status = BookingStatus.cancelled

    result = await CompleteSessionUseCase(mock_uow, at(14, 50)).execute(
        session.id, booking.tutor_id, CallerRole.tutor
    )

    assert isinstance(result.error, InvalidStateError)
    assert result.error.code == "BOOKING_NOT_CONFIRMED"
    assert booking.status == BookingStatus.cancelled
    mock_uow.bookings.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_student_cannot_complete(mock_uow, booking, session):
    session.status = SessionStatus.active

    result = await CompleteSessionUseCase(mock_uow, at(14, 50)).execute(
        session.id, booking.student_id, CallerRole.student
    )

    assert isinstance(result.error, ForbiddenError)


@pytest.mark.asyncio
async def test_other_tutor_cannot_complete(mock_uow, booking, session):
    session.status = SessionStatus.active

    result = await CompleteSessionUseCase(mock_uow, at(14, 50)).execute(
        session.id, uuid4(), CallerRole.tutor
    )

    assert isinstance(result.error, ForbiddenError)


# ----------------------------------------------------------------------------
# reads
# ----------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_get_session_by_booking(mock_uow, booking, session):
    mock_uow.sessions.get_by_booking_id.return_value = session

    result = await GetSessionByBookingUseCase(mock_uow).execute(
        booking.id, booking.student_id, CallerRole.student
    )

    assert result.value.id == session.id


@pytest.mark.asyncio
async def test_pending_booking_has_no_session(mock_uow, booking):
    booking.status = BookingStatus.pending
    mock_uow.sessions.get_by_booking_id.return_value = None

    result = await GetSessionByBookingUseCase(mock_uow).execute(
        booking.id, booking.student_id, CallerRole.student
    )

    assert result.error.code == "SESSION_NOT_FOUND"


@pytest.mark.asyncio
async def test_active_session_none(mock_uow):
    mock_uow.sessions.get_active_for_participant.return_value = None

    result = await GetActiveSessionUseCase(mock_uow).execute(uuid4(), CallerRole.student)

    assert result.value.active_session is None


@pytest.mark.asyncio
async def test_active_session_found(mock_uow, booking, session):
    session.status = SessionStatus.active
    mock_uow.sessions.get_active_for_participant.return_value = session

    result = await GetActiveSessionUseCase(mock_uow).execute(
        booking.tutor_id, CallerRole.tutor
    )

    assert result.value.active_session.id == session.id
    assert result.value.active_session.tutor_id == booking.tutor_id
