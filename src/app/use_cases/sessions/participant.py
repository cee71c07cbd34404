from typing import Optional, Sequence, Tuple
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Booking, BookingStatus, CallerRole, Session
from src.domain.errors import ForbiddenError, InvalidStateError, NotFoundError


def is_participant(booking: Booking, user_id: UUID, role: CallerRole) -> bool:
    """True when the caller is the booking's student or tutor under the claimed role"""
    if role == CallerRole.tutor:
        return booking.tutor_id == user_id
    return booking.student_id == user_id


def booking_state_error(
    booking: Booking, allowed: Sequence[BookingStatus] = (BookingStatus.confirmed,)
) -> Optional[InvalidStateError]:
    """Error for a session whose booking has left the allowed statuses, else None"""
    if booking.status in allowed:
        return None
    return InvalidStateError(
        "BOOKING_NOT_CONFIRMED",
        f"Booking is {booking.status.value}, its session can no longer be used",
    )


async def load_participant_session(
    uow: UnitOfWork, session_id: UUID, user_id: UUID, role: CallerRole
) -> Result[Tuple[Session, Booking]]:
    """Load a session with its booking, rejecting non-participants. Call inside `async with uow`."""
    session = await uow.sessions.get_by_id(session_id)
    if session is None:
        return Return.err(NotFoundError("SESSION_NOT_FOUND", "Session not found"))

    booking = await uow.bookings.get_by_id(session.booking_id)
    if booking is None:
        return Return.err(NotFoundError("BOOKING_NOT_FOUND", "Booking not found"))

    if not is_participant(booking, user_id, role):
        return Return.err(
            ForbiddenError("NOT_SESSION_PARTICIPANT", "Not authorized to access this session")
        )

    return Return.ok((session, booking))
