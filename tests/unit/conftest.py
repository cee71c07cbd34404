from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest


def _repository(*methods):
    repo = MagicMock()
    for name in methods:
        setattr(repo, name, AsyncMock())
    return repo


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.tutors = _repository("get_by_id", "create", "delete")
    uow.time_slots = _repository("get_by_tutor_id", "save_template", "upsert_slot")
    uow.blackout_dates = _repository("create", "exists", "get_by_tutor_id")
    uow.bookings = _repository(
        "get_by_id",
        "create",
        "update",
        "get_active_by_tutor_between",
        "get_by_student_id",
        "get_by_tutor_id",
    )
    uow.sessions = _repository(
        "get_by_id", "get_by_booking_id", "get_active_for_participant", "create", "update"
    )
    uow.messages = _repository(
        "create", "get_unexpired_by_session_id", "set_expiry_for_session"
    )
    uow.audit_events = _repository("create", "get_by_booking_id")

    # Repositories hand back what they were given, like a flush + refresh would
    for repo, method in (
        (uow.tutors, "create"),
        (uow.bookings, "create"),
        (uow.bookings, "update"),
        (uow.sessions, "create"),
        (uow.sessions, "update"),
        (uow.messages, "create"),
        (uow.blackout_dates, "create"),
    ):
        getattr(repo, method).side_effect = lambda entity: entity

    uow.blackout_dates.exists.return_value = False
    uow.time_slots.get_by_tutor_id.return_value = []
    uow.bookings.get_active_by_tutor_between.return_value = []
    uow.bookings.get_by_tutor_id.return_value = []
    uow.messages.set_expiry_for_session.return_value = 0
    return uow


@pytest.fixture
def session_day():
    """Scheduled window 2024-01-10 14:00-15:00 UTC used across session tests"""
    return datetime(2024, 1, 10, 14, 0), datetime(2024, 1, 10, 15, 0)
