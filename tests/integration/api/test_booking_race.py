"""
Lost-race behaviour of booking creation.

The availability check and the insert share one transaction, but two
transactions can both pass the check. The partial unique index is what
decides. Most tests here make the check stale on purpose to exercise it;
the last one runs creates in parallel, each on its own session.
"""

import asyncio
from datetime import datetime
from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.slot_resolver import SlotResolver
from src.app.use_cases.bookings import CreateBookingUseCase
from src.domain.entities import AuditEvent, Booking, CallerRole
from tests.fixtures.api_helpers import auth_headers, book, create_tutor


@pytest.fixture
def stale_slot_check(monkeypatch):
    async def always_available(self, tutor_id, start):
        return True

    monkeypatch.setattr(SlotResolver, "is_slot_available", always_available)


@pytest.mark.asyncio
async def test_exactly_one_booking_wins_a_slot(client: AsyncClient, db_session, stale_slot_check):
    tutor = await create_tutor(client, [14])

    responses = [
        await book(client, uuid4(), tutor["id"], "2024-01-10T14:00:00") for _ in range(5)
    ]

    statuses = sorted(r.status_code for r in responses)
    assert statuses == [201, 409, 409, 409, 409]
    assert all(
        r.json()["error"]["code"] == "SLOT_UNAVAILABLE" for r in responses if r.status_code == 409
    )

    result = await db_session.exec(select(Booking))
    assert len(result.all()) == 1

    # Losers leave nothing behind
    result = await db_session.exec(select(AuditEvent).where(AuditEvent.action == "booking_created"))
    assert len(result.all()) == 1


@pytest.mark.asyncio
async def test_terminal_bookings_do_not_hold_the_slot(
    client: AsyncClient, db_session, stale_slot_check
):
    tutor = await create_tutor(client, [14])
    student_id = uuid4()

    first = await book(client, student_id, tutor["id"], "2024-01-10T14:00:00")
    await client.patch(
        f"/bookings/{first.json()['id']}/cancel", headers=auth_headers(student_id, "student")
    )
    second = await book(client, uuid4(), tutor["id"], "2024-01-10T14:00:00")

    assert second.status_code == 201

    result = await db_session.exec(select(Booking))
    assert sorted(b.status.value for b in result.all()) == ["cancelled", "pending"]


@pytest.mark.asyncio
async def test_same_hour_with_another_tutor_is_independent(client: AsyncClient, stale_slot_check):
    first_tutor = await create_tutor(client, [14])
    second_tutor = await create_tutor(client, [14], display_name="Grace")

    first = await book(client, uuid4(), first_tutor["id"], "2024-01-10T14:00:00")
    second = await book(client, uuid4(), second_tutor["id"], "2024-01-10T14:00:00")

    assert first.status_code == 201
    assert second.status_code == 201


@pytest.mark.asyncio
async def test_concurrent_creates_leave_one_booking(client: AsyncClient, engine, db_session, clock):
    tutor = await create_tutor(client, [14])
    tutor_id = UUID(tutor["id"])
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def attempt():
        async with Session() as session:
            use_case = CreateBookingUseCase(SqlAlchemyUnitOfWork(session), clock)
            return await use_case.execute(
                uuid4(), CallerRole.student, tutor_id, datetime(2024, 1, 10, 14, 0)
            )

    results = await asyncio.gather(*(attempt() for _ in range(8)))

    assert sum(1 for r in results if r.is_ok()) == 1
    assert all(r.error.code == "SLOT_UNAVAILABLE" for r in results if r.is_err())

    result = await db_session.exec(select(Booking))
    assert len(result.all()) == 1
