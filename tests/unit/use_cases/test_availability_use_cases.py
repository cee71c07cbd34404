from datetime import date
from uuid import uuid4

import pytest

from src.app.repositories.errors import DuplicateEntryError
from src.app.use_cases.availability import (
    AddBlackoutDateUseCase,
    ReplaceAvailabilityUseCase,
    ResolveOpenSlotsUseCase,
    SetSlotAvailabilityUseCase,
)
from src.domain.entities import CallerRole, Tutor, TutorTimeSlot
from src.domain.errors import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def tutor():
    return Tutor(id=uuid4(), display_name="Ada")


@pytest.mark.asyncio
async def test_replace_availability_writes_whole_template(mock_uow, tutor):
    mock_uow.tutors.get_by_id.return_value = tutor

    use_case = ReplaceAvailabilityUseCase(mock_uow)
    result = await use_case.execute(tutor.id, CallerRole.tutor, [14, 9, 10])

    assert result.is_ok()
    assert result.value.available_hours == [9, 10, 14]

    tutor_id, template = mock_uow.time_slots.save_template.call_args.args
    assert tutor_id == tutor.id
    assert template.available_hours() == [9, 10, 14]
    assert mock_uow.audit_events.create.call_args.args[0].action == "availability_updated"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_replace_availability_rejects_invalid_hour(mock_uow, tutor):
    use_case = ReplaceAvailabilityUseCase(mock_uow)
    result = await use_case.execute(tutor.id, CallerRole.tutor, [9, 24])

    assert result.is_err()
    assert isinstance(result.error, ValidationError)
    assert result.error.code == "INVALID_HOUR"
    mock_uow.time_slots.save_template.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_replace_availability_is_tutor_only(mock_uow, tutor):
    use_case = ReplaceAvailabilityUseCase(mock_uow)
    result = await use_case.execute(tutor.id, CallerRole.student, [9])

    assert isinstance(result.error, ForbiddenError)


@pytest.mark.asyncio
async def test_replace_availability_unknown_tutor(mock_uow):
    mock_uow.tutors.get_by_id.return_value = None

    use_case = ReplaceAvailabilityUseCase(mock_uow)
    result = await use_case.execute(uuid4(), CallerRole.tutor, [9])

    assert isinstance(result.error, NotFoundError)
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_set_slot_upserts_single_hour(mock_uow, tutor):
    mock_uow.tutors.get_by_id.return_value = tutor
    mock_uow.time_slots.upsert_slot.return_value = TutorTimeSlot(
        tutor_id=tutor.id, hour_start=9, is_available=True
    )

    use_case = SetSlotAvailabilityUseCase(mock_uow)
    result = await use_case.execute(tutor.id, CallerRole.tutor, 9, True)

    assert result.is_ok()
    assert result.value.hour_start == 9
    assert result.value.is_available is True
    mock_uow.time_slots.upsert_slot.assert_awaited_once_with(tutor.id, 9, True)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_set_slot_rejects_invalid_hour(mock_uow, tutor):
    use_case = SetSlotAvailabilityUseCase(mock_uow)
    result = await use_case.execute(tutor.id, CallerRole.tutor, -1, True)

    assert isinstance(result.error, ValidationError)
    mock_uow.time_slots.upsert_slot.assert_not_called()


@pytest.mark.asyncio
async def test_add_blackout_date(mock_uow, tutor):
    mock_uow.tutors.get_by_id.return_value = tutor

    use_case = AddBlackoutDateUseCase(mock_uow)
    result = await use_case.execute(tutor.id, CallerRole.tutor, date(2024, 1, 10), "Holiday")

    assert result.is_ok()
    assert result.value.blackout_date == date(2024, 1, 10)
    assert result.value.reason == "Holiday"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_add_duplicate_blackout_date_conflicts(mock_uow, tutor):
    mock_uow.tutors.get_by_id.return_value = tutor
    mock_uow.blackout_dates.create.side_effect = DuplicateEntryError("duplicate")

    use_case = AddBlackoutDateUseCase(mock_uow)
    result = await use_case.execute(tutor.id, CallerRole.tutor, date(2024, 1, 10))

    assert isinstance(result.error, ConflictError)
    assert result.error.code == "BLACKOUT_DATE_EXISTS"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_resolve_open_slots_labels_hours(mock_uow, tutor):
    mock_uow.tutors.get_by_id.return_value = tutor
    mock_uow.time_slots.get_by_tutor_id.return_value = [
        TutorTimeSlot(tutor_id=tutor.id, hour_start=h, is_available=h in (9, 14))
        for h in range(24)
    ]

    use_case = ResolveOpenSlotsUseCase(mock_uow)
    result = await use_case.execute(tutor.id, date(2024, 1, 10))

    assert result.value.available_hours == [9, 14]
    assert result.value.available_slots == ["09:00", "14:00"]


@pytest.mark.asyncio
async def test_resolve_open_slots_unknown_tutor(mock_uow):
    mock_uow.tutors.get_by_id.return_value = None

    use_case = ResolveOpenSlotsUseCase(mock_uow)
    result = await use_case.execute(uuid4(), date(2024, 1, 10))

    assert isinstance(result.error, NotFoundError)
