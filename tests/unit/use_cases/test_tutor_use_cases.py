from datetime import datetime
from uuid import uuid4

import pytest

from src.app.use_cases.tutors import CreateTutorUseCase, DeleteTutorUseCase
from src.domain.entities import Booking, Tutor
from src.domain.errors import ConflictError, NotFoundError, ValidationError


@pytest.mark.asyncio
async def test_create_tutor_initializes_template(mock_uow):
    use_case = CreateTutorUseCase(mock_uow)
    result = await use_case.execute("Ada Lovelace", [10, 9])

    assert result.is_ok()
    assert result.value.display_name == "Ada Lovelace"
    assert result.value.available_hours == [9, 10]

    tutor_id, template = mock_uow.time_slots.save_template.call_args.args
    assert tutor_id == result.value.id
    assert template.available_hours() == [9, 10]
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_tutor_with_explicit_id(mock_uow):
    tutor_id = uuid4()
    mock_uow.tutors.get_by_id.return_value = None

    result = await CreateTutorUseCase(mock_uow).execute("Ada", tutor_id=tutor_id)

    assert result.value.id == tutor_id
    assert result.value.available_hours == []


@pytest.mark.asyncio
async def test_create_tutor_existing_id_conflicts(mock_uow):
    tutor_id = uuid4()
    mock_uow.tutors.get_by_id.return_value = Tutor(id=tutor_id, display_name="Ada")

    result = await CreateTutorUseCase(mock_uow).execute("Ada", tutor_id=tutor_id)

    assert isinstance(result.error, ConflictError)
    mock_uow.tutors.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_tutor_rejects_invalid_hours(mock_uow):
    result = await CreateTutorUseCase(mock_uow).execute("Ada", [9, 25])

    assert isinstance(result.error, ValidationError)
    assert result.error.code == "INVALID_HOUR"


@pytest.mark.asyncio
async def test_create_tutor_requires_display_name(mock_uow):
    result = await CreateTutorUseCase(mock_uow).execute("   ")

    assert result.error.code == "INVALID_DISPLAY_NAME"


@pytest.mark.asyncio
async def test_delete_tutor(mock_uow):
    tutor = Tutor(id=uuid4(), display_name="Ada")
    mock_uow.tutors.get_by_id.return_value = tutor

    result = await DeleteTutorUseCase(mock_uow).execute(tutor.id)

    assert result.value.status == "deleted"
    mock_uow.tutors.delete.assert_awaited_once_with(tutor)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_tutor_with_bookings_conflicts(mock_uow):
    tutor = Tutor(id=uuid4(), display_name="Ada")
    mock_uow.tutors.get_by_id.return_value = tutor
    start = datetime(2024, 1, 10, 9, 0)
    mock_uow.bookings.get_by_tutor_id.return_value = [
        Booking(
            student_id=uuid4(),
            tutor_id=tutor.id,
            scheduled_start_time=start,
            scheduled_end_time=start.replace(hour=10),
        )
    ]

    result = await DeleteTutorUseCase(mock_uow).execute(tutor.id)

    assert result.error.code == "TUTOR_HAS_BOOKINGS"
    mock_uow.tutors.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_unknown_tutor(mock_uow):
    mock_uow.tutors.get_by_id.return_value = None

    result = await DeleteTutorUseCase(mock_uow).execute(uuid4())

    assert isinstance(result.error, NotFoundError)
