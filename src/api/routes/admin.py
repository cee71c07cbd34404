"""
Admin API Routes - Tutor Registry Endpoints

These endpoints are for the back office (tutor onboarding / offboarding).
Authentication is via Admin API Key, not user JWTs.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tutors import (
    CreateTutorUseCase,
    DeleteTutorResponse,
    DeleteTutorUseCase,
    TutorResponse,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


class CreateTutorRequest(BaseModel):
    """Create tutor HTTP request payload"""

    display_name: str = Field(..., min_length=1, max_length=255)
    available_hours: List[int] = Field(
        default_factory=list, description="Hours (0-23) that start open"
    )
    tutor_id: Optional[UUID] = Field(
        None, description="Reuse an existing identity id for the tutor"
    )


@router.post(
    "/tutors",
    status_code=status.HTTP_201_CREATED,
    response_model=TutorResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def create_tutor(
    request: CreateTutorRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Tutor

    Registers a tutor and writes its 24-hour availability template.

    Requires: X-Admin-API-Key header

    Raises:
        - 400 Bad Request: INVALID_HOUR, INVALID_DISPLAY_NAME
        - 401 Unauthorized: Missing or invalid admin API key
        - 409 Conflict: TUTOR_EXISTS
    """
    use_case = CreateTutorUseCase(uow)
    result = await use_case.execute(
        request.display_name, request.available_hours, request.tutor_id
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/tutors/{tutor_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteTutorResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def delete_tutor(
    tutor_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Tutor

    Removes the tutor together with its template rows and blackout dates.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: TUTOR_NOT_FOUND
        - 409 Conflict: TUTOR_HAS_BOOKINGS
    """
    use_case = DeleteTutorUseCase(uow)
    result = await use_case.execute(tutor_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
