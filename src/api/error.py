from typing import NoReturn

from fastapi import status

from src.libs.result import Error
from src.domain.errors import (
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    SlotUnavailableError,
    ValidationError,
)


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


_STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InvalidStateError, status.HTTP_409_CONFLICT),
    (SlotUnavailableError, status.HTTP_409_CONFLICT),
)


def raise_for_error(error: Error) -> NoReturn:
    """Translate a use case failure into the matching HTTP error"""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            raise ClientError(error, status_code=status_code)
    raise ServerError(error)
