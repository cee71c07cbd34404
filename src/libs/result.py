"""
Result type shared by all use cases.

Use cases return ``Result`` values instead of raising for business failures;
the API layer decides how each ``Error`` maps onto an HTTP response.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Error:
    """Business failure with a machine-readable code and a human message"""

    code: str
    message: str


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def __repr__(self) -> str:
        if self.is_err():
            return f"Result.err({self.error!r})"
        return f"Result.ok({self.value!r})"


class Return:
    """Constructors for ``Result`` values"""

    @staticmethod
    def ok(value: Optional[T] = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
