"""
Booking Engine Error Taxonomy

Typed failures returned by use cases. Each subclass keeps the ``code`` /
``message`` pair of ``Error`` so API responses stay machine-readable, while the
class itself tells the API layer which HTTP status to use.
"""

from src.libs.result import Error


class ValidationError(Error):
    """Malformed input, e.g. an hour outside 0-23"""


class NotFoundError(Error):
    """Unknown tutor, booking or session id"""


class ConflictError(Error):
    """Duplicate record, e.g. a blackout date added twice"""


class ForbiddenError(Error):
    """Caller is not the owning tutor/student of the resource"""


class InvalidStateError(Error):
    """Requested transition is illegal from the current status"""


class SlotUnavailableError(Error):
    """Booking requested for a closed, blacked-out or already-booked hour"""
