from abc import ABC, abstractmethod

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.blackout_date_repository import IBlackoutDateRepository
from src.app.repositories.booking_repository import IBookingRepository
from src.app.repositories.session_message_repository import ISessionMessageRepository
from src.app.repositories.session_repository import ISessionRepository
from src.app.repositories.time_slot_repository import ITimeSlotRepository
from src.app.repositories.tutor_repository import ITutorRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    tutors: ITutorRepository
    time_slots: ITimeSlotRepository
    blackout_dates: IBlackoutDateRepository
    bookings: IBookingRepository
    sessions: ISessionRepository
    messages: ISessionMessageRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
