from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.blackout_date_repository import BlackoutDateRepository
from src.adapter.repositories.booking_repository import BookingRepository
from src.adapter.repositories.session_message_repository import SessionMessageRepository
from src.adapter.repositories.session_repository import SessionRepository
from src.adapter.repositories.time_slot_repository import TimeSlotRepository
from src.adapter.repositories.tutor_repository import TutorRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.tutors = TutorRepository(self.session)
        self.time_slots = TimeSlotRepository(self.session)
        self.blackout_dates = BlackoutDateRepository(self.session)
        self.bookings = BookingRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.messages = SessionMessageRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
