from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.clock import Clock
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import CallerRole

from .dtos import MessageResponse, MessagesResponse
from .participant import load_participant_session


class ListMessagesUseCase:
    """Unexpired messages of a session, oldest first. Participants only."""

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, session_id: UUID, user_id: UUID, role: CallerRole
    ) -> Result[MessagesResponse]:
        async with self.uow:
            loaded = await load_participant_session(self.uow, session_id, user_id, role)
            if loaded.is_err():
                return Return.err(loaded.error)
            session, _ = loaded.value

            messages = await self.uow.messages.get_unexpired_by_session_id(
                session.id, self.clock.now()
            )

            return Return.ok(
                MessagesResponse(
                    session_id=session.id,
                    messages=[MessageResponse.from_entity(m, viewer_id=user_id) for m in messages],
                    total_messages=len(messages),
                )
            )
