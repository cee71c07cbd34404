"""
SessionMessage Entity

Chat message exchanged around a session; soft-expires.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class SessionMessage(SQLModel, table=True):
    """
    SessionMessage entity - time-boxed chat.

    Business Rules:
    - expires_at is set at send time to scheduled end + 1 hour
    - Completing the session pulls expires_at to completion + 1 hour
    - Expired messages are filtered out on read, never required to be deleted
    """

    __tablename__ = "session_messages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    session_id: UUID = Field(foreign_key="sessions.id", nullable=False)
    sender_id: UUID = Field(nullable=False)
    message_content: str = Field(max_length=1000)

    sent_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (
        Index("idx_message_session_sent_at", "session_id", "sent_at"),
    )
