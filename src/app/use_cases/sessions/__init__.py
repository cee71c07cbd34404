"""
Session Use Cases

Access gating, start/complete lifecycle and time-boxed chat.
"""

from .check_access_use_case import CheckAccessUseCase
from .complete_session_use_case import CompleteSessionUseCase
from .dtos import (
    ActiveSessionResponse,
    CompleteSessionResponse,
    MessageResponse,
    MessagesResponse,
    SessionAccessResponse,
    SessionResponse,
    StartSessionResponse,
)
from .get_active_session_use_case import GetActiveSessionUseCase
from .get_session_by_booking_use_case import GetSessionByBookingUseCase
from .list_messages_use_case import ListMessagesUseCase
from .send_message_use_case import DEFAULT_MESSAGE_MAX_LENGTH, SendMessageUseCase
from .start_session_use_case import StartSessionUseCase

__all__ = [
    "CheckAccessUseCase",
    "StartSessionUseCase",
    "CompleteSessionUseCase",
    "SendMessageUseCase",
    "ListMessagesUseCase",
    "GetSessionByBookingUseCase",
    "GetActiveSessionUseCase",
    "DEFAULT_MESSAGE_MAX_LENGTH",
    "SessionResponse",
    "SessionAccessResponse",
    "StartSessionResponse",
    "CompleteSessionResponse",
    "MessageResponse",
    "MessagesResponse",
    "ActiveSessionResponse",
]
