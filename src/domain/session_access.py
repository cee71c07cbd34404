"""
Session Access Gate

Derives the access state of a session participant from the current instant,
the booking's scheduled window and the session's lifecycle status. Nothing is
cached: every call recomputes from its inputs.

    opens_at  = scheduled_start - 1h
    closes_at = scheduled_end + 1h

    ended (completed / no_show):  post_session until closes_at, then expired
    now <  opens_at:               too_early
    opens_at <= now < start:       pre_session     (tutor may start)
    start <= now <= end:           during_session  (tutor may start if scheduled)
    end < now <= closes_at:        post_session
    otherwise:                     expired
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from .entities import ENDED_SESSION_STATUSES, AccessState, CallerRole, SessionStatus

ACCESS_WINDOW = timedelta(hours=1)

_ACCESS_MESSAGES = {
    AccessState.too_early: "Session access is available 1 hour before the scheduled time.",
    AccessState.pre_session: "Session access available. Waiting for session to start.",
    AccessState.during_session: "Session is in progress.",
    AccessState.post_session: "Session has ended. Messaging available for 1 hour after session.",
    AccessState.expired: "Session access has expired.",
}


@dataclass(frozen=True)
class SessionAccess:
    state: AccessState
    can_message: bool
    can_start: bool

    @property
    def message(self) -> str:
        return _ACCESS_MESSAGES[self.state]


class SessionAccessGate:
    """Pure evaluation of a participant's rights around a scheduled session"""

    @staticmethod
    def opens_at(scheduled_start: datetime) -> datetime:
        return scheduled_start - ACCESS_WINDOW

    @staticmethod
    def closes_at(scheduled_end: datetime) -> datetime:
        return scheduled_end + ACCESS_WINDOW

    @staticmethod
    def message_expiry(scheduled_end: datetime) -> datetime:
        """Expiry stamped on every message sent for this booking"""
        return SessionAccessGate.closes_at(scheduled_end)

    @staticmethod
    def evaluate(
        now: datetime,
        scheduled_start: datetime,
        scheduled_end: datetime,
        status: SessionStatus,
        caller_role: CallerRole,
    ) -> SessionAccess:
        opens_at = SessionAccessGate.opens_at(scheduled_start)
        closes_at = SessionAccessGate.closes_at(scheduled_end)
        is_tutor = caller_role == CallerRole.tutor

        if status in ENDED_SESSION_STATUSES:
            if now <= closes_at:
                return SessionAccess(AccessState.post_session, can_message=True, can_start=False)
            return SessionAccess(AccessState.expired, can_message=False, can_start=False)

        if now < opens_at:
            return SessionAccess(AccessState.too_early, can_message=False, can_start=False)

        if now < scheduled_start:
            return SessionAccess(AccessState.pre_session, can_message=True, can_start=is_tutor)

        if now <= scheduled_end:
            return SessionAccess(
                AccessState.during_session,
                can_message=True,
                can_start=is_tutor and status == SessionStatus.scheduled,
            )

        if now <= closes_at:
            return SessionAccess(AccessState.post_session, can_message=True, can_start=False)

        return SessionAccess(AccessState.expired, can_message=False, can_start=False)
