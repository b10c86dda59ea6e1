"""Module: security."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from secrets import token_urlsafe

from pawcademy.core.config import settings

ROLE_CUSTOMER = "customer"
ROLE_TRAINER = "trainer"
ROLE_ADMIN = "admin"


@dataclass(frozen=True)
class LoginSession:
    token: str
    role: str
    user_id: int
    first_name: str
    last_name: str
    phone_number: str
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(timezone.utc)) >= self.expires_at


class SessionStore:
    """
    In-process registry of login sessions keyed by bearer token.

    Each identity (role, user id) holds at most one live session: a new
    login replaces the previous token. Expired sessions are swept on every
    issue.

    Sessions do not survive a restart and are not shared between worker
    processes.
    """

    def __init__(self, ttl: timedelta):
        self.ttl = ttl
        self._sessions: dict[str, LoginSession] = {}
        self._lock = threading.Lock()

    def issue(self, role: str, user_id: int, first_name: str, last_name: str, phone_number: str) -> LoginSession:
        session = LoginSession(
            token=token_urlsafe(32),
            role=role,
            user_id=user_id,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            expires_at=datetime.now(timezone.utc) + self.ttl,
        )
        with self._lock:
            self._sweep(session.role, session.user_id)
            self._sessions[session.token] = session
        return session

    def _sweep(self, role: str, user_id: int) -> None:
        # Caller holds the lock.
        now = datetime.now(timezone.utc)
        stale = [
            token
            for token, existing in self._sessions.items()
            if existing.is_expired(now) or (existing.role == role and existing.user_id == user_id)
        ]
        for token in stale:
            del self._sessions[token]

    def get(self, token: str) -> LoginSession | None:
        with self._lock:
            session = self._sessions.get(token)
            if session and session.is_expired():
                del self._sessions[token]
                return None
            return session

    def revoke(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


sessions = SessionStore(ttl=timedelta(minutes=settings.session_ttl_minutes))
