"""Module: deps."""

from typing import Generator

from fastapi import Header, HTTPException
from sqlalchemy.orm import Session

from pawcademy.core.security import ROLE_ADMIN, LoginSession, sessions
from pawcademy.db.session import SessionLocal


# Dependency provider: one DB session per request lifecycle.
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_token_value(authorization: str | None) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing Authorization header")

    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid Authorization header")

    return parts[1].strip()


def get_current_session(authorization: str | None = Header(default=None)) -> LoginSession:
    token = get_token_value(authorization)
    session = sessions.get(token)
    if not session:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return session


def require_scope(session: LoginSession, role: str, user_id: int) -> None:
    """Admins see every scope; anyone else only their own."""
    if session.role == ROLE_ADMIN:
        return
    if session.role != role or session.user_id != user_id:
        raise HTTPException(status_code=403, detail=f"Not allowed to view data for this {role}")
