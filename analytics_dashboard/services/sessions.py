"""Server-side sessions stored alongside the user records.

The signed Starlette cookie carries only the opaque session id under
:data:`SESSION_KEY`; the binding to a user lives in the ``user_session``
table. Resolution walks cookie id -> session row -> user row and treats any
missing or expired link as an anonymous request.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from ..core.errors import SessionError
from ..core.time import as_utc, utcnow
from ..models import SessionRecord, User

logger = logging.getLogger(__name__)

SESSION_KEY = "session_id"


def serialize_user(user: User) -> int:
    """Return the reference stored on a session row."""

    if user.id is None:
        raise SessionError("Cannot bind a session to an unsaved user")
    return user.id


def deserialize_user(session: Session, user_id: int) -> Optional[User]:
    return session.get(User, user_id)


def create_session(session: Session, user: User, *, ttl_seconds: int) -> SessionRecord:
    record = SessionRecord(
        user_id=serialize_user(user),
        expires_at=utcnow() + timedelta(seconds=ttl_seconds),
    )
    session.add(record)
    session.commit()
    session.refresh(record)
    return record


def resolve_session_user(
    session: Session, session_id: str, *, ttl_seconds: int
) -> Optional[User]:
    """Return the user bound to ``session_id`` and extend its expiry."""

    record = session.get(SessionRecord, session_id)
    if record is None:
        return None

    now = utcnow()
    if as_utc(record.expires_at) <= now:
        session.delete(record)
        session.commit()
        return None

    user = deserialize_user(session, record.user_id)
    if user is None:
        return None

    record.expires_at = now + timedelta(seconds=ttl_seconds)
    session.add(record)
    session.commit()
    session.refresh(user)
    return user


def login_user(
    request: Request, session: Session, user: User, *, ttl_seconds: int
) -> SessionRecord:
    """Bind the browser to ``user``; any storage failure is a :class:`SessionError`."""

    try:
        record = create_session(session, user, ttl_seconds=ttl_seconds)
    except SQLAlchemyError as exc:
        session.rollback()
        raise SessionError("Error logging in user") from exc

    request.session[SESSION_KEY] = record.id
    logger.info("Session established for user %s", user.id)
    return record


__all__ = [
    "SESSION_KEY",
    "create_session",
    "deserialize_user",
    "login_user",
    "resolve_session_user",
    "serialize_user",
]
