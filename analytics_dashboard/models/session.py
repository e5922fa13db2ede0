"""Database model for server-side browser sessions."""

from __future__ import annotations

import secrets
from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


def _new_session_id() -> str:
    return secrets.token_urlsafe(32)


class SessionRecord(SQLModel, table=True):
    """Binds an opaque browser-held id to a user id until ``expires_at``."""

    __tablename__ = "user_session"

    id: str = ORMField(default_factory=_new_session_id, primary_key=True)
    # Plain column, not a foreign key: the session does not own the user row.
    user_id: int = ORMField(index=True)
    created_at: datetime = ORMField(default_factory=utcnow, sa_type=DateTime(timezone=True))
    expires_at: datetime = ORMField(sa_type=DateTime(timezone=True))


__all__ = ["SessionRecord"]
