"""Database model for Google-authenticated users."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class User(SQLModel, table=True):
    """Account keyed by the Google profile id, holding the latest access token."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    googleId: str = ORMField(index=True, unique=True)
    displayName: Optional[str] = None
    accessToken: str
    created_at: datetime = ORMField(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = ORMField(default_factory=utcnow, sa_type=DateTime(timezone=True))


__all__ = ["User"]
