"""User store helpers."""

from __future__ import annotations

import logging
from typing import Optional

from sqlmodel import Session, select

from ..core.time import utcnow
from ..models import User

logger = logging.getLogger(__name__)


def find_user_by_google_id(session: Session, google_id: str) -> Optional[User]:
    return session.exec(select(User).where(User.googleId == google_id)).first()


def upsert_google_user(
    session: Session,
    *,
    google_id: str,
    display_name: Optional[str],
    access_token: str,
) -> User:
    """Create the user on first login, otherwise overwrite only the access token.

    Performs exactly one commit.
    """

    user = find_user_by_google_id(session, google_id)
    created = user is None
    if user is None:
        user = User(
            googleId=google_id,
            displayName=display_name,
            accessToken=access_token,
        )
    else:
        user.accessToken = access_token
        user.updated_at = utcnow()

    session.add(user)
    session.commit()
    session.refresh(user)
    if created:
        logger.info("Created user %s for Google id %s", user.id, google_id)
    else:
        logger.info("Refreshed access token for user %s", user.id)
    return user


__all__ = ["find_user_by_google_id", "upsert_google_user"]
