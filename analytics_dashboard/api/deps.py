"""Request-scoped dependencies for session resolution and the route guard."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from sqlmodel import Session

from ..core import AppContext, NotAuthenticated, get_context, get_session
from ..models import User
from ..services.sessions import SESSION_KEY, resolve_session_user


def get_current_user(
    request: Request,
    context: AppContext = Depends(get_context),
    session: Session = Depends(get_session),
) -> Optional[User]:
    """Resolve the cookie's session id to a user, or ``None`` if anything is missing."""

    session_id = request.session.get(SESSION_KEY)
    if not session_id:
        return None

    user = resolve_session_user(
        session, str(session_id), ttl_seconds=context.settings.session_ttl_seconds
    )
    if user is None:
        request.session.pop(SESSION_KEY, None)
    return user


def require_user(user: Optional[User] = Depends(get_current_user)) -> User:
    if user is None:
        raise NotAuthenticated()
    return user


__all__ = ["get_current_user", "require_user"]
