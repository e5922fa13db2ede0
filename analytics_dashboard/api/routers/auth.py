"""OAuth authentication routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from sqlmodel import Session

from ...core import AppContext, get_context, get_session
from ...services.sessions import login_user
from ...services.users import upsert_google_user

router = APIRouter(tags=["auth"])


@router.get("/auth")
async def auth_start(request: Request, context: AppContext = Depends(get_context)):
    return await context.identity_provider.authorize_redirect(request)


@router.get("/auth/callback")
async def auth_callback(
    request: Request,
    context: AppContext = Depends(get_context),
    session: Session = Depends(get_session),
):
    """Finish the authorization-code grant.

    Denied consent sends the browser back to the entry page. Exchange and
    session failures propagate to the central error handler.
    """

    result = await context.identity_provider.exchange(request)
    if result is None:
        return RedirectResponse("/", status_code=302)

    user = upsert_google_user(
        session,
        google_id=result.profile.id,
        display_name=result.profile.display_name,
        access_token=result.access_token,
    )
    login_user(
        request, session, user, ttl_seconds=context.settings.session_ttl_seconds
    )
    return RedirectResponse("/dashboard", status_code=302)


__all__ = ["router"]
