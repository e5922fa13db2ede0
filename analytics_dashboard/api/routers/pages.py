"""Server-rendered pages."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request

from ...core import AppContext, get_context
from ...models import User
from ..deps import get_current_user, require_user

router = APIRouter(tags=["pages"])


@router.get("/")
def index(
    request: Request,
    context: AppContext = Depends(get_context),
    user: Optional[User] = Depends(get_current_user),
):
    """Entry page with the sign-in link."""

    return context.templates.TemplateResponse(request, "index.html", {"user": user})


@router.get("/dashboard")
def dashboard(
    request: Request,
    context: AppContext = Depends(get_context),
    user: User = Depends(require_user),
):
    return context.templates.TemplateResponse(
        request, "dashboard.html", {"user": user, "data": None}
    )


__all__ = ["router"]
