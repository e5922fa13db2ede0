"""Analytics report endpoint."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from ...core import AppContext, get_context
from ...models import User
from ..deps import require_user
from ..schemas import ReportRequest

router = APIRouter(tags=["reports"])


async def _read_report_request(request: Request) -> ReportRequest:
    content_type = request.headers.get("content-type", "")
    raw: Any
    if content_type.startswith("application/json"):
        try:
            raw = await request.json()
        except ValueError as exc:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": "Invalid JSON body"}]
            ) from exc
    else:
        form = await request.form()
        raw = {key: value for key, value in form.items()}

    try:
        return ReportRequest.model_validate(raw)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


@router.post("/getdata")
async def get_data(
    request: Request,
    context: AppContext = Depends(get_context),
    user: User = Depends(require_user),
):
    # Parsed after the guard so anonymous requests never reach validation.
    body = await _read_report_request(request)
    data: Dict[str, Any] = await context.analytics.fetch_report(
        user.accessToken, body.startDate, body.endDate, body.metric
    )
    return context.templates.TemplateResponse(
        request, "dashboard.html", {"user": user, "data": data}
    )


__all__ = ["router"]
