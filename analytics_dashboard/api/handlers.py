"""Centralized exception handlers."""

from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse, Response
from sqlalchemy.exc import SQLAlchemyError

from ..core import DashboardError, NotAuthenticated

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong while processing your request."


async def not_authenticated_handler(request: Request, exc: NotAuthenticated) -> Response:
    return RedirectResponse("/", status_code=302)


async def server_error_handler(request: Request, exc: Exception) -> Response:
    """Log the full error and render the generic error view.

    The client only sees a reference id that matches the log line.
    """

    reference = uuid.uuid4().hex[:12]
    logger.error(
        "Request failed [%s] %s %s: %s",
        reference,
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    templates = request.app.state.context.templates
    return templates.TemplateResponse(
        request,
        "error.html",
        {"message": GENERIC_ERROR_MESSAGE, "reference": reference},
        status_code=500,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotAuthenticated, not_authenticated_handler)
    app.add_exception_handler(DashboardError, server_error_handler)
    app.add_exception_handler(SQLAlchemyError, server_error_handler)
    app.add_exception_handler(Exception, server_error_handler)


__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "register_exception_handlers",
    "server_error_handler",
]
