"""FastAPI application factory and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel
from starlette.middleware.sessions import SessionMiddleware

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_exception_handlers, register_routes
from .core import AppContext, Settings, build_engine, build_templates, load_settings
from .services.analytics import AnalyticsClient
from .services.google import GoogleIdentityProvider

SESSION_COOKIE = "sid"


@asynccontextmanager
async def lifespan(app: FastAPI):
    SQLModel.metadata.create_all(app.state.context.engine)
    yield


def create_app(
    settings: Optional[Settings] = None,
    *,
    engine: Optional[Engine] = None,
    identity_provider: Optional[GoogleIdentityProvider] = None,
    analytics: Optional[AnalyticsClient] = None,
) -> FastAPI:
    """Build the application and its :class:`AppContext`.

    Collaborators default to the real implementations; tests pass their own.
    """

    settings = settings or load_settings()
    context = AppContext(
        settings=settings,
        engine=engine or build_engine(settings.database_url),
        identity_provider=identity_provider or GoogleIdentityProvider(settings),
        analytics=analytics or AnalyticsClient(view_id=settings.analytics_view_id),
        templates=build_templates(),
    )

    app = FastAPI(title="Analytics Dashboard", version="0.1.0", lifespan=lifespan)
    app.state.context = context

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=SESSION_COOKIE,
        max_age=settings.session_ttl_seconds,
        https_only=settings.cookie_secure,
        same_site="lax",
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


__all__ = ["SESSION_COOKIE", "create_app", "lifespan"]
