"""Application context assembled once by the app factory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.engine import Engine

from .config import Settings

if TYPE_CHECKING:  # pragma: no cover
    from ..services.analytics import AnalyticsClient
    from ..services.google import GoogleIdentityProvider

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


@dataclass
class AppContext:
    """Everything a request handler needs, injected instead of module globals."""

    settings: Settings
    engine: Engine
    identity_provider: "GoogleIdentityProvider"
    analytics: "AnalyticsClient"
    templates: Jinja2Templates


def build_templates() -> Jinja2Templates:
    return Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_context(request: Request) -> AppContext:
    """FastAPI dependency returning the context stored on ``app.state``."""

    return request.app.state.context


__all__ = ["AppContext", "TEMPLATES_DIR", "build_templates", "get_context"]
