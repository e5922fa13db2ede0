"""Core configuration and infrastructure helpers."""

from .config import (
    ANALYTICS_SCOPE,
    CALLBACK_URL,
    Settings,
    load_settings,
)
from .context import AppContext, build_templates, get_context
from .database import build_engine, get_session
from .errors import (
    AuthenticationError,
    DashboardError,
    NotAuthenticated,
    ReportFetchError,
    SessionError,
)
from .time import as_utc, utcnow

__all__ = [
    "ANALYTICS_SCOPE",
    "AppContext",
    "as_utc",
    "AuthenticationError",
    "CALLBACK_URL",
    "DashboardError",
    "NotAuthenticated",
    "ReportFetchError",
    "SessionError",
    "Settings",
    "build_engine",
    "build_templates",
    "get_context",
    "get_session",
    "load_settings",
    "utcnow",
]
