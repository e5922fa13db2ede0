"""Application settings and environment helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv(override=False)


# Fixed values ---------------------------------------------------------------
CALLBACK_URL = "http://localhost:3000/auth/callback"
ANALYTICS_SCOPE = "https://www.googleapis.com/auth/analytics.readonly"
DEFAULT_DATABASE_URL = "sqlite:///data/app.db"
DEFAULT_PORT = 3000
DEFAULT_SESSION_TTL_SECONDS = 14 * 24 * 60 * 60


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


@dataclass(frozen=True)
class Settings:
    """Runtime configuration resolved once at startup."""

    google_client_id: str
    google_client_secret: str
    session_secret: str
    database_url: str = DEFAULT_DATABASE_URL
    port: int = DEFAULT_PORT
    cookie_secure: bool = False
    session_ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS
    analytics_view_id: Optional[str] = None
    log_level: str = "INFO"
    callback_url: str = CALLBACK_URL


def load_settings() -> Settings:
    """Build :class:`Settings` from the process environment."""

    return Settings(
        google_client_id=_require_env("GOOGLE_CLIENT_ID"),
        google_client_secret=_require_env("GOOGLE_CLIENT_SECRET"),
        session_secret=_require_env("SESSION_SECRET"),
        database_url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        port=_env_int("PORT", DEFAULT_PORT),
        cookie_secure=_env_bool("COOKIE_SECURE", False),
        session_ttl_seconds=_env_int("SESSION_TTL_SECONDS", DEFAULT_SESSION_TTL_SECONDS),
        analytics_view_id=os.getenv("ANALYTICS_VIEW_ID") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


__all__ = [
    "ANALYTICS_SCOPE",
    "CALLBACK_URL",
    "DEFAULT_DATABASE_URL",
    "DEFAULT_PORT",
    "DEFAULT_SESSION_TTL_SECONDS",
    "Settings",
    "load_settings",
]
