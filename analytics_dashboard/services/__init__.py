"""Service layer helpers."""

from .analytics import AnalyticsClient, build_report_request
from .google import GoogleIdentityProvider, GoogleProfile, ProviderResult
from .sessions import SESSION_KEY, login_user, resolve_session_user
from .users import find_user_by_google_id, upsert_google_user

__all__ = [
    "AnalyticsClient",
    "GoogleIdentityProvider",
    "GoogleProfile",
    "ProviderResult",
    "SESSION_KEY",
    "build_report_request",
    "find_user_by_google_id",
    "login_user",
    "resolve_session_user",
    "upsert_google_user",
]
