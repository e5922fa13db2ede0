"""Exception types shared by the routers and services."""

from __future__ import annotations


class DashboardError(Exception):
    """Base class for failures rendered by the central error handler."""


class AuthenticationError(DashboardError):
    """The authorization code could not be exchanged for a token and profile."""


class SessionError(DashboardError):
    """A session could not be established after a successful login."""


class ReportFetchError(DashboardError):
    """The reporting API call failed or returned an error status."""


class NotAuthenticated(Exception):
    """Raised by the route guard when no user is bound to the request."""


__all__ = [
    "AuthenticationError",
    "DashboardError",
    "NotAuthenticated",
    "ReportFetchError",
    "SessionError",
]
