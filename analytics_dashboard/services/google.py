"""Google OAuth2 authorization-code flow built on Authlib's Starlette client."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from authlib.integrations.starlette_client import OAuth, OAuthError
from fastapi import Request
from starlette.responses import Response

from ..core.config import ANALYTICS_SCOPE, Settings
from ..core.errors import AuthenticationError

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"

# `profile` is needed for the display name; analytics access stays read-only.
SCOPES = f"profile {ANALYTICS_SCOPE}"


@dataclass(frozen=True)
class GoogleProfile:
    id: str
    display_name: Optional[str]


@dataclass(frozen=True)
class ProviderResult:
    """Outcome of a successful code exchange."""

    access_token: str
    profile: GoogleProfile


def profile_from_userinfo(userinfo: Dict[str, Any]) -> GoogleProfile:
    """Map a Google userinfo payload onto :class:`GoogleProfile`."""

    sub = userinfo.get("sub") or userinfo.get("id")
    if not sub:
        raise AuthenticationError("Google profile is missing an identifier")
    name = userinfo.get("name") or userinfo.get("given_name")
    return GoogleProfile(id=str(sub), display_name=name)


class GoogleIdentityProvider:
    """Redirects to Google's consent screen and exchanges the returned code."""

    name = "google"

    def __init__(
        self,
        settings: Settings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.callback_url = settings.callback_url
        client_kwargs: Dict[str, Any] = {"scope": SCOPES}
        if transport is not None:
            client_kwargs["transport"] = transport
        self._oauth = OAuth()
        self._oauth.register(
            name=self.name,
            client_id=settings.google_client_id,
            client_secret=settings.google_client_secret,
            authorize_url=AUTHORIZE_URL,
            access_token_url=TOKEN_URL,
            userinfo_endpoint=USERINFO_URL,
            client_kwargs=client_kwargs,
        )

    @property
    def client(self):
        return self._oauth.create_client(self.name)

    async def authorize_redirect(self, request: Request) -> Response:
        """Return a 302 to the consent screen.

        Offline access plus a forced consent prompt makes Google issue a
        refresh token even for accounts that already granted access.
        """

        return await self.client.authorize_redirect(
            request,
            self.callback_url,
            access_type="offline",
            prompt="consent",
        )

    async def exchange(self, request: Request) -> Optional[ProviderResult]:
        """Exchange the callback's code for a token and profile.

        Returns ``None`` when the user denied consent; raises
        :class:`AuthenticationError` for any other failure.
        """

        error = request.query_params.get("error")
        if error == "access_denied" or (not error and not request.query_params.get("code")):
            logger.info("Google consent not granted (error=%s)", error)
            return None

        try:
            token = await self.client.authorize_access_token(request)
            userinfo = await self.client.userinfo(token=token)
        except (OAuthError, httpx.HTTPError) as exc:
            raise AuthenticationError("Error in Google authentication") from exc

        access_token = token.get("access_token")
        if not access_token:
            raise AuthenticationError("Google token response has no access_token")

        return ProviderResult(
            access_token=access_token,
            profile=profile_from_userinfo(dict(userinfo)),
        )


__all__ = [
    "AUTHORIZE_URL",
    "GoogleIdentityProvider",
    "GoogleProfile",
    "ProviderResult",
    "SCOPES",
    "TOKEN_URL",
    "USERINFO_URL",
    "profile_from_userinfo",
]
