"""Shared fixtures: an app on in-memory SQLite with fake Google collaborators."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest
from fastapi.responses import RedirectResponse
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from analytics_dashboard.app import create_app
from analytics_dashboard.core import Settings, build_engine
from analytics_dashboard.models import SessionRecord, User
from analytics_dashboard.services.google import GoogleProfile, ProviderResult

TEST_SETTINGS = Settings(
    google_client_id="test-client-id",
    google_client_secret="test-client-secret",
    session_secret="test-secret-key-for-testing-purposes-only",
    database_url="sqlite://",
)

REPORT_PAYLOAD: Dict[str, Any] = {
    "reports": [
        {
            "columnHeader": {"metricHeader": {"metricHeaderEntries": [{"name": "sessions"}]}},
            "data": {"totals": [{"values": ["42"]}]},
        }
    ]
}


class FakeIdentityProvider:
    """Stands in for Google: returns ``result`` or raises ``error`` on exchange."""

    def __init__(self) -> None:
        self.result: Optional[ProviderResult] = None
        self.error: Optional[Exception] = None
        self.exchanges = 0

    def will_return(self, google_id: str, display_name: str, access_token: str) -> None:
        self.result = ProviderResult(
            access_token=access_token,
            profile=GoogleProfile(id=google_id, display_name=display_name),
        )

    async def authorize_redirect(self, request):  # type: ignore[no-untyped-def]
        return RedirectResponse("https://accounts.google.com/o/oauth2/v2/auth", status_code=302)

    async def exchange(self, request):  # type: ignore[no-untyped-def]
        self.exchanges += 1
        if self.error is not None:
            raise self.error
        return self.result


class FakeAnalytics:
    def __init__(self) -> None:
        self.payload: Dict[str, Any] = REPORT_PAYLOAD
        self.error: Optional[Exception] = None
        self.calls: List[Tuple[str, str, str, str]] = []

    async def fetch_report(self, access_token, start_date, end_date, metric):  # type: ignore[no-untyped-def]
        self.calls.append((access_token, start_date, end_date, metric))
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def analytics() -> FakeAnalytics:
    return FakeAnalytics()


@pytest.fixture
def app(engine, provider, analytics):
    return create_app(
        TEST_SETTINGS, engine=engine, identity_provider=provider, analytics=analytics
    )


@pytest.fixture
def client(app):
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


def login(
    client: TestClient,
    provider: FakeIdentityProvider,
    *,
    google_id: str = "g123",
    display_name: str = "Alice",
    access_token: str = "token-1",
):
    provider.will_return(google_id, display_name, access_token)
    return client.get("/auth/callback?code=valid", follow_redirects=False)


def all_users(engine) -> List[User]:
    with Session(engine) as session:
        return list(session.exec(select(User)).all())


def all_sessions(engine) -> List[SessionRecord]:
    with Session(engine) as session:
        return list(session.exec(select(SessionRecord)).all())
