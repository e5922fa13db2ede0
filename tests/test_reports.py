from __future__ import annotations

import logging

from analytics_dashboard.core import ReportFetchError
from conftest import REPORT_PAYLOAD, login

FORM = {"startDate": "2024-01-01", "endDate": "2024-01-31", "metric": "sessions"}


def test_getdata_requires_session(client, analytics) -> None:
    r = client.post("/getdata", data=FORM, follow_redirects=False)

    assert r.status_code == 302
    assert r.headers["location"] == "/"
    assert analytics.calls == []


def test_getdata_without_session_redirects_before_validating(client, analytics) -> None:
    r = client.post("/getdata", follow_redirects=False)

    assert r.status_code == 302
    assert analytics.calls == []


def test_getdata_renders_report(client, provider, analytics) -> None:
    login(client, provider, access_token="tok-xyz")

    r = client.post("/getdata", data=FORM)

    assert r.status_code == 200
    assert r.template.name == "dashboard.html"
    assert r.context["data"] == REPORT_PAYLOAD
    assert r.context["user"].googleId == "g123"
    assert analytics.calls == [("tok-xyz", "2024-01-01", "2024-01-31", "sessions")]


def test_getdata_accepts_json_body(client, provider, analytics) -> None:
    login(client, provider, access_token="tok-json")

    r = client.post("/getdata", json=FORM)

    assert r.status_code == 200
    assert analytics.calls == [("tok-json", "2024-01-01", "2024-01-31", "sessions")]


def test_getdata_uses_latest_access_token(client, provider, analytics) -> None:
    login(client, provider, access_token="old")
    login(client, provider, access_token="new")

    client.post("/getdata", data=FORM)

    assert analytics.calls[0][0] == "new"


def test_getdata_rejects_missing_fields(client, provider, analytics) -> None:
    login(client, provider)

    r = client.post("/getdata", data={"startDate": "2024-01-01", "endDate": "2024-01-31"})

    assert r.status_code == 422
    assert analytics.calls == []


def test_getdata_does_not_validate_formats(client, provider, analytics) -> None:
    login(client, provider)

    r = client.post("/getdata", data={"startDate": "yesterday", "endDate": "today", "metric": "ga:x"})

    assert r.status_code == 200
    assert analytics.calls[0][1:] == ("yesterday", "today", "ga:x")


def test_report_failure_renders_error_view(client, provider, analytics, caplog) -> None:
    login(client, provider)
    analytics.error = ReportFetchError("Analytics report request failed: 403 Forbidden")

    with caplog.at_level(logging.ERROR, logger="analytics_dashboard.api.handlers"):
        r = client.post("/getdata", data=FORM)

    assert r.status_code == 500
    assert r.template.name == "error.html"
    assert "403 Forbidden" not in r.text
    assert any("403 Forbidden" in rec.getMessage() for rec in caplog.records)


def test_unexpected_error_renders_error_view(client, provider, analytics) -> None:
    login(client, provider)
    analytics.error = RuntimeError("unexpected")

    r = client.post("/getdata", data=FORM)

    assert r.status_code == 500
    assert "unexpected" not in r.text
    # The app keeps serving after the failure.
    assert client.get("/dashboard").status_code == 200
