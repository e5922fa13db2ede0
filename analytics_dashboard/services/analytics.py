"""Google Analytics Reporting API client."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..core.errors import ReportFetchError

REPORTS_URL = "https://analyticsreporting.googleapis.com/v4/reports:batchGet"


def build_report_request(
    start_date: str,
    end_date: str,
    metric: str,
    view_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Return a ``reports:batchGet`` body for a single date range and metric."""

    report: Dict[str, Any] = {
        "dateRanges": [{"startDate": start_date, "endDate": end_date}],
        "metrics": [{"expression": metric}],
    }
    if view_id:
        report["viewId"] = view_id
    return {"reportRequests": [report]}


class AnalyticsClient:
    """Fetches reports on behalf of a user with that user's access token."""

    def __init__(
        self,
        view_id: Optional[str] = None,
        *,
        endpoint: str = REPORTS_URL,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.view_id = view_id
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    async def fetch_report(
        self, access_token: str, start_date: str, end_date: str, metric: str
    ) -> Dict[str, Any]:
        body = build_report_request(start_date, end_date, metric, self.view_id)
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(
                    self.endpoint,
                    headers={"Authorization": f"Bearer {access_token}"},
                    json=body,
                )
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise ReportFetchError(f"Analytics report request failed: {exc}") from exc

            try:
                return response.json()
            except ValueError as exc:
                raise ReportFetchError("Analytics API returned a non-JSON body") from exc


__all__ = ["AnalyticsClient", "REPORTS_URL", "build_report_request"]
