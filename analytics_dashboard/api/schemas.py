"""Request body schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ReportRequest(BaseModel):
    """Inputs for a single analytics report; formats are left to the reporting API."""

    startDate: str = Field(min_length=1)
    endDate: str = Field(min_length=1)
    metric: str = Field(min_length=1)


__all__ = ["ReportRequest"]
