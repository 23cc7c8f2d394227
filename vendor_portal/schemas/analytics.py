"""Dashboard and analytics schemas."""

from datetime import date, datetime
from typing import Any, Literal

from pydantic import Field

from vendor_portal.schemas.common import CamelModel


class DashboardStatsOut(CamelModel):
    total_vendors: int
    pending_approvals: int
    active_vendors: int
    rejected_vendors: int
    total_documents: int
    refresh_interval_seconds: int


class StatusBucket(CamelModel):
    status: str
    count: int
    percentage: int


class TypeBucket(CamelModel):
    type: str
    count: int


class DailyCount(CamelModel):
    date: date
    count: int


class AnalyticsOut(CamelModel):
    total_vendors: int
    pending_reviews: int
    approved_vendors: int
    rejected_vendors: int
    vendors_by_status: list[StatusBucket]
    vendors_by_type: list[TypeBucket]
    recent_registrations: list[DailyCount]


class ReportCreate(CamelModel):
    report_type: Literal["summary", "compliance"] = "summary"
    days: int = Field(default=30, ge=1, le=365)


class ReportOut(CamelModel):
    id: str
    report_type: str
    period_start: date | None = None
    period_end: date | None = None
    compliance_rate: float | None = None
    report_data: Any = None
    generated_by: str | None = None
    generated_date: datetime
