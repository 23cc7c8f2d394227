"""Dashboard statistics, vendor breakdowns and persisted report snapshots."""

from __future__ import annotations

import csv
import io
import logging
from collections import Counter
from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.config import settings
from vendor_portal.core.context import Principal
from vendor_portal.domain.compliance import AnalyticsReport
from vendor_portal.domain.vendor import STATUS_APPROVED, STATUS_PENDING, STATUS_REJECTED
from vendor_portal.repositories.compliance import AnalyticsReportRepository, ComplianceRepository
from vendor_portal.repositories.document import DocumentRepository
from vendor_portal.repositories.vendor import VendorRepository

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 30


def status_breakdown(counts: dict[str | None, int]) -> list[dict[str, Any]]:
    total = sum(counts.values())
    buckets = [
        {
            "status": status or "unknown",
            "count": count,
            "percentage": round(count / total * 100) if total else 0,
        }
        for status, count in counts.items()
    ]
    return sorted(buckets, key=lambda b: (-b["count"], b["status"]))


def type_breakdown(counts: dict[str | None, int]) -> list[dict[str, Any]]:
    buckets = [{"type": t or "unknown", "count": c} for t, c in counts.items()]
    return sorted(buckets, key=lambda b: (-b["count"], b["type"]))


def daily_counts(created: list[datetime], days: int, today: date) -> list[dict[str, Any]]:
    """Registrations per day for the last ``days`` days (today included), zero-filled."""
    per_day = Counter(c.date() for c in created)
    start = today - timedelta(days=days - 1)
    return [
        {"date": start + timedelta(days=i), "count": per_day.get(start + timedelta(days=i), 0)}
        for i in range(days)
    ]


class AnalyticsService:
    def __init__(self, session: AsyncSession):
        self._vendors = VendorRepository(session)
        self._documents = DocumentRepository(session)
        self._compliance = ComplianceRepository(session)
        self._reports = AnalyticsReportRepository(session)

    async def dashboard_stats(self) -> dict[str, int]:
        by_status = await self._vendors.count_by("registration_status")
        return {
            "total_vendors": sum(by_status.values()),
            "pending_approvals": by_status.get(STATUS_PENDING, 0),
            "active_vendors": by_status.get(STATUS_APPROVED, 0),
            "rejected_vendors": by_status.get(STATUS_REJECTED, 0),
            "total_documents": await self._documents.count(),
            "refresh_interval_seconds": settings.dashboard_refresh_seconds,
        }

    async def analytics(self, days: int = DEFAULT_WINDOW_DAYS, today: date | None = None) -> dict[str, Any]:
        today = today or datetime.now(timezone.utc).date()
        by_status = await self._vendors.count_by("registration_status")
        by_type = await self._vendors.count_by("vendor_type")

        since = datetime.combine(today - timedelta(days=days - 1), time.min, tzinfo=timezone.utc)
        recent = await self._vendors.created_since(since)

        return {
            "total_vendors": sum(by_status.values()),
            "pending_reviews": by_status.get(STATUS_PENDING, 0),
            "approved_vendors": by_status.get(STATUS_APPROVED, 0),
            "rejected_vendors": by_status.get(STATUS_REJECTED, 0),
            "vendors_by_status": status_breakdown(by_status),
            "vendors_by_type": type_breakdown(by_type),
            "recent_registrations": daily_counts([v.created_at for v in recent], days, today),
        }

    async def compliance_rate(self) -> float | None:
        total = await self._compliance.count()
        if not total:
            return None
        active = await self._compliance.count(status="active")
        return round(active / total * 100, 2)

    async def generate_report(
        self, report_type: str, days: int, actor: Principal
    ) -> AnalyticsReport:
        today = datetime.now(timezone.utc).date()
        if report_type == "compliance":
            upcoming = await self._compliance.expiring_between(today, today + timedelta(days=days))
            data: dict[str, Any] = {
                "records": await self._compliance.count(),
                "active": await self._compliance.count(status="active"),
                "expired": await self._compliance.count(status="expired"),
                "expiring_within_window": len(upcoming),
            }
        else:
            data = {
                "dashboard": await self.dashboard_stats(),
                **await self.analytics(days, today),
            }
        report = await self._reports.create(
            report_type=report_type,
            period_start=today - timedelta(days=days - 1),
            period_end=today,
            compliance_rate=await self.compliance_rate(),
            report_data=_json_ready(data),
            generated_by=actor.subject,
        )
        logger.info("Generated %s report %s", report_type, report.id)
        return report

    async def list_reports(
        self, *, offset: int, limit: int, report_type: str | None = None
    ) -> tuple[list[AnalyticsReport], int]:
        return await self._reports.list(
            offset=offset, limit=limit, filters={"report_type": report_type}
        )

    async def export_csv(self, days: int = DEFAULT_WINDOW_DAYS) -> str:
        stats = await self.dashboard_stats()
        data = await self.analytics(days)

        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(["Metric", "Value"])
        writer.writerow(["Total Vendors", stats["total_vendors"]])
        writer.writerow(["Pending Approvals", stats["pending_approvals"]])
        writer.writerow(["Active Vendors", stats["active_vendors"]])
        writer.writerow(["Rejected Vendors", stats["rejected_vendors"]])
        writer.writerow(["Total Documents", stats["total_documents"]])
        for bucket in data["vendors_by_status"]:
            writer.writerow([f"Status: {bucket['status']}", bucket["count"]])
        for bucket in data["vendors_by_type"]:
            writer.writerow([f"Type: {bucket['type']}", bucket["count"]])
        return buffer.getvalue()


def _json_ready(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _json_ready(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_ready(v) for v in value]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value
