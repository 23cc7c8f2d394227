"""Compliance tracking and analytics report repositories."""

from __future__ import annotations

from datetime import date

from sqlalchemy import select

from vendor_portal.domain.compliance import AnalyticsReport, ComplianceTracking
from vendor_portal.repositories.base import BaseRepository


class ComplianceRepository(BaseRepository[ComplianceTracking]):
    model = ComplianceTracking

    async def expiring_between(self, start: date, end: date) -> list[ComplianceTracking]:
        result = await self._session.execute(
            select(ComplianceTracking)
            .where(ComplianceTracking.expiry_date.is_not(None))
            .where(ComplianceTracking.expiry_date >= start)
            .where(ComplianceTracking.expiry_date <= end)
            .order_by(ComplianceTracking.expiry_date.asc())
        )
        return list(result.scalars().all())


class AnalyticsReportRepository(BaseRepository[AnalyticsReport]):
    model = AnalyticsReport
    default_order = "generated_date"
