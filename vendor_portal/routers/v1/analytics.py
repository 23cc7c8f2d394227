"""Admin dashboard and analytics router."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.pagination import PaginationParams
from vendor_portal.core.response import DataResponse, ListResponse, csv_filename, paginated
from vendor_portal.db.base import get_db
from vendor_portal.routers.deps import require_admin
from vendor_portal.schemas.analytics import AnalyticsOut, DashboardStatsOut, ReportCreate, ReportOut
from vendor_portal.services.analytics import DEFAULT_WINDOW_DAYS, AnalyticsService

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/dashboard", response_model=DataResponse[DashboardStatsOut])
async def dashboard_stats(
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    """Headline counts; clients re-poll every ``refreshIntervalSeconds``."""
    return {"data": await AnalyticsService(session).dashboard_stats()}


@router.get("", response_model=DataResponse[AnalyticsOut])
async def analytics(
    days: int = Query(default=DEFAULT_WINDOW_DAYS, ge=1, le=365),
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    return {"data": await AnalyticsService(session).analytics(days)}


@router.get("/export", response_class=Response)
async def export_analytics(
    days: int = Query(default=DEFAULT_WINDOW_DAYS, ge=1, le=365),
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    body = await AnalyticsService(session).export_csv(days)
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": csv_filename("vendor-analytics", date.today().isoformat())},
    )


@router.post("/reports", response_model=DataResponse[ReportOut], status_code=status.HTTP_201_CREATED)
async def generate_report(
    body: ReportCreate,
    admin: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    report = await AnalyticsService(session).generate_report(body.report_type, body.days, admin)
    return {"data": ReportOut.model_validate(report)}


@router.get("/reports", response_model=ListResponse[ReportOut])
async def list_reports(
    report_type: Optional[str] = Query(default=None, alias="reportType"),
    pagination: PaginationParams = Depends(),
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    items, total = await AnalyticsService(session).list_reports(
        offset=pagination.offset, limit=pagination.limit, report_type=report_type
    )
    return paginated(
        [ReportOut.model_validate(r) for r in items],
        total, pagination.page, pagination.limit,
    )
