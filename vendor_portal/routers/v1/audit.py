"""Audit log router (admin only)."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.response import DataResponse, ListResponse, paginated
from vendor_portal.db.base import get_db
from vendor_portal.routers.deps import require_admin
from vendor_portal.schemas.audit import AuditLogOut, AuditStatsOut
from vendor_portal.services.audit import AuditService

router = APIRouter(prefix="/audit-logs", tags=["Audit"])


@router.get("", response_model=ListResponse[AuditLogOut])
async def list_audit_logs(
    vendor_id: Optional[str] = Query(default=None, alias="vendorId"),
    entity_type: Optional[str] = Query(default=None, alias="entityType"),
    action: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=500),
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    """Most recent entries first."""
    items, total = await AuditService(session).list_logs(
        offset=(page - 1) * limit,
        limit=limit,
        vendor_id=vendor_id,
        entity_type=entity_type,
        action=action,
    )
    return paginated([AuditLogOut.model_validate(a) for a in items], total, page, limit)


@router.get("/stats", response_model=DataResponse[AuditStatsOut])
async def audit_stats(
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    return {"data": await AuditService(session).stats()}
