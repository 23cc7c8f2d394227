"""Compliance tracking router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.pagination import PaginationParams
from vendor_portal.core.response import DataResponse, ListResponse, paginated
from vendor_portal.db.base import get_db
from vendor_portal.routers.deps import require_admin, require_vendor_access
from vendor_portal.schemas.compliance import (
    ComplianceCreate,
    ComplianceOut,
    ComplianceUpdate,
    ExpiringComplianceOut,
)
from vendor_portal.services.compliance import DEFAULT_EXPIRY_WINDOW_DAYS, ComplianceService

router = APIRouter(tags=["Compliance"])


@router.get("/compliance/expiring", response_model=DataResponse[list[ExpiringComplianceOut]])
async def expiring_compliance(
    days: int = Query(default=DEFAULT_EXPIRY_WINDOW_DAYS, ge=1, le=365),
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    """Certifications expiring within the next ``days`` days, soonest first."""
    rows = await ComplianceService(session).expiring(days)
    return {
        "data": [
            ExpiringComplianceOut(
                **ComplianceOut.model_validate(record).model_dump(), days_until_expiry=left
            )
            for record, left in rows
        ]
    }


@router.get("/vendors/{vendor_id}/compliance", response_model=ListResponse[ComplianceOut])
async def list_compliance(
    vendor_id: str,
    filter_status: Optional[str] = Query(default=None, alias="status"),
    pagination: PaginationParams = Depends(),
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    items, total = await ComplianceService(session).list_records(
        vendor_id, offset=pagination.offset, limit=pagination.limit, status=filter_status
    )
    return paginated(
        [ComplianceOut.model_validate(c) for c in items],
        total, pagination.page, pagination.limit,
    )


@router.post(
    "/vendors/{vendor_id}/compliance",
    response_model=DataResponse[ComplianceOut],
    status_code=status.HTTP_201_CREATED,
)
async def create_compliance(
    vendor_id: str,
    body: ComplianceCreate,
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    record = await ComplianceService(session).create_record(vendor_id, body.model_dump())
    return {"data": ComplianceOut.model_validate(record)}


@router.get("/vendors/{vendor_id}/compliance/{record_id}", response_model=DataResponse[ComplianceOut])
async def get_compliance(
    vendor_id: str,
    record_id: str,
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    record = await ComplianceService(session).get_record(vendor_id, record_id)
    return {"data": ComplianceOut.model_validate(record)}


@router.put("/vendors/{vendor_id}/compliance/{record_id}", response_model=DataResponse[ComplianceOut])
async def update_compliance(
    vendor_id: str,
    record_id: str,
    body: ComplianceUpdate,
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    record = await ComplianceService(session).update_record(
        vendor_id, record_id, body.model_dump(exclude_unset=True)
    )
    return {"data": ComplianceOut.model_validate(record)}


@router.delete("/vendors/{vendor_id}/compliance/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_compliance(
    vendor_id: str,
    record_id: str,
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    await ComplianceService(session).delete_record(vendor_id, record_id)
