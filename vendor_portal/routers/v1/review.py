"""Approve / reject / resubmit endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.response import DataResponse
from vendor_portal.db.base import get_db
from vendor_portal.routers.deps import require_admin, require_vendor_access
from vendor_portal.schemas.vendor import ReviewRequest, VendorOut
from vendor_portal.services.review import ReviewService

router = APIRouter(prefix="/vendors", tags=["Review"])


@router.post("/{vendor_id}/approve", response_model=DataResponse[VendorOut])
async def approve_vendor(
    vendor_id: str,
    body: Optional[ReviewRequest] = Body(default=None),
    admin: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    vendor = await ReviewService(session).approve(vendor_id, admin, body.notes if body else None)
    return {"data": VendorOut.model_validate(vendor)}


@router.post("/{vendor_id}/reject", response_model=DataResponse[VendorOut])
async def reject_vendor(
    vendor_id: str,
    body: Optional[ReviewRequest] = Body(default=None),
    admin: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    vendor = await ReviewService(session).reject(vendor_id, admin, body.notes if body else None)
    return {"data": VendorOut.model_validate(vendor)}


@router.post("/{vendor_id}/resubmit", response_model=DataResponse[VendorOut])
async def resubmit_vendor(
    vendor_id: str,
    principal: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    """Send a rejected registration back to the review queue."""
    vendor = await ReviewService(session).resubmit(vendor_id, principal)
    return {"data": VendorOut.model_validate(vendor)}
