"""Vendor management router: admin listing/export/removal and per-vendor profile sections.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject DB session + caller principal via Depends
  3. Instantiate the service with the session
  4. Call service methods and wrap result in response envelope
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.pagination import PaginationParams
from vendor_portal.core.response import DataResponse, ListResponse, csv_filename, paginated
from vendor_portal.db.base import get_db
from vendor_portal.routers.deps import require_admin, require_vendor_access
from vendor_portal.schemas.email import EmailContent
from vendor_portal.schemas.vendor import (
    ArchivedVendorOut,
    ComplianceSectionUpdate,
    FinancialSectionUpdate,
    GeneralSectionUpdate,
    ProcurementSectionUpdate,
    SectionUpdateOut,
    ShareSectionRequest,
    VendorDetailOut,
    VendorOut,
)
from vendor_portal.services.vendor import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])


def _svc(session: AsyncSession) -> VendorService:
    return VendorService(session)


# ------------------------------------------------------------------
# Admin: listing, export, archive
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[VendorOut])
async def list_vendors(
    search: Optional[str] = Query(default=None, description="Name, email, vendor id or city"),
    filter_status: Optional[str] = Query(default=None, alias="status", description="Filter by registration status"),
    vendor_type: Optional[str] = Query(default=None, alias="vendorType"),
    pagination: PaginationParams = Depends(),
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    """List vendors, newest first. Filter by ?status=pending|approved|rejected."""
    items, total = await _svc(session).list_vendors(
        offset=pagination.offset,
        limit=pagination.limit,
        search=search,
        status=filter_status,
        vendor_type=vendor_type,
        order_by=pagination.sort,
        order=pagination.order,
    )
    return paginated(
        [VendorOut.model_validate(v) for v in items],
        total, pagination.page, pagination.limit,
    )


@router.get("/export", response_class=Response)
async def export_vendors(
    search: Optional[str] = Query(default=None),
    filter_status: Optional[str] = Query(default=None, alias="status"),
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    """Download the filtered vendor list as CSV."""
    body = await _svc(session).export_csv(search=search, status=filter_status)
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": csv_filename("vendors", date.today().isoformat())},
    )


@router.get("/archived", response_model=ListResponse[ArchivedVendorOut])
async def list_archived_vendors(
    pagination: PaginationParams = Depends(),
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    items, total = await _svc(session).list_archived(
        offset=pagination.offset, limit=pagination.limit
    )
    return paginated(
        [ArchivedVendorOut.model_validate(a) for a in items],
        total, pagination.page, pagination.limit,
    )


@router.delete("/{vendor_id}", response_model=DataResponse[ArchivedVendorOut])
async def delete_vendor(
    vendor_id: str,
    reason: str = Query(default="admin_removal", min_length=1, max_length=255),
    notes: Optional[str] = Query(default=None),
    admin: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    """Archive and remove a vendor with its documents, profile, accounts and alerts."""
    archived = await _svc(session).delete_vendor(vendor_id, admin, reason=reason, notes=notes)
    return {"data": ArchivedVendorOut.model_validate(archived)}


# ------------------------------------------------------------------
# Vendor profile (admin or owning vendor)
# ------------------------------------------------------------------

@router.get("/{vendor_id}", response_model=DataResponse[VendorDetailOut])
async def get_vendor(
    vendor_id: str,
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    """Vendor with its extended profile and completion status."""
    return {"data": await _svc(session).get_detail(vendor_id)}


async def _update_section(
    session: AsyncSession, vendor_id: str, section: str, body: BaseModel, principal: Principal
) -> dict:
    detail = await _svc(session).update_section(vendor_id, section, body, principal)
    return {"data": SectionUpdateOut(section=section, vendor=detail)}


@router.put("/{vendor_id}/general", response_model=DataResponse[SectionUpdateOut])
async def update_general(
    vendor_id: str,
    body: GeneralSectionUpdate,
    principal: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    return await _update_section(session, vendor_id, "general", body, principal)


@router.put("/{vendor_id}/financial", response_model=DataResponse[SectionUpdateOut])
async def update_financial(
    vendor_id: str,
    body: FinancialSectionUpdate,
    principal: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    return await _update_section(session, vendor_id, "financial", body, principal)


@router.put("/{vendor_id}/procurement", response_model=DataResponse[SectionUpdateOut])
async def update_procurement(
    vendor_id: str,
    body: ProcurementSectionUpdate,
    principal: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    return await _update_section(session, vendor_id, "procurement", body, principal)


@router.put("/{vendor_id}/compliance", response_model=DataResponse[SectionUpdateOut])
async def update_compliance(
    vendor_id: str,
    body: ComplianceSectionUpdate,
    principal: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    return await _update_section(session, vendor_id, "compliance", body, principal)


@router.post("/{vendor_id}/share", response_model=DataResponse[EmailContent])
async def share_section(
    vendor_id: str,
    body: ShareSectionRequest,
    principal: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    """Email one profile section to a recipient (logged, not transmitted)."""
    content = await _svc(session).share_section(
        vendor_id, body.section, body.recipient_email, body.message, principal
    )
    return {"data": content}
