"""Public vendor directory router (no authentication)."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.pagination import PaginationParams
from vendor_portal.core.response import DataResponse, ListResponse, paginated
from vendor_portal.db.base import get_db
from vendor_portal.schemas.directory import DirectoryFacetsOut, DirectoryVendorOut
from vendor_portal.services.directory import DirectoryService

router = APIRouter(prefix="/directory", tags=["Directory"])


@router.get("", response_model=ListResponse[DirectoryVendorOut])
async def search_directory(
    search: Optional[str] = Query(default=None),
    vendor_type: Optional[str] = Query(default=None, alias="type"),
    location: Optional[str] = Query(default=None, description="State or country"),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """Approved vendors ordered by company name."""
    items, total = await DirectoryService(session).search(
        offset=pagination.offset,
        limit=pagination.limit,
        search=search,
        vendor_type=vendor_type,
        location=location,
    )
    return paginated(
        [DirectoryVendorOut.model_validate(v) for v in items],
        total, pagination.page, pagination.limit,
    )


@router.get("/facets", response_model=DataResponse[DirectoryFacetsOut])
async def directory_facets(session: AsyncSession = Depends(get_db)):
    return {"data": await DirectoryService(session).facets()}


@router.get("/{vendor_id}", response_model=DataResponse[DirectoryVendorOut])
async def get_directory_listing(vendor_id: str, session: AsyncSession = Depends(get_db)):
    vendor = await DirectoryService(session).get_listing(vendor_id)
    return {"data": DirectoryVendorOut.model_validate(vendor)}
