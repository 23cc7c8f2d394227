"""Admin account management router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.pagination import PaginationParams
from vendor_portal.core.response import DataResponse, ListResponse, paginated
from vendor_portal.db.base import get_db
from vendor_portal.routers.deps import require_admin
from vendor_portal.schemas.auth import AdminOut
from vendor_portal.services.auth import AuthService

router = APIRouter(prefix="/admins", tags=["Admins"])


@router.get("", response_model=ListResponse[AdminOut])
async def list_admins(
    search: Optional[str] = Query(default=None, description="Name, email, role or admin id"),
    pagination: PaginationParams = Depends(),
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    items, total = await AuthService(session).list_admins(
        offset=pagination.offset, limit=pagination.limit, search=search
    )
    return paginated(
        [AdminOut.model_validate(a) for a in items],
        total, pagination.page, pagination.limit,
    )


@router.patch("/{admin_pk}/toggle-active", response_model=DataResponse[AdminOut])
async def toggle_admin_active(
    admin_pk: str,
    admin: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    updated = await AuthService(session).toggle_admin_active(admin_pk, admin)
    return {"data": AdminOut.model_validate(updated)}


@router.delete("/{admin_pk}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_admin(
    admin_pk: str,
    admin: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db),
):
    await AuthService(session).delete_admin(admin_pk, admin)
