"""Notification router: stored notifications, computed alerts, preferences.

Vendor accounts only ever see their own notifications; admins may filter by
any vendor or see the admin queue (no vendor filter).
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.exceptions import ForbiddenError
from vendor_portal.core.pagination import PaginationParams
from vendor_portal.core.response import DataResponse, ListResponse, paginated
from vendor_portal.db.base import get_db
from vendor_portal.routers.deps import get_principal, require_vendor_access
from vendor_portal.schemas.notification import (
    MarkAllReadOut,
    NotificationOut,
    NotificationPreferenceOut,
    NotificationPreferenceUpdate,
    NotificationStatsOut,
    VendorAlertOut,
)
from vendor_portal.services.notification import NotificationService

router = APIRouter(tags=["Notifications"])


def _scope(principal: Principal, vendor_id: str | None) -> str | None:
    if principal.is_admin:
        return vendor_id
    if vendor_id and vendor_id != principal.vendor_id:
        raise ForbiddenError("You do not have access to this vendor")
    return principal.vendor_id


@router.get("/notifications", response_model=ListResponse[NotificationOut])
async def list_notifications(
    vendor_id: Optional[str] = Query(default=None, alias="vendorId"),
    unread_only: bool = Query(default=False, alias="unreadOnly"),
    notification_type: Optional[str] = Query(default=None, alias="type"),
    pagination: PaginationParams = Depends(),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_db),
):
    items, total = await NotificationService(session).list_notifications(
        offset=pagination.offset,
        limit=pagination.limit,
        vendor_id=_scope(principal, vendor_id),
        unread_only=unread_only,
        notification_type=notification_type,
    )
    return paginated(
        [NotificationOut.model_validate(n) for n in items],
        total, pagination.page, pagination.limit,
    )


@router.get("/notifications/stats", response_model=DataResponse[NotificationStatsOut])
async def notification_stats(
    vendor_id: Optional[str] = Query(default=None, alias="vendorId"),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_db),
):
    stats = await NotificationService(session).stats(_scope(principal, vendor_id))
    return {"data": stats}


@router.get("/notifications/alerts", response_model=DataResponse[list[VendorAlertOut]])
async def vendor_alerts(
    vendor_id: Optional[str] = Query(default=None, alias="vendorId"),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_db),
):
    """Alerts computed from current vendor data, most urgent first."""
    alerts = await NotificationService(session).vendor_alerts(_scope(principal, vendor_id))
    return {"data": alerts}


@router.patch("/notifications/{notification_id}/read", response_model=DataResponse[NotificationOut])
async def mark_notification_read(
    notification_id: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_db),
):
    svc = NotificationService(session)
    notification = await svc.get(notification_id)
    if not principal.is_admin and notification.vendor_id != principal.vendor_id:
        raise ForbiddenError("You do not have access to this notification")
    notification = await svc.mark_read(notification_id)
    return {"data": NotificationOut.model_validate(notification)}


@router.post("/notifications/mark-all-read", response_model=DataResponse[MarkAllReadOut])
async def mark_all_read(
    vendor_id: Optional[str] = Query(default=None, alias="vendorId"),
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_db),
):
    updated = await NotificationService(session).mark_all_read(_scope(principal, vendor_id))
    return {"data": MarkAllReadOut(updated=updated)}


# ------------------------------------------------------------------
# Preferences
# ------------------------------------------------------------------

@router.get(
    "/vendors/{vendor_id}/notification-preferences",
    response_model=DataResponse[NotificationPreferenceOut],
)
async def get_preferences(
    vendor_id: str,
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    prefs = await NotificationService(session).get_preferences(vendor_id)
    return {"data": NotificationPreferenceOut.model_validate(prefs)}


@router.put(
    "/vendors/{vendor_id}/notification-preferences",
    response_model=DataResponse[NotificationPreferenceOut],
)
async def update_preferences(
    vendor_id: str,
    body: NotificationPreferenceUpdate,
    _: Principal = Depends(require_vendor_access),
    session: AsyncSession = Depends(get_db),
):
    prefs = await NotificationService(session).update_preferences(
        vendor_id, body.model_dump(exclude_unset=True)
    )
    return {"data": NotificationPreferenceOut.model_validate(prefs)}
