"""Notification service — stored notifications, computed vendor alerts, preferences."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.exceptions import NotFoundError
from vendor_portal.domain.mixins import utcnow
from vendor_portal.domain.notification import (
    PRIORITY_RANK,
    Notification,
    NotificationPreference,
)
from vendor_portal.domain.vendor import Vendor
from vendor_portal.repositories.notification import (
    NotificationPreferenceRepository,
    NotificationRepository,
)
from vendor_portal.repositories.vendor import VendorRepository

logger = logging.getLogger(__name__)

TYPE_REGISTRATION = "vendor_registration"
TYPE_STATUS_UPDATE = "status_update"
TYPE_DOCUMENT_UPLOAD = "document_upload"
TYPE_COMPLIANCE_ALERT = "compliance_alert"
TYPE_CONTRACT_EXPIRY = "contract_expiry"

NEW_REGISTRATION_WINDOW = timedelta(days=7)
RECENT_APPROVAL_WINDOW = timedelta(days=1)
CONTRACT_EXPIRY_WINDOW_DAYS = 30

PREFERENCE_FIELDS = (
    "email_notifications",
    "compliance_alerts",
    "document_reminders",
    "status_updates",
)


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes for timezone-aware columns
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def generate_vendor_alerts(
    vendors: list[Vendor], now: datetime | None = None
) -> list[dict[str, Any]]:
    """Derive attention items from current vendor data.

    Sorted by priority (high first) and then newest first.
    """
    now = now or datetime.now(timezone.utc)
    today = now.date()
    alerts: list[dict[str, Any]] = []

    for vendor in vendors:
        name = vendor.legal_entity_name
        created = _aware(vendor.created_at)
        age = now - created

        def _alert(kind: str, type_: str, title: str, message: str, priority: str,
                   created_at: datetime = now) -> None:
            alerts.append(
                {
                    "id": f"{kind}_{vendor.vendor_id}",
                    "title": title,
                    "message": message,
                    "type": type_,
                    "priority": priority,
                    "vendor_id": vendor.vendor_id,
                    "vendor_name": name,
                    "created_at": created_at,
                    "is_read": False,
                }
            )

        if vendor.registration_status == "pending" and age <= NEW_REGISTRATION_WINDOW:
            _alert(
                "reg", TYPE_REGISTRATION, "New Vendor Registration",
                f'A new vendor "{name}" has registered and requires review',
                "medium", created,
            )

        if vendor.registration_status == "approved" and age <= RECENT_APPROVAL_WINDOW:
            _alert(
                "status", TYPE_STATUS_UPDATE, "Vendor Status Updated",
                f'Vendor "{name}" status has been changed to approved',
                "medium", created,
            )

        expiry: date | None = vendor.contract_expiration_date
        if expiry is not None:
            days_left = (expiry - today).days
            if 0 < days_left <= CONTRACT_EXPIRY_WINDOW_DAYS:
                _alert(
                    "contract", TYPE_CONTRACT_EXPIRY, "Contract Expiring Soon",
                    f'Contract for vendor "{name}" expires in {days_left} days',
                    "high",
                )

        if not vendor.w9_status or vendor.w9_status in ("pending", "expired"):
            _alert(
                "compliance", TYPE_COMPLIANCE_ALERT, "Compliance Alert",
                f'W-9 form for vendor "{name}" requires attention',
                "high",
            )

        if not vendor.tax_id or not vendor.bank_account_details:
            _alert(
                "missing_info", TYPE_COMPLIANCE_ALERT, "Incomplete Vendor Information",
                f'Vendor "{name}" has missing critical information (Tax ID or Bank Details)',
                "medium",
            )

    alerts.sort(key=lambda a: _aware(a["created_at"]), reverse=True)
    alerts.sort(key=lambda a: PRIORITY_RANK.get(a["priority"], 0), reverse=True)
    return alerts


class NotificationService:
    def __init__(self, session: AsyncSession):
        self._repo = NotificationRepository(session)
        self._prefs = NotificationPreferenceRepository(session)
        self._vendors = VendorRepository(session)

    # ------------------------------------------------------------------
    # Stored notifications
    # ------------------------------------------------------------------

    async def notify(
        self,
        title: str,
        message: str,
        notification_type: str,
        *,
        vendor_id: str | None = None,
        priority: str = "medium",
        user_id: str | None = None,
    ) -> Notification:
        return await self._repo.create(
            title=title,
            message=message,
            notification_type=notification_type,
            priority=priority,
            vendor_id=vendor_id,
            user_id=user_id,
        )

    async def list_notifications(
        self,
        *,
        offset: int,
        limit: int,
        vendor_id: str | None = None,
        unread_only: bool = False,
        notification_type: str | None = None,
    ) -> tuple[list[Notification], int]:
        filters: dict[str, Any] = {
            "vendor_id": vendor_id,
            "notification_type": notification_type,
        }
        if unread_only:
            filters["is_read"] = False
        return await self._repo.list(
            offset=offset, limit=limit, order_by="created_at", order="desc", filters=filters
        )

    async def get(self, notification_id: str) -> Notification:
        notification = await self._repo.get_by_id(notification_id)
        if not notification:
            raise NotFoundError("Notification", notification_id)
        return notification

    async def mark_read(self, notification_id: str) -> Notification:
        notification = await self.get(notification_id)
        if notification.is_read:
            return notification
        return await self._repo.update(  # type: ignore[return-value]
            notification_id, is_read=True, read_at=utcnow()
        )

    async def mark_all_read(self, vendor_id: str | None) -> int:
        return await self._repo.mark_all_read(vendor_id)

    async def stats(self, vendor_id: str | None = None) -> dict[str, int]:
        return await self._repo.stats(vendor_id)

    # ------------------------------------------------------------------
    # Computed alerts
    # ------------------------------------------------------------------

    async def vendor_alerts(self, vendor_id: str | None = None) -> list[dict[str, Any]]:
        if vendor_id:
            vendor = await self._vendors.get_by_id(vendor_id)
            if not vendor:
                raise NotFoundError("Vendor", vendor_id)
            vendors = [vendor]
        else:
            vendors = await self._vendors.all()
        return generate_vendor_alerts(vendors)

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------

    async def get_preferences(self, vendor_id: str) -> NotificationPreference | dict[str, Any]:
        prefs = await self._prefs.get_by(vendor_id=vendor_id)
        if prefs is None:
            return {"vendor_id": vendor_id, **{name: True for name in PREFERENCE_FIELDS}}
        return prefs

    async def update_preferences(self, vendor_id: str, changes: dict[str, Any]) -> NotificationPreference:
        if not await self._vendors.exists(vendor_id):
            raise NotFoundError("Vendor", vendor_id)
        changes = {k: v for k, v in changes.items() if k in PREFERENCE_FIELDS and v is not None}
        prefs = await self._prefs.get_by(vendor_id=vendor_id)
        if prefs is None:
            return await self._prefs.create(vendor_id=vendor_id, **changes)
        if not changes:
            return prefs
        return await self._prefs.update(prefs.id, **changes)  # type: ignore[return-value]

    async def wants(self, vendor_id: str, preference: str) -> bool:
        """Whether the vendor has `preference` switched on; no stored row means yes."""
        prefs = await self._prefs.get_by(vendor_id=vendor_id)
        return True if prefs is None else bool(getattr(prefs, preference))
