"""Compliance tracking service."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.exceptions import NotFoundError, ValidationError
from vendor_portal.domain.compliance import ComplianceTracking
from vendor_portal.repositories.compliance import ComplianceRepository
from vendor_portal.repositories.vendor import VendorRepository

logger = logging.getLogger(__name__)

DEFAULT_EXPIRY_WINDOW_DAYS = 30


class ComplianceService:
    def __init__(self, session: AsyncSession):
        self._repo = ComplianceRepository(session)
        self._vendors = VendorRepository(session)

    async def _require_vendor(self, vendor_id: str) -> None:
        if not await self._vendors.exists(vendor_id):
            raise NotFoundError("Vendor", vendor_id)

    async def list_records(
        self, vendor_id: str, *, offset: int, limit: int, status: str | None = None
    ) -> tuple[list[ComplianceTracking], int]:
        await self._require_vendor(vendor_id)
        return await self._repo.list(
            offset=offset,
            limit=limit,
            filters={"vendor_id": vendor_id, "status": status},
        )

    async def get_record(self, vendor_id: str, record_id: str) -> ComplianceTracking:
        record = await self._repo.get_by_id(record_id)
        if not record or record.vendor_id != vendor_id:
            raise NotFoundError("Compliance record", record_id)
        return record

    async def create_record(self, vendor_id: str, data: dict[str, Any]) -> ComplianceTracking:
        await self._require_vendor(vendor_id)
        record = await self._repo.create(vendor_id=vendor_id, **data)
        logger.info("Compliance record %s (%s) added for %s", record.id, record.compliance_type, vendor_id)
        return record

    async def update_record(
        self, vendor_id: str, record_id: str, changes: dict[str, Any]
    ) -> ComplianceTracking:
        record = await self.get_record(vendor_id, record_id)
        cleared = self._repo.nulled_required(changes)
        if cleared:
            raise ValidationError("Required fields cannot be cleared", fields=cleared)
        issue =changes.get("issue_date", record.issue_date)
        expiry = changes.get("expiry_date", record.expiry_date)
        if issue and expiry and expiry < issue:
            raise ValidationError("expiryDate must not precede issueDate", fields=["expiry_date"])
        if not changes:
            return record
        return await self._repo.update(record_id, **changes)  # type: ignore[return-value]

    async def delete_record(self, vendor_id: str, record_id: str) -> None:
        await self.get_record(vendor_id, record_id)
        await self._repo.delete(record_id)

    async def expiring(
        self, days: int = DEFAULT_EXPIRY_WINDOW_DAYS, today: date | None = None
    ) -> list[tuple[ComplianceTracking, int]]:
        """Records expiring between today and ``days`` from now, soonest first."""
        today = today or date.today()
        records = await self._repo.expiring_between(today, today + timedelta(days=days))
        return [(r, (r.expiry_date - today).days) for r in records]
