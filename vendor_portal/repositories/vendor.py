"""Vendor repositories.

How to add a new repository:
  1. Create vendor_portal/repositories/my_entity.py
  2. class MyEntityRepository(BaseRepository[MyEntity]):
         model = MyEntity
  3. Add any domain-specific query methods as needed
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select

from vendor_portal.domain.vendor import ArchivedVendor, Vendor, VendorDraft, VendorProfile
from vendor_portal.repositories.base import BaseRepository


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor
    pk = "vendor_id"
    search_columns = ("legal_entity_name", "email", "vendor_id", "city")

    async def get_by_email(self, email: str) -> Vendor | None:
        result = await self._session.execute(
            select(Vendor).where(func.lower(Vendor.email) == email.strip().lower())
        )
        return result.scalars().first()

    async def exists(self, vendor_id: str) -> bool:
        result = await self._session.execute(
            select(func.count()).select_from(Vendor).where(Vendor.vendor_id == vendor_id)
        )
        return result.scalar_one() > 0

    async def count_by(self, column: str) -> dict[str | None, int]:
        """Group-by count over one column, e.g. registration_status or vendor_type."""
        col = getattr(Vendor, column)
        rows = (await self._session.execute(select(col, func.count()).group_by(col))).all()
        return {value: count for value, count in rows}

    async def created_since(self, since: datetime) -> list[Vendor]:
        result = await self._session.execute(
            select(Vendor).where(Vendor.created_at >= since).order_by(Vendor.created_at)
        )
        return list(result.scalars().all())


class DirectoryRepository(VendorRepository):
    """Approved vendors only, as shown in the public directory."""

    search_columns = (
        "legal_entity_name",
        "trade_name",
        "business_description",
        "products_services_description",
        "city",
        "state",
    )
    default_order = "legal_entity_name"

    def _base_query(self):
        return select(Vendor).where(Vendor.registration_status == "approved")

    async def search(
        self,
        *,
        search: str | None,
        vendor_type: str | None,
        location: str | None,
        offset: int,
        limit: int,
    ) -> tuple[list[Vendor], int]:
        q = self._apply_filters(self._base_query(), {"vendor_type": vendor_type}, search)
        if location:
            loc = location.strip().lower()
            q = q.where((func.lower(Vendor.state) == loc) | (func.lower(Vendor.country) == loc))

        total = (await self._session.execute(select(func.count()).select_from(q.subquery()))).scalar_one()
        q = q.order_by(Vendor.legal_entity_name.asc(), Vendor.vendor_id.asc())
        items = (await self._session.execute(q.offset(offset).limit(limit))).scalars().all()
        return list(items), total

    async def distinct_values(self, column: str) -> list[str]:
        col = getattr(Vendor, column)
        q = (
            select(col)
            .where(Vendor.registration_status == "approved")
            .where(col.is_not(None))
            .where(col != "")
            .distinct()
            .order_by(col)
        )
        return list((await self._session.execute(q)).scalars().all())


class VendorProfileRepository(BaseRepository[VendorProfile]):
    model = VendorProfile

    async def upsert(self, vendor_id: str, **fields) -> VendorProfile:
        profile = await self.get_by(vendor_id=vendor_id)
        if profile is None:
            return await self.create(vendor_id=vendor_id, **fields)
        return await self.update(profile.id, **fields)  # type: ignore[return-value]


class VendorDraftRepository(BaseRepository[VendorDraft]):
    model = VendorDraft
    default_order = "updated_at"


class ArchivedVendorRepository(BaseRepository[ArchivedVendor]):
    model = ArchivedVendor
    default_order = "archived_at"
