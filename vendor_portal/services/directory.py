"""Public vendor directory: approved vendors only."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.exceptions import NotFoundError
from vendor_portal.domain.vendor import Vendor
from vendor_portal.repositories.vendor import DirectoryRepository


class DirectoryService:
    def __init__(self, session: AsyncSession):
        self._repo = DirectoryRepository(session)

    async def search(
        self,
        *,
        offset: int,
        limit: int,
        search: str | None = None,
        vendor_type: str | None = None,
        location: str | None = None,
    ) -> tuple[list[Vendor], int]:
        return await self._repo.search(
            search=search or None,
            vendor_type=vendor_type or None,
            location=location or None,
            offset=offset,
            limit=limit,
        )

    async def get_listing(self, vendor_id: str) -> Vendor:
        vendor = await self._repo.get_by_id(vendor_id)
        if not vendor:
            raise NotFoundError("Vendor", vendor_id)
        return vendor

    async def facets(self) -> dict[str, list[str]]:
        return {
            "states": await self._repo.distinct_values("state"),
            "vendor_types": await self._repo.distinct_values("vendor_type"),
        }
