"""Audit log repository. Rows are only ever inserted and read."""

from __future__ import annotations

from sqlalchemy import func, select

from vendor_portal.domain.audit import AuditLog
from vendor_portal.repositories.base import BaseRepository


class AuditLogRepository(BaseRepository[AuditLog]):
    model = AuditLog
    default_order = "timestamp"

    async def count_by_action(self) -> dict[str, int]:
        rows = (
            await self._session.execute(
                select(AuditLog.action, func.count()).group_by(AuditLog.action)
            )
        ).all()
        return {action: count for action, count in rows}
