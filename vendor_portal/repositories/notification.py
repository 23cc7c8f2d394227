"""Notification repositories."""

from __future__ import annotations

from sqlalchemy import func, select, update

from vendor_portal.domain.mixins import utcnow
from vendor_portal.domain.notification import Notification, NotificationPreference
from vendor_portal.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    model = Notification

    async def mark_all_read(self, vendor_id: str | None) -> int:
        stmt = (
            update(Notification)
            .where(Notification.is_read.is_(False))
            .values(is_read=True, read_at=utcnow(), updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        if vendor_id is not None:
            stmt = stmt.where(Notification.vendor_id == vendor_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount

    async def stats(self, vendor_id: str | None = None) -> dict[str, int]:
        q = select(
            func.count(),
            func.count().filter(Notification.is_read.is_(False)),
            func.count().filter(
                Notification.is_read.is_(False), Notification.priority == "high"
            ),
        ).select_from(Notification)
        if vendor_id is not None:
            q = q.where(Notification.vendor_id == vendor_id)
        total, unread, high = (await self._session.execute(q)).one()
        return {"total": total, "active": unread, "high_priority": high}


class NotificationPreferenceRepository(BaseRepository[NotificationPreference]):
    model = NotificationPreference
