"""Audit log service — append-only record of who changed what."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.domain.audit import AuditLog
from vendor_portal.repositories.audit import AuditLogRepository

logger = logging.getLogger(__name__)


class AuditService:
    def __init__(self, session: AsyncSession):
        self._repo = AuditLogRepository(session)

    async def record(
        self,
        action: str,
        entity_type: str,
        entity_id: str | None,
        *,
        actor: Principal | None = None,
        vendor_id: str | None = None,
        old_values: dict[str, Any] | None = None,
        new_values: dict[str, Any] | None = None,
    ) -> AuditLog:
        entry = await self._repo.create(
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            vendor_id=vendor_id,
            old_values=old_values,
            new_values=new_values,
            user_id=actor.subject if actor and actor.role != "anonymous" else None,
            ip_address=actor.ip_address if actor else None,
            user_agent=actor.user_agent if actor else None,
        )
        logger.debug("audit %s %s/%s vendor=%s", action, entity_type, entity_id, vendor_id)
        return entry

    async def list_logs(
        self,
        *,
        offset: int = 0,
        limit: int = 50,
        vendor_id: str | None = None,
        entity_type: str | None = None,
        action: str | None = None,
    ) -> tuple[list[AuditLog], int]:
        return await self._repo.list(
            offset=offset,
            limit=limit,
            order_by="timestamp",
            order="desc",
            filters={"vendor_id": vendor_id, "entity_type": entity_type, "action": action},
        )

    async def stats(self) -> dict[str, Any]:
        by_action = await self._repo.count_by_action()
        return {"total": sum(by_action.values()), "by_action": by_action}
