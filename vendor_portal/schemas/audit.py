"""Audit log schemas."""

from datetime import datetime
from typing import Any

from vendor_portal.schemas.common import CamelModel


class AuditLogOut(CamelModel):
    id: str
    action: str
    entity_type: str
    entity_id: str | None = None
    vendor_id: str | None = None
    user_id: str | None = None
    old_values: Any = None
    new_values: Any = None
    ip_address: str | None = None
    user_agent: str | None = None
    timestamp: datetime


class AuditStatsOut(CamelModel):
    total: int
    by_action: dict[str, int]
