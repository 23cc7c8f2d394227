"""Per-request caller identity, passed from routers into services for auditing."""

from __future__ import annotations

from dataclasses import dataclass

from vendor_portal.core.security import ROLE_ADMIN, ROLE_VENDOR


@dataclass(frozen=True)
class Principal:
    subject: str  # admin_users.id or users.id
    role: str
    email: str | None = None
    vendor_id: str | None = None
    admin_id: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    @property
    def is_vendor(self) -> bool:
        return self.role == ROLE_VENDOR

    def can_access_vendor(self, vendor_id: str) -> bool:
        return self.is_admin or (self.is_vendor and self.vendor_id == vendor_id)


# Public / unauthenticated callers (registration, directory)
ANONYMOUS = Principal(subject="anonymous", role="anonymous")
