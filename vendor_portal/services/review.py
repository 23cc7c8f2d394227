"""Approve / reject workflow for submitted vendors."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.exceptions import ConflictError, NotFoundError
from vendor_portal.domain.vendor import STATUS_APPROVED, STATUS_PENDING, STATUS_REJECTED, Vendor
from vendor_portal.repositories.vendor import VendorRepository
from vendor_portal.services.audit import AuditService
from vendor_portal.services.email import ACTION_APPROVAL, ACTION_REJECTION, EmailService
from vendor_portal.services.notification import TYPE_STATUS_UPDATE, NotificationService

logger = logging.getLogger(__name__)

# current status -> statuses it may move to
ALLOWED_TRANSITIONS: dict[str, tuple[str, ...]] = {
    STATUS_PENDING: (STATUS_APPROVED, STATUS_REJECTED),
    STATUS_REJECTED: (STATUS_PENDING,),
    STATUS_APPROVED: (),
}


def can_transition(current: str, target: str) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, ())


class ReviewService:
    def __init__(self, session: AsyncSession):
        self._repo = VendorRepository(session)
        self._audit = AuditService(session)
        self._notifications = NotificationService(session)
        self._email = EmailService()

    async def _transition(
        self,
        vendor_id: str,
        target: str,
        actor: Principal,
        notes: str | None = None,
    ) -> Vendor:
        vendor = await self._repo.get_by_id(vendor_id)
        if not vendor:
            raise NotFoundError("Vendor", vendor_id)

        current = vendor.registration_status
        if not can_transition(current, target):
            raise ConflictError(f"Cannot change vendor status from '{current}' to '{target}'")

        vendor = await self._repo.update(vendor_id, registration_status=target)  # type: ignore[assignment]
        await self._audit.record(
            "STATUS_UPDATE", "vendor", vendor_id,
            actor=actor,
            vendor_id=vendor_id,
            old_values={"registration_status": current},
            new_values={"registration_status": target, "notes": notes},
        )
        if await self._notifications.wants(vendor_id, "status_updates"):
            await self._notifications.notify(
                "Vendor Status Updated",
                f'Vendor "{vendor.legal_entity_name}" status has been changed to {target}',
                TYPE_STATUS_UPDATE,
                vendor_id=vendor_id,
                priority="high" if target == STATUS_REJECTED else "medium",
            )
        logger.info("Vendor %s: %s -> %s by %s", vendor_id, current, target, actor.subject)
        return vendor

    async def approve(self, vendor_id: str, actor: Principal, notes: str | None = None) -> Vendor:
        vendor = await self._transition(vendor_id, STATUS_APPROVED, actor, notes)
        if await self._notifications.wants(vendor_id, "email_notifications"):
            self._email.send_confirmation(
                vendor.email, vendor_id, "registration", ACTION_APPROVAL, notes=notes
            )
        return vendor

    async def reject(self, vendor_id: str, actor: Principal, notes: str | None = None) -> Vendor:
        vendor = await self._transition(vendor_id, STATUS_REJECTED, actor, notes)
        if await self._notifications.wants(vendor_id, "email_notifications"):
            self._email.send_confirmation(
                vendor.email, vendor_id, "registration", ACTION_REJECTION, notes=notes
            )
        return vendor

    async def resubmit(self, vendor_id: str, actor: Principal) -> Vendor:
        return await self._transition(vendor_id, STATUS_PENDING, actor)
