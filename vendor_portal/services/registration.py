"""Vendor self-registration: wizard step checks, drafts and final submission."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import ANONYMOUS, Principal
from vendor_portal.core.exceptions import ConflictError, NotFoundError, ValidationError
from vendor_portal.core.security import generate_portal_id
from vendor_portal.domain.vendor import STATUS_DRAFT, STATUS_PENDING, Vendor, VendorDraft
from vendor_portal.repositories.vendor import VendorDraftRepository, VendorRepository
from vendor_portal.services.audit import AuditService
from vendor_portal.services.email import ACTION_REGISTRATION, EmailService
from vendor_portal.services.notification import TYPE_REGISTRATION, NotificationService

logger = logging.getLogger(__name__)

STEP_REQUIRED_FIELDS: dict[int, tuple[str, ...]] = {
    1: ("legal_entity_name", "vendor_type"),
    2: ("contact_name", "email"),
    3: ("street_address", "city", "state", "postal_code", "country"),
    4: (),
    5: (),
}

REGISTRATION_REQUIRED_FIELDS = tuple(
    name for step in sorted(STEP_REQUIRED_FIELDS) for name in STEP_REQUIRED_FIELDS[step]
)

VENDOR_ID_PREFIX = "VEN"
MAX_ID_ATTEMPTS = 10

_email_adapter = TypeAdapter(EmailStr)


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_step(step: int, data: dict[str, Any]) -> list[str]:
    """Return the required fields of ``step`` that are missing from ``data``.

    Steps without rules (including unknown step numbers) always pass.
    """
    return [name for name in STEP_REQUIRED_FIELDS.get(step, ()) if _blank(data.get(name))]


def normalize_registration(data: dict[str, Any]) -> dict[str, Any]:
    """Check a complete submission and return the column values for a new vendor."""
    missing = [name for name in REGISTRATION_REQUIRED_FIELDS if _blank(data.get(name))]
    if missing:
        raise ValidationError("Missing required fields: " + ", ".join(missing), fields=missing)

    values = {
        key: value.strip() if isinstance(value, str) else value
        for key, value in data.items()
        if key not in ("custom_country", "draft_id") and hasattr(Vendor, key)
    }

    if values["country"] == "Other":
        custom = data.get("custom_country")
        if _blank(custom):
            raise ValidationError(
                "Please specify the country", fields=["custom_country"]
            )
        values["country"] = custom.strip()

    try:
        values["email"] = str(_email_adapter.validate_python(values["email"]))
    except PydanticValidationError:
        raise ValidationError("Please enter a valid email address", fields=["email"]) from None

    values["currency"] = values.get("currency") or "USD"
    values["registration_status"] = STATUS_PENDING
    return values


class RegistrationService:
    def __init__(self, session: AsyncSession):
        self._vendors = VendorRepository(session)
        self._drafts = VendorDraftRepository(session)
        self._audit = AuditService(session)
        self._notifications = NotificationService(session)
        self._email = EmailService()

    # ------------------------------------------------------------------
    # Drafts
    # ------------------------------------------------------------------

    async def save_draft(self, data: dict[str, Any], draft_id: str | None = None) -> VendorDraft:
        fields = {k: v for k, v in data.items() if hasattr(VendorDraft, k) and k != "id"}
        fields["registration_status"] = STATUS_DRAFT
        if draft_id is None:
            return await self._drafts.create(**fields)
        await self.get_draft(draft_id)
        return await self._drafts.update(draft_id, **fields)  # type: ignore[return-value]

    async def get_draft(self, draft_id: str) -> VendorDraft:
        draft = await self._drafts.get_by_id(draft_id)
        if not draft:
            raise NotFoundError("Draft", draft_id)
        return draft

    async def delete_draft(self, draft_id: str) -> None:
        if not await self._drafts.delete(draft_id):
            raise NotFoundError("Draft", draft_id)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    async def _new_vendor_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = generate_portal_id(VENDOR_ID_PREFIX)
            if not await self._vendors.exists(candidate):
                return candidate
        raise ConflictError("Could not allocate a unique vendor id, please retry")

    async def register_vendor(
        self,
        data: dict[str, Any],
        draft_id: str | None = None,
        actor: Principal = ANONYMOUS,
    ) -> Vendor:
        values = normalize_registration(data)

        if await self._vendors.get_by_email(values["email"]):
            raise ConflictError("A vendor with this email address is already registered")
        if draft_id is not None:
            await self.get_draft(draft_id)

        vendor_id = await self._new_vendor_id()
        vendor = await self._vendors.create(vendor_id=vendor_id, **values)

        await self._audit.record(
            "REGISTER", "vendor", vendor_id,
            actor=actor,
            vendor_id=vendor_id,
            new_values={
                "legal_entity_name": vendor.legal_entity_name,
                "email": vendor.email,
                "registration_status": vendor.registration_status,
            },
        )
        await self._notifications.notify(
            "New Vendor Registration",
            f'A new vendor "{vendor.legal_entity_name}" has registered and requires review',
            TYPE_REGISTRATION,
        )
        if draft_id is not None:
            await self._drafts.delete(draft_id)

        logger.info("Registered vendor %s (%s)", vendor_id, vendor.email)
        self._email.send_confirmation(vendor.email, vendor_id, "registration", ACTION_REGISTRATION)
        return vendor
