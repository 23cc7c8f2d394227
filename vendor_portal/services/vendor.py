"""Vendor management service: listing, profile sections, sharing, export and removal.

Section updates route each field to the vendor row when the vendor has a
column of that name and to the one-per-vendor profile otherwise.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Any

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.context import Principal
from vendor_portal.core.exceptions import (
    BadRequestError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from vendor_portal.domain.vendor import Vendor, VendorProfile
from vendor_portal.repositories.account import UserRepository
from vendor_portal.repositories.compliance import ComplianceRepository
from vendor_portal.repositories.document import (
    DocumentRepository,
    VerificationDocumentRepository,
)
from vendor_portal.repositories.notification import (
    NotificationPreferenceRepository,
    NotificationRepository,
)
from vendor_portal.repositories.vendor import (
    ArchivedVendorRepository,
    VendorProfileRepository,
    VendorRepository,
)
from vendor_portal.schemas.vendor import (
    ComplianceSectionUpdate,
    FinancialSectionUpdate,
    GeneralSectionUpdate,
    ProcurementSectionUpdate,
    VendorCompletionOut,
    VendorDetailOut,
    VendorOut,
    VendorProfileOut,
)
from vendor_portal.services.audit import AuditService
from vendor_portal.services.email import ACTION_SHARE_SECTION, ACTION_UPDATE, EmailService
from vendor_portal.services.notification import NotificationService
from vendor_portal.services.status import calculate_vendor_status
from vendor_portal.services.storage import LocalFileStorage

logger = logging.getLogger(__name__)

SECTION_SCHEMAS: dict[str, type[BaseModel]] = {
    "general": GeneralSectionUpdate,
    "financial": FinancialSectionUpdate,
    "procurement": ProcurementSectionUpdate,
    "compliance": ComplianceSectionUpdate,
}

CSV_COLUMNS = (
    "Vendor ID",
    "Company Name",
    "Email",
    "Status",
    "Type",
    "Location",
    "Registration Date",
)


def _split_fields(changes: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    vendor_fields: dict[str, Any] = {}
    profile_fields: dict[str, Any] = {}
    for name, value in changes.items():
        if hasattr(Vendor, name):
            vendor_fields[name] = value
        elif hasattr(VendorProfile, name):
            profile_fields[name] = value
    return vendor_fields, profile_fields


def _jsonable(value: Any) -> Any:
    return value.isoformat() if hasattr(value, "isoformat") else value


def vendors_to_csv(vendors: list[Vendor]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_COLUMNS)
    for v in vendors:
        writer.writerow(
            [
                v.vendor_id,
                v.legal_entity_name,
                v.email,
                v.registration_status,
                v.vendor_type,
                f"{v.city}, {v.state}",
                v.created_at.date().isoformat() if v.created_at else "",
            ]
        )
    return buffer.getvalue()


class VendorService:
    def __init__(self, session: AsyncSession, storage: LocalFileStorage | None = None):
        self._session = session
        self._repo = VendorRepository(session)
        self._profiles = VendorProfileRepository(session)
        self._archive = ArchivedVendorRepository(session)
        self._documents = DocumentRepository(session)
        self._verification = VerificationDocumentRepository(session)
        self._notifications = NotificationRepository(session)
        self._preferences = NotificationPreferenceRepository(session)
        self._compliance = ComplianceRepository(session)
        self._users = UserRepository(session)
        self._audit = AuditService(session)
        self._notify = NotificationService(session)
        self._email = EmailService()
        self._storage = storage or LocalFileStorage()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list_vendors(
        self,
        *,
        offset: int = 0,
        limit: int | None = 20,
        search: str | None = None,
        status: str | None = None,
        vendor_type: str | None = None,
        order_by: str | None = None,
        order: str = "desc",
    ) -> tuple[list[Vendor], int]:
        return await self._repo.list(
            offset=offset,
            limit=limit,
            order_by=order_by or "created_at",
            order=order,
            filters={"registration_status": status, "vendor_type": vendor_type},
            search=search,
        )

    async def get_vendor(self, vendor_id: str) -> Vendor:
        vendor = await self._repo.get_by_id(vendor_id)
        if not vendor:
            raise NotFoundError("Vendor", vendor_id)
        return vendor

    async def get_detail(self, vendor_id: str) -> VendorDetailOut:
        vendor = await self.get_vendor(vendor_id)
        profile = await self._profiles.get_by(vendor_id=vendor_id)
        completion = calculate_vendor_status(vendor)
        return VendorDetailOut(
            **VendorOut.model_validate(vendor).model_dump(),
            profile=VendorProfileOut.model_validate(profile) if profile else None,
            completion=VendorCompletionOut(
                percentage=completion.percentage,
                label=completion.label,
                filled=completion.filled,
                total=completion.total,
                missing_fields=list(completion.missing_fields),
            ),
        )

    async def export_csv(self, *, search: str | None = None, status: str | None = None) -> str:
        vendors, _ = await self.list_vendors(limit=None, search=search, status=status)
        return vendors_to_csv(vendors)

    # ------------------------------------------------------------------
    # Section updates
    # ------------------------------------------------------------------

    async def update_section(
        self,
        vendor_id: str,
        section: str,
        data: BaseModel,
        actor: Principal,
    ) -> VendorDetailOut:
        if section not in SECTION_SCHEMAS:
            raise BadRequestError(f"Unknown section '{section}'")
        vendor = await self.get_vendor(vendor_id)
        changes = data.model_dump(exclude_unset=True)
        vendor_fields, profile_fields = _split_fields(changes)
        cleared = self._repo.nulled_required(vendor_fields)
        if cleared:
            raise ValidationError("Required fields cannot be cleared", fields=cleared)

        new_email = vendor_fields.get("email")
        if new_email and new_email.lower() != vendor.email.lower():
            other = await self._repo.get_by_email(new_email)
            if other and other.vendor_id != vendor_id:
                raise ConflictError("A vendor with this email address is already registered")

        old_values = {name: _jsonable(getattr(vendor, name)) for name in vendor_fields}
        profile = await self._profiles.get_by(vendor_id=vendor_id)
        if profile is not None:
            old_values.update(
                {name: _jsonable(getattr(profile, name)) for name in profile_fields}
            )

        if vendor_fields:
            vendor = await self._repo.update(vendor_id, **vendor_fields)  # type: ignore[assignment]
        if profile_fields:
            await self._profiles.upsert(vendor_id, **profile_fields)

        await self._audit.record(
            "UPDATE", "vendor", vendor_id,
            actor=actor,
            vendor_id=vendor_id,
            old_values={"section": section, **old_values},
            new_values={"section": section, **{k: _jsonable(v) for k, v in changes.items()}},
        )
        logger.info("Vendor %s %s section updated (%d fields)", vendor_id, section, len(changes))
        if await self._notify.wants(vendor_id, "email_notifications"):
            self._email.send_confirmation(vendor.email, vendor_id, section, ACTION_UPDATE)
        return await self.get_detail(vendor_id)

    # ------------------------------------------------------------------
    # Sharing
    # ------------------------------------------------------------------

    async def section_data(self, vendor_id: str, section: str) -> dict[str, Any]:
        if section not in SECTION_SCHEMAS:
            raise BadRequestError(f"Unknown section '{section}'")
        vendor = await self.get_vendor(vendor_id)
        profile = await self._profiles.get_by(vendor_id=vendor_id)
        data: dict[str, Any] = {}
        for name in SECTION_SCHEMAS[section].model_fields:
            source = vendor if hasattr(Vendor, name) else profile
            data[name] = _jsonable(getattr(source, name)) if source is not None else None
        return data

    async def share_section(
        self,
        vendor_id: str,
        section: str,
        recipient_email: str,
        message: str | None,
        actor: Principal,
    ):
        vendor = await self.get_vendor(vendor_id)
        shared = await self.section_data(vendor_id, section)
        content = self._email.send_confirmation(
            recipient_email, vendor_id, section, ACTION_SHARE_SECTION,
            vendor_name=vendor.legal_entity_name,
            shared_data=shared,
            message=message,
        )
        await self._audit.record(
            "section_shared", "vendor", vendor_id,
            actor=actor,
            vendor_id=vendor_id,
            new_values={"section": section, "recipient_email": recipient_email},
        )
        return content

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    async def delete_vendor(
        self,
        vendor_id: str,
        actor: Principal,
        reason: str = "admin_removal",
        notes: str | None = None,
    ):
        """Archive a vendor, then remove it and everything it owns except audit logs.

        The database work is committed as one transaction before any stored
        file is unlinked.
        """
        vendor = await self.get_vendor(vendor_id)
        snapshot = VendorOut.model_validate(vendor).model_dump(mode="json")
        archived = await self._archive.create(
            original_vendor_id=vendor_id,
            vendor_data=snapshot,
            status=vendor.registration_status,
            archive_reason=reason,
            archived_by=actor.subject,
            notes=notes,
        )

        documents = await self._documents.all(vendor_id=vendor_id)
        file_paths = [d.file_path for d in documents if d.file_path]

        removed = {
            "documents": await self._documents.delete_for_vendor(vendor_id),
            "profiles": await self._profiles.delete_for_vendor(vendor_id),
            "verification_documents": await self._verification.delete_for_vendor(vendor_id),
            "notifications": await self._notifications.delete_for_vendor(vendor_id),
            "notification_preferences": await self._preferences.delete_for_vendor(vendor_id),
            "compliance": await self._compliance.delete_for_vendor(vendor_id),
            "users": await self._users.delete_for_vendor(vendor_id),
        }
        await self._repo.delete(vendor_id)

        await self._audit.record(
            "DELETE", "vendor", vendor_id,
            actor=actor,
            vendor_id=vendor_id,
            old_values=snapshot,
            new_values={"archived_id": archived.id, "reason": reason, "removed": removed},
        )
        await self._session.commit()

        files_removed = self._storage.delete_many(file_paths)
        logger.info(
            "Vendor %s removed and archived as %s (%d files deleted)",
            vendor_id, archived.id, files_removed,
        )
        return archived

    async def list_archived(self, *, offset: int, limit: int):
        return await self._archive.list(offset=offset, limit=limit, order_by="archived_at")
