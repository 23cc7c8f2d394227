"""Document upload, metadata and download service."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.core.config import settings
from vendor_portal.core.context import Principal
from vendor_portal.core.exceptions import (
    BadRequestError,
    NotFoundError,
    PayloadTooLargeError,
    UnsupportedMediaTypeError,
)
from vendor_portal.domain.document import VERIFICATION_DOCUMENT_TYPES, Document, VerificationDocument
from vendor_portal.repositories.document import DocumentRepository, VerificationDocumentRepository
from vendor_portal.repositories.vendor import VendorRepository
from vendor_portal.services.audit import AuditService
from vendor_portal.services.notification import TYPE_DOCUMENT_UPLOAD, NotificationService
from vendor_portal.services.storage import LocalFileStorage

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = {
    "application/pdf": ".pdf",
    "application/msword": ".doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "text/plain": ".txt",
}


def check_upload(content: bytes, mime_type: str | None) -> str:
    """Validate size and type of an upload; return the normalized MIME type."""
    if not content:
        raise BadRequestError("Uploaded file is empty")
    if len(content) > settings.max_upload_size_bytes:
        raise PayloadTooLargeError(
            f"File exceeds the {settings.max_upload_size_mb} MB upload limit"
        )
    mime = (mime_type or "").split(";")[0].strip().lower()
    if mime not in ALLOWED_MIME_TYPES:
        raise UnsupportedMediaTypeError(
            f"File type '{mime or 'unknown'}' is not allowed. "
            "Upload a PDF, Word document, JPEG, PNG or plain text file."
        )
    return mime


class DocumentService:
    def __init__(self, session: AsyncSession, storage: LocalFileStorage | None = None):
        self._repo = DocumentRepository(session)
        self._verification = VerificationDocumentRepository(session)
        self._vendors = VendorRepository(session)
        self._audit = AuditService(session)
        self._notifications = NotificationService(session)
        self._storage = storage or LocalFileStorage()

    async def upload(
        self,
        vendor_id: str,
        *,
        filename: str,
        content: bytes,
        mime_type: str | None,
        document_type: str,
        document_name: str | None = None,
        expiry_date: date | None = None,
        actor: Principal,
    ) -> Document:
        vendor = await self._vendors.get_by_id(vendor_id)
        if not vendor:
            raise NotFoundError("Vendor", vendor_id)
        mime = check_upload(content, mime_type)

        stored_name = filename if Path(filename).suffix else filename + ALLOWED_MIME_TYPES[mime]
        relative_path = self._storage.save(vendor_id, stored_name, content)
        try:
            document = await self._repo.create(
                vendor_id=vendor_id,
                document_name=document_name or filename,
                document_type=document_type,
                file_path=relative_path,
                file_size=len(content),
                mime_type=mime,
                status="active",
                tags=[document_type],
                metadata_={
                    "original_name": filename,
                    "mime_type": mime,
                    "upload_source": "vendor_portal" if actor.is_vendor else "admin_portal",
                },
                expiry_date=expiry_date,
                uploaded_by=actor.subject,
            )
            if document_type in VERIFICATION_DOCUMENT_TYPES:
                await self._verification.set_path(vendor_id, document_type, relative_path)
        except Exception:
            self._storage.delete(relative_path)
            raise

        await self._audit.record(
            "UPLOAD", "document", document.id,
            actor=actor,
            vendor_id=vendor_id,
            new_values={
                "document_name": document.document_name,
                "document_type": document_type,
                "file_size": document.file_size,
            },
        )
        if await self._notifications.wants(vendor_id, "document_reminders"):
            await self._notifications.notify(
                "Document Uploaded",
                f'"{document.document_name}" was uploaded for vendor "{vendor.legal_entity_name}"',
                TYPE_DOCUMENT_UPLOAD,
                vendor_id=vendor_id,
                priority="low",
            )
        logger.info("Stored %s for vendor %s (%d bytes)", document_type, vendor_id, len(content))
        return document

    async def list_documents(
        self,
        vendor_id: str,
        *,
        offset: int,
        limit: int,
        document_type: str | None = None,
    ) -> tuple[list[Document], int]:
        if not await self._vendors.exists(vendor_id):
            raise NotFoundError("Vendor", vendor_id)
        return await self._repo.list(
            offset=offset,
            limit=limit,
            order_by="upload_date",
            order="desc",
            filters={"vendor_id": vendor_id, "document_type": document_type},
        )

    async def get_document(self, vendor_id: str, document_id: str) -> Document:
        document = await self._repo.get_by_id(document_id)
        if not document or document.vendor_id != vendor_id:
            raise NotFoundError("Document", document_id)
        return document

    async def read_file(self, vendor_id: str, document_id: str) -> tuple[Document, bytes]:
        document = await self.get_document(vendor_id, document_id)
        if not document.file_path:
            raise NotFoundError("File for document", document_id)
        return document, self._storage.read(document.file_path)

    async def delete_document(self, vendor_id: str, document_id: str, actor: Principal) -> None:
        document = await self.get_document(vendor_id, document_id)
        await self._repo.delete(document_id)
        await self._audit.record(
            "DELETE", "document", document_id,
            actor=actor,
            vendor_id=vendor_id,
            old_values={
                "document_name": document.document_name,
                "document_type": document.document_type,
                "file_path": document.file_path,
            },
        )
        if document.file_path:
            self._storage.delete(document.file_path)

    async def verification_documents(self, vendor_id: str) -> VerificationDocument | dict:
        if not await self._vendors.exists(vendor_id):
            raise NotFoundError("Vendor", vendor_id)
        row = await self._verification.get_by(vendor_id=vendor_id)
        return row if row is not None else {"vendor_id": vendor_id}
