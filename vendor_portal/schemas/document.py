"""Document Pydantic schemas."""

from datetime import date, datetime
from typing import Any

from pydantic import Field

from vendor_portal.schemas.common import CamelModel


class DocumentOut(CamelModel):
    id: str
    vendor_id: str
    document_name: str
    document_type: str
    file_path: str | None = None
    file_size: int | None = None
    mime_type: str | None = None
    status: str
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = Field(default=None, validation_alias="metadata_")
    expiry_date: date | None = None
    uploaded_by: str | None = None
    upload_date: datetime


class VerificationDocumentsOut(CamelModel):
    vendor_id: str
    w9_form: str | None = None
    articles_of_incorporation: str | None = None
    business_licenses: str | None = None
    ein_verification_letter: str | None = None
