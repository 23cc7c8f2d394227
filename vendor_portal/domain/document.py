"""SQLAlchemy ORM models for uploaded documents and per-vendor verification files."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from sqlalchemy import JSON, Date, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vendor_portal.db.base import Base
from vendor_portal.domain.mixins import UUIDPrimaryKeyMixin, utcnow

# Document types that also fill a slot on the vendor's verification_documents row
VERIFICATION_DOCUMENT_TYPES = (
    "w9_form",
    "articles_of_incorporation",
    "business_licenses",
    "ein_verification_letter",
)


class Document(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "documents"

    vendor_id: Mapped[str] = mapped_column(
        String(10), ForeignKey("vendors.vendor_id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    document_name: Mapped[str] = mapped_column(String(255), nullable=False)
    document_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    # Storage reference (relative to settings.upload_dir)
    file_path: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    file_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    mime_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # "active" | "archived" | "expired"
    status: Mapped[str] = mapped_column(String(50), default="active", nullable=False)
    tags: Mapped[Optional[list[str]]] = mapped_column(JSON, nullable=True)
    metadata_: Mapped[Optional[dict[str, Any]]] = mapped_column("metadata", JSON, nullable=True)
    expiry_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    uploaded_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    upload_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False,
        index=True,
    )

    vendor: Mapped["Vendor"] = relationship(back_populates="documents")


class VerificationDocument(Base, UUIDPrimaryKeyMixin):
    """Stored paths of the four verification documents a vendor submits."""

    __tablename__ = "verification_documents"

    vendor_id: Mapped[str] = mapped_column(
        String(10), ForeignKey("vendors.vendor_id", ondelete="CASCADE"),
        nullable=False, unique=True, index=True,
    )
    w9_form: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    articles_of_incorporation: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    business_licenses: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    ein_verification_letter: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow,
        server_default=func.now(), nullable=False,
    )
