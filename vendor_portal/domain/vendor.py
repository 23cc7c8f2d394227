"""SQLAlchemy ORM models for Vendors, their extended profiles and registration drafts.

Pattern shared by every domain model:
  - Inherit Base + TimestampMixin
  - Generated string primary key
  - Foreign keys reference `vendors.vendor_id`
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import JSON, Date, DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vendor_portal.db.base import Base
from vendor_portal.domain.mixins import TimestampMixin, UUIDPrimaryKeyMixin, utcnow

# Registration lifecycle: draft (vendor_drafts only) -> pending -> approved | rejected
STATUS_DRAFT = "draft"
STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"
REGISTRATION_STATUSES = (STATUS_DRAFT, STATUS_PENDING, STATUS_APPROVED, STATUS_REJECTED)


class Vendor(Base, TimestampMixin):
    __tablename__ = "vendors"

    vendor_id: Mapped[str] = mapped_column(String(10), primary_key=True)

    # Basic information
    legal_entity_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    trade_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    vendor_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    year_established: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    business_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Contact
    contact_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    phone_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    contact_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Address
    street_address: Mapped[str] = mapped_column(String(255), nullable=False)
    street_address_line2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)

    # Business details
    employee_count: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    annual_revenue: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    products_services_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    operating_status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    duns_number: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    stock_symbol: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    # Financial
    tax_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    vat_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    bank_account_details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    payment_terms: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    currency: Mapped[Optional[str]] = mapped_column(String(3), default="USD", nullable=True)

    # Procurement
    contract_effective_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    contract_expiration_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    relationship_owner: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    reconciliation_account: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Tax form statuses: "pending" | "received" | "expired" | "not_required"
    w9_status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    w8_ben_status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    w8_ben_e_status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    registration_status: Mapped[str] = mapped_column(
        String(50), default=STATUS_PENDING, nullable=False, index=True
    )

    profile: Mapped[Optional["VendorProfile"]] = relationship(
        back_populates="vendor", lazy="selectin", uselist=False
    )
    documents: Mapped[List["Document"]] = relationship(
        back_populates="vendor", lazy="noload"
    )


class VendorProfile(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Extended financial / procurement / compliance profile (one per vendor)."""

    __tablename__ = "vendor_profiles"

    vendor_id: Mapped[str] = mapped_column(
        String(10), ForeignKey("vendors.vendor_id", ondelete="CASCADE"),
        nullable=False, unique=True, index=True,
    )

    # Overview
    company_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    industry: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    services_offered: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    key_principal: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    date_of_incorporation: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    # Financial
    bank_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    bank_address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    account_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    account_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    routing_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    swift_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    billing_address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    currency: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    payment_terms: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    fiscal_year_end: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    revenue: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # Procurement
    primary_contact: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    secondary_contact: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    relationship_owner: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    reconciliation_account: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    contract_details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Compliance
    compliance_status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    compliance_officer: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    certifications: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    regulatory_bodies: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_audit_date: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    next_audit_date: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    audit_result_summary: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    corrective_actions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    vendor: Mapped["Vendor"] = relationship(back_populates="profile")


class VendorDraft(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A partially completed registration wizard. Every field is optional."""

    __tablename__ = "vendor_drafts"

    legal_entity_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    trade_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    vendor_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    year_established: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    business_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    contact_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    phone_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    street_address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    street_address_line2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    custom_country: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    employee_count: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    annual_revenue: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    products_services_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tax_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    vat_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    bank_account_details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    payment_terms: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    currency: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)

    registration_status: Mapped[str] = mapped_column(
        String(50), default=STATUS_DRAFT, nullable=False
    )


class ArchivedVendor(Base, UUIDPrimaryKeyMixin):
    """JSON snapshot of a removed vendor. Never updated."""

    __tablename__ = "archived_vendors"

    original_vendor_id: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    vendor_data: Mapped[dict] = mapped_column(JSON, nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    archive_reason: Mapped[str] = mapped_column(String(255), nullable=False)
    archived_by: Mapped[str] = mapped_column(String(36), nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    archived_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
