"""Vendor Pydantic schemas (request DTOs and response models)."""


from datetime import date, datetime
from typing import Literal

from pydantic import EmailStr, Field

from vendor_portal.schemas.common import CamelModel

SECTIONS = ("general", "financial", "procurement", "compliance")

# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

class RegistrationFields(CamelModel):
    """Every field the five-step wizard collects. All optional at this level;
    required-ness is enforced by the registration service so that missing
    fields are reported together."""

    # Step 1: Basic Information
    legal_entity_name: str | None = None
    trade_name: str | None = None
    vendor_type: str | None = None
    year_established: str | None = None
    business_description: str | None = None
    # Step 2: Contact Details
    contact_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    website: str | None = None
    # Step 3: Address Information
    street_address: str | None = None
    street_address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = "US"
    custom_country: str | None = None
    # Step 4: Business Details
    employee_count: str | None = None
    annual_revenue: str | None = None
    products_services_description: str | None = None
    # Step 5: Financial Information
    tax_id: str | None = None
    vat_id: str | None = None
    bank_account_details: str | None = None
    payment_terms: str | None = None
    currency: str | None = "USD"


class VendorRegister(RegistrationFields):
    draft_id: str | None = None


class StepValidationRequest(CamelModel):
    step: int = Field(ge=1)
    data: RegistrationFields


class StepValidationOut(CamelModel):
    step: int
    valid: bool
    missing_fields: list[str]


class DraftOut(RegistrationFields):
    id: str
    registration_status: str
    created_at: datetime
    updated_at: datetime

# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class VendorCompletionOut(CamelModel):
    percentage: int
    label: str
    filled: int
    total: int
    missing_fields: list[str]


class VendorProfileOut(CamelModel):
    company_description: str | None = None
    industry: str | None = None
    services_offered: str | None = None
    key_principal: str | None = None
    date_of_incorporation: str | None = None
    bank_name: str | None = None
    bank_address: str | None = None
    account_number: str | None = None
    account_type: str | None = None
    routing_number: str | None = None
    swift_code: str | None = None
    billing_address: str | None = None
    currency: str | None = None
    payment_terms: str | None = None
    fiscal_year_end: str | None = None
    revenue: str | None = None
    primary_contact: str | None = None
    secondary_contact: str | None = None
    relationship_owner: str | None = None
    reconciliation_account: str | None = None
    contract_details: str | None = None
    compliance_status: str | None = None
    compliance_officer: str | None = None
    certifications: str | None = None
    regulatory_bodies: str | None = None
    last_audit_date: str | None = None
    next_audit_date: str | None = None
    audit_result_summary: str | None = None
    corrective_actions: str | None = None


class VendorOut(CamelModel):
    vendor_id: str
    legal_entity_name: str
    trade_name: str | None = None
    vendor_type: str
    year_established: str | None = None
    business_description: str | None = None
    contact_name: str
    email: str
    phone_number: str | None = None
    contact_phone: str | None = None
    website: str | None = None
    street_address: str
    street_address_line2: str | None = None
    city: str
    state: str
    postal_code: str
    country: str
    employee_count: str | None = None
    annual_revenue: str | None = None
    products_services_description: str | None = None
    operating_status: str | None = None
    duns_number: str | None = None
    stock_symbol: str | None = None
    tax_id: str | None = None
    vat_id: str | None = None
    bank_account_details: str | None = None
    payment_terms: str | None = None
    currency: str | None = None
    contract_effective_date: date | None = None
    contract_expiration_date: date | None = None
    relationship_owner: str | None = None
    reconciliation_account: str | None = None
    w9_status: str | None = None
    w8_ben_status: str | None = None
    w8_ben_e_status: str | None = None
    registration_status: str
    created_at: datetime
    updated_at: datetime


class VendorDetailOut(VendorOut):
    profile: VendorProfileOut | None = None
    completion: VendorCompletionOut


class RegistrationOut(CamelModel):
    vendor: VendorOut
    email_sent_to: str

# ---------------------------------------------------------------------------
# Section updates
# ---------------------------------------------------------------------------

class GeneralSectionUpdate(CamelModel):
    legal_entity_name: str | None = Field(default=None, min_length=1)
    trade_name: str | None = None
    vendor_type: str | None = Field(default=None, min_length=1)
    year_established: str | None = None
    business_description: str | None = None
    contact_name: str | None = Field(default=None, min_length=1)
    email: EmailStr | None = None
    phone_number: str | None = None
    contact_phone: str | None = None
    website: str | None = None
    street_address: str | None = Field(default=None, min_length=1)
    street_address_line2: str | None = None
    city: str | None = Field(default=None, min_length=1)
    state: str | None = Field(default=None, min_length=1)
    postal_code: str | None = Field(default=None, min_length=1)
    country: str | None = Field(default=None, min_length=1)
    employee_count: str | None = None
    annual_revenue: str | None = None
    products_services_description: str | None = None
    operating_status: str | None = None
    duns_number: str | None = None
    stock_symbol: str | None = None
    # Profile overview fields
    company_description: str | None = None
    industry: str | None = None
    services_offered: str | None = None
    key_principal: str | None = None
    date_of_incorporation: str | None = None


class FinancialSectionUpdate(CamelModel):
    tax_id: str | None = None
    vat_id: str | None = None
    bank_account_details: str | None = None
    payment_terms: str | None = None
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    # Profile fields
    bank_name: str | None = None
    bank_address: str | None = None
    account_number: str | None = None
    account_type: str | None = None
    routing_number: str | None = None
    swift_code: str | None = None
    billing_address: str | None = None
    fiscal_year_end: str | None = None
    revenue: str | None = None


class ProcurementSectionUpdate(CamelModel):
    contract_effective_date: date | None = None
    contract_expiration_date: date | None = None
    relationship_owner: str | None = None
    reconciliation_account: str | None = None
    # Profile fields
    primary_contact: str | None = None
    secondary_contact: str | None = None
    contract_details: str | None = None


TaxFormStatus = Literal["pending", "received", "expired", "not_required"]


class ComplianceSectionUpdate(CamelModel):
    w9_status: TaxFormStatus | None = None
    w8_ben_status: TaxFormStatus | None = None
    w8_ben_e_status: TaxFormStatus | None = None
    # Profile fields
    compliance_status: str | None = None
    compliance_officer: str | None = None
    certifications: str | None = None
    regulatory_bodies: str | None = None
    last_audit_date: str | None = None
    next_audit_date: str | None = None
    audit_result_summary: str | None = None
    corrective_actions: str | None = None


class SectionUpdateOut(CamelModel):
    section: str
    vendor: VendorDetailOut

# ---------------------------------------------------------------------------
# Review workflow / sharing / removal
# ---------------------------------------------------------------------------

class ReviewRequest(CamelModel):
    notes: str | None = Field(default=None, max_length=2000)


class ShareSectionRequest(CamelModel):
    section: Literal["general", "financial", "procurement", "compliance"]
    recipient_email: EmailStr
    message: str | None = Field(default=None, max_length=2000)


class VendorDeleteRequest(CamelModel):
    reason: str = Field(default="admin_removal", min_length=1, max_length=255)
    notes: str | None = None


class ArchivedVendorOut(CamelModel):
    id: str
    original_vendor_id: str
    vendor_data: dict
    status: str
    archive_reason: str
    archived_by: str
    notes: str | None = None
    archived_at: datetime
