"""Compliance tracking schemas."""

from datetime import date, datetime
from typing import Literal

from pydantic import Field, model_validator

from vendor_portal.schemas.common import CamelModel

ComplianceStatus = Literal["active", "pending", "expired", "revoked"]


class ComplianceCreate(CamelModel):
    compliance_type: str = Field(min_length=1, max_length=100)
    certification_name: str | None = None
    issuing_authority: str | None = None
    issue_date: date | None = None
    expiry_date: date | None = None
    next_review_date: date | None = None
    status: ComplianceStatus = "active"
    compliance_score: int | None = Field(default=None, ge=0, le=100)
    notes: str | None = None

    @model_validator(mode="after")
    def _expiry_after_issue(self):
        if self.issue_date and self.expiry_date and self.expiry_date < self.issue_date:
            raise ValueError("expiryDate must not precede issueDate")
        return self


class ComplianceUpdate(CamelModel):
    compliance_type: str | None = Field(default=None, min_length=1, max_length=100)
    certification_name: str | None = None
    issuing_authority: str | None = None
    issue_date: date | None = None
    expiry_date: date | None = None
    next_review_date: date | None = None
    status: ComplianceStatus | None = None
    compliance_score: int | None = Field(default=None, ge=0, le=100)
    notes: str | None = None


class ComplianceOut(CamelModel):
    id: str
    vendor_id: str
    compliance_type: str
    certification_name: str | None = None
    issuing_authority: str | None = None
    issue_date: date | None = None
    expiry_date: date | None = None
    next_review_date: date | None = None
    status: str
    compliance_score: int | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class ExpiringComplianceOut(ComplianceOut):
    days_until_expiry: int
