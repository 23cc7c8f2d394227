"""SQLAlchemy ORM models for compliance tracking and stored analytics reports."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from sqlalchemy import JSON, Date, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from vendor_portal.db.base import Base
from vendor_portal.domain.mixins import TimestampMixin, UUIDPrimaryKeyMixin, utcnow

COMPLIANCE_STATUSES = ("active", "pending", "expired", "revoked")


class ComplianceTracking(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """One certification / compliance obligation held by a vendor."""

    __tablename__ = "compliance_tracking"

    vendor_id: Mapped[str] = mapped_column(
        String(10), ForeignKey("vendors.vendor_id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    compliance_type: Mapped[str] = mapped_column(String(100), nullable=False)
    certification_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    issuing_authority: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    issue_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    expiry_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True, index=True)
    next_review_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(50), default="active", nullable=False)
    compliance_score: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class AnalyticsReport(Base, UUIDPrimaryKeyMixin):
    """A generated analytics snapshot. Never updated after creation."""

    __tablename__ = "analytics_reports"

    report_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    vendor_id: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    period_start: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    period_end: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    compliance_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    report_data: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    generated_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    generated_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
