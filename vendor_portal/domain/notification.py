"""SQLAlchemy ORM models for notifications and per-vendor notification preferences."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from vendor_portal.db.base import Base
from vendor_portal.domain.mixins import TimestampMixin, UUIDPrimaryKeyMixin

PRIORITY_RANK = {"high": 3, "medium": 2, "low": 1}


class Notification(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "notifications"

    # NULL vendor_id = addressed to the admin team
    vendor_id: Mapped[Optional[str]] = mapped_column(String(10), nullable=True, index=True)
    user_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    # vendor_registration | status_update | document_upload | compliance_alert | contract_expiry
    notification_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    priority: Mapped[str] = mapped_column(String(20), default="medium", nullable=False)

    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    read_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)


class NotificationPreference(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "notification_preferences"

    vendor_id: Mapped[str] = mapped_column(
        String(10), ForeignKey("vendors.vendor_id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    email_notifications: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    compliance_alerts: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    document_reminders: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    status_updates: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
