"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  vendor.py        — Vendor, VendorProfile, VendorDraft, ArchivedVendor
  document.py      — Document metadata and per-vendor verification documents
  account.py       — Vendor portal users and admin users
  notification.py  — Notifications and notification preferences
  compliance.py    — Compliance tracking rows and stored analytics reports
  audit.py         — Append-only audit log (never updated or deleted)
  mixins.py        — Shared UUIDPrimaryKeyMixin, TimestampMixin
"""

from vendor_portal.domain.account import AdminUser, User
from vendor_portal.domain.audit import AuditLog
from vendor_portal.domain.compliance import AnalyticsReport, ComplianceTracking
from vendor_portal.domain.document import Document, VerificationDocument
from vendor_portal.domain.notification import Notification, NotificationPreference
from vendor_portal.domain.vendor import ArchivedVendor, Vendor, VendorDraft, VendorProfile

__all__ = [
    "AdminUser",
    "AnalyticsReport",
    "ArchivedVendor",
    "AuditLog",
    "ComplianceTracking",
    "Document",
    "Notification",
    "NotificationPreference",
    "User",
    "Vendor",
    "VendorDraft",
    "VendorProfile",
    "VerificationDocument",
]
