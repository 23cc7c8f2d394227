"""Notification schemas."""

from datetime import datetime

from vendor_portal.schemas.common import CamelModel


class NotificationOut(CamelModel):
    id: str
    vendor_id: str | None = None
    title: str
    message: str
    notification_type: str
    priority: str
    is_read: bool
    read_at: datetime | None = None
    created_at: datetime


class NotificationStatsOut(CamelModel):
    total: int
    active: int
    high_priority: int


class MarkAllReadOut(CamelModel):
    updated: int


class VendorAlertOut(CamelModel):
    """A computed alert derived from current vendor data (not persisted)."""

    id: str
    title: str
    message: str
    type: str
    priority: str
    vendor_id: str
    vendor_name: str
    created_at: datetime
    is_read: bool = False


class NotificationPreferenceOut(CamelModel):
    vendor_id: str
    email_notifications: bool = True
    compliance_alerts: bool = True
    document_reminders: bool = True
    status_updates: bool = True


class NotificationPreferenceUpdate(CamelModel):
    email_notifications: bool | None = None
    compliance_alerts: bool | None = None
    document_reminders: bool | None = None
    status_updates: bool | None = None
