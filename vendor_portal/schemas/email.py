"""Confirmation email schemas."""

from datetime import datetime
from typing import Any

from pydantic import EmailStr, Field

from vendor_portal.schemas.common import CamelModel


class ConfirmationEmailRequest(CamelModel):
    email: EmailStr
    vendor_id: str = ""
    section: str = "vendor"
    action: str = Field(min_length=1)
    notes: str | None = None
    vendor_name: str | None = None
    shared_data: dict[str, Any] | None = None
    message: str | None = None


class EmailContent(CamelModel):
    to: str
    subject: str
    html: str


class ConfirmationEmailOut(CamelModel):
    success: bool = True
    message: str = "Confirmation email logged successfully"
    email_content: EmailContent
    timestamp: datetime
