"""Confirmation email endpoint. Emails are formatted and logged, not sent."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from vendor_portal.schemas.email import ConfirmationEmailOut, ConfirmationEmailRequest
from vendor_portal.services.email import EmailService

router = APIRouter(prefix="/emails", tags=["Email"])


@router.post("/confirmation", response_model=ConfirmationEmailOut)
async def send_confirmation_email(body: ConfirmationEmailRequest):
    content = EmailService().send_confirmation(
        body.email,
        body.vendor_id,
        body.section,
        body.action,
        notes=body.notes,
        vendor_name=body.vendor_name,
        shared_data=body.shared_data,
        message=body.message,
    )
    return ConfirmationEmailOut(email_content=content, timestamp=datetime.now(timezone.utc))
