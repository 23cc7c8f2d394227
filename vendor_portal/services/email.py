"""Confirmation email formatting.

Emails are built and logged, never transmitted: delivery belongs to whatever
mail relay the deployment wires in later. Every caller gets back the exact
``{to, subject, html}`` payload that would be sent.
"""


import logging
from datetime import datetime, timezone
from html import escape
from typing import Any

from vendor_portal.core.config import settings
from vendor_portal.schemas.email import EmailContent

logger = logging.getLogger(__name__)

ACTION_SIGNUP = "signup"
ACTION_SIGNIN = "signin"
ACTION_REGISTRATION = "registration"
ACTION_APPROVAL = "approval"
ACTION_REJECTION = "rejection"
ACTION_SHARE_SECTION = "share_section"
ACTION_UPDATE = "update"


def _signature() -> str:
    return f"<p>Best regards,<br>{escape(settings.mail_sender)}</p>"


def _support_line() -> str:
    return (
        "<p>If you have any questions, please contact our support team at "
        f"{escape(settings.support_email)}.</p>"
    )


def _render_shared_data(data: dict[str, Any] | None) -> str:
    if not data:
        return ""
    rows = "".join(
        f"<tr><td><strong>{escape(str(key).replace('_', ' ').title())}</strong></td>"
        f"<td>{escape('' if value is None else str(value))}</td></tr>"
        for key, value in data.items()
    )
    return f"<table>{rows}</table>"


def build_confirmation_email(
    email: str,
    vendor_id: str,
    section: str,
    action: str,
    *,
    notes: str | None = None,
    vendor_name: str | None = None,
    shared_data: dict[str, Any] | None = None,
    message: str | None = None,
    now: datetime | None = None,
) -> EmailContent:
    """Return the subject and HTML body for a portal confirmation email.

    Any action that is not one of the named ones is treated as a profile
    section update.
    """
    now = now or datetime.now(timezone.utc)
    vid = escape(vendor_id)

    if action == ACTION_SIGNUP:
        subject = "Welcome to Vendor Portal - Account Created"
        heading = "Welcome to Vendor Portal!"
        body = (
            "<p>Your account has been successfully created in our vendor management system.</p>"
            f"<p><strong>ID:</strong> {vid}</p>"
            f"<p><strong>Email:</strong> {escape(email)}</p>"
            "<p><strong>Account Status:</strong> Active</p>"
            f"{_support_line()}"
        )
    elif action == ACTION_SIGNIN:
        subject = "Vendor Portal - Successful Login"
        heading = "Successful Login Notification"
        body = (
            "<p>You have successfully logged into your vendor portal account.</p>"
            f"<p><strong>ID:</strong> {vid}</p>"
            f"<p><strong>Login Time:</strong> {now.strftime('%Y-%m-%d %H:%M:%S %Z')}</p>"
            "<p>If this wasn't you, please contact our support team immediately.</p>"
        )
    elif action == ACTION_REGISTRATION:
        subject = "Vendor Registration Received"
        heading = "Thank you for registering"
        body = (
            "<p>We have received your vendor registration and it is now awaiting review.</p>"
            f"<p><strong>Vendor ID:</strong> {vid}</p>"
            "<p><strong>Registration Status:</strong> Pending</p>"
            "<p>Keep your Vendor ID: you need it to create your portal account.</p>"
            f"{_support_line()}"
        )
    elif action in (ACTION_APPROVAL, ACTION_REJECTION):
        approved = action == ACTION_APPROVAL
        outcome = "Approved" if approved else "Rejected"
        subject = f"Vendor Registration {outcome}"
        heading = f"Your vendor registration has been {outcome.lower()}"
        body = (
            f"<p><strong>Vendor ID:</strong> {vid}</p>"
            f"<p><strong>Registration Status:</strong> {outcome}</p>"
        )
        if notes:
            body += f"<p><strong>Reviewer Notes:</strong> {escape(notes)}</p>"
        if approved:
            body += "<p>Your company is now listed in the public vendor directory.</p>"
        else:
            body += "<p>You may update your profile and resubmit it for review.</p>"
        body += _support_line()
    elif action == ACTION_SHARE_SECTION:
        label = section.replace("_", " ").title()
        name = escape(vendor_name or vendor_id)
        subject = f"Vendor Information Shared - {label}"
        heading = f"{escape(label)} information for {name}"
        body = (
            f"<p><strong>Vendor ID:</strong> {vid}</p>"
        )
        if message:
            body += f"<p>{escape(message)}</p>"
        body += _render_shared_data(shared_data)
    else:
        subject = f"Vendor Profile Update Confirmation - {section}"
        heading = "Vendor Profile Update Confirmation"
        body = (
            f"<p>Your <strong>{escape(section)}</strong> information has been successfully "
            "updated in our system.</p>"
            f"<p><strong>Vendor ID:</strong> {vid}</p>"
            f"<p><strong>Updated Section:</strong> {escape(section[:1].upper() + section[1:])}</p>"
            f"<p><strong>Timestamp:</strong> {now.isoformat()}</p>"
            f"{_support_line()}"
        )

    greeting = "Recipient" if action == ACTION_SHARE_SECTION else "Vendor"
    html = f"<h2>{heading}</h2><p>Dear {greeting},</p>{body}{_signature()}"
    return EmailContent(to=email, subject=subject, html=html)


class EmailService:
    """Formats confirmation emails and logs them in place of delivery."""

    def __init__(self) -> None:
        self.outbox: list[EmailContent] = []

    def send_confirmation(
        self,
        email: str,
        vendor_id: str,
        section: str,
        action: str,
        **kwargs: Any,
    ) -> EmailContent:
        content = build_confirmation_email(email, vendor_id, section, action, **kwargs)
        self.outbox.append(content)
        logger.info(
            "Email would be sent: to=%s subject=%r action=%s vendor=%s",
            content.to, content.subject, action, vendor_id or "-",
        )
        return content
