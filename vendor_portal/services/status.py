"""Vendor completion percentage and display-status derivation.

Pure functions over an already-loaded vendor (ORM row, schema or mapping);
no database access.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

REQUIRED_FIELDS: tuple[str, ...] = (
    "legal_entity_name",
    "vendor_type",
    "contact_name",
    "email",
    "phone_number",
    "street_address",
    "city",
    "state",
    "postal_code",
    "country",
    "tax_id",
    "business_description",
)

LABEL_INCOMPLETE = "incomplete"
LABEL_IN_PROGRESS = "in_progress"
LABEL_NEARLY_COMPLETE = "nearly_complete"
LABEL_PENDING_APPROVAL = "pending_approval"
LABEL_APPROVED = "approved"


@dataclass(frozen=True)
class VendorCompletion:
    percentage: int
    label: str
    filled: int
    total: int = len(REQUIRED_FIELDS)
    missing_fields: list[str] = field(default_factory=list)


def _value(vendor: Any, name: str) -> Any:
    if isinstance(vendor, Mapping):
        return vendor.get(name)
    return getattr(vendor, name, None)


def _is_filled(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def label_for(percentage: float, stored_status: str | None) -> str:
    if percentage < 40:
        return LABEL_INCOMPLETE
    if percentage < 70:
        return LABEL_IN_PROGRESS
    if percentage < 90:
        return LABEL_NEARLY_COMPLETE
    return LABEL_APPROVED if stored_status == "approved" else LABEL_PENDING_APPROVAL


def calculate_vendor_status(vendor: Any) -> VendorCompletion:
    """Count the required fields that hold a non-blank value and map the
    fraction onto a display label.

    The thresholds are applied to the exact fraction; the reported
    percentage is rounded for display.
    """
    missing = [name for name in REQUIRED_FIELDS if not _is_filled(_value(vendor, name))]
    filled = len(REQUIRED_FIELDS) - len(missing)
    exact = filled / len(REQUIRED_FIELDS) * 100
    return VendorCompletion(
        percentage=round(exact),
        label=label_for(exact, _value(vendor, "registration_status")),
        filled=filled,
        missing_fields=missing,
    )
