"""Tests for vendor completion percentage and status labels."""
from types import SimpleNamespace

import pytest

from vendor_portal.services.status import REQUIRED_FIELDS, calculate_vendor_status, label_for


def _vendor(filled: int, status: str = "pending") -> dict:
    data = {name: "x" for name in REQUIRED_FIELDS[:filled]}
    data["registration_status"] = status
    return data


class TestLabels:
    @pytest.mark.parametrize(
        "percentage, label",
        [
            (0, "incomplete"),
            (39.9, "incomplete"),
            (40, "in_progress"),
            (69, "in_progress"),
            (70, "nearly_complete"),
            (89.9, "nearly_complete"),
            (90, "pending_approval"),
            (100, "pending_approval"),
        ],
    )
    def test_thresholds(self, percentage, label):
        assert label_for(percentage, "pending") == label

    def test_approved_only_when_stored_status_is_approved(self):
        assert label_for(95, "approved") == "approved"
        assert label_for(95, "rejected") == "pending_approval"
        assert label_for(50, "approved") == "in_progress"


class TestCalculateVendorStatus:
    def test_empty_vendor(self):
        result = calculate_vendor_status({})
        assert result.percentage == 0
        assert result.label == "incomplete"
        assert result.filled == 0
        assert result.total == 12
        assert result.missing_fields == list(REQUIRED_FIELDS)

    def test_all_fields_filled(self):
        result = calculate_vendor_status(_vendor(12))
        assert result.percentage == 100
        assert result.label == "pending_approval"
        assert result.missing_fields == []

    def test_all_fields_filled_and_approved(self):
        assert calculate_vendor_status(_vendor(12, "approved")).label == "approved"

    def test_eleven_of_twelve_rounds_to_92(self):
        result = calculate_vendor_status(_vendor(11))
        assert result.percentage == 92
        assert result.label == "pending_approval"
        assert result.missing_fields == ["business_description"]

    def test_whitespace_counts_as_empty(self):
        data = _vendor(12)
        data["tax_id"] = "   "
        result = calculate_vendor_status(data)
        assert result.filled == 11
        assert "tax_id" in result.missing_fields

    def test_accepts_objects(self):
        vendor = SimpleNamespace(**_vendor(6))
        result = calculate_vendor_status(vendor)
        assert result.percentage == 50
        assert result.label == "in_progress"

    def test_is_deterministic(self):
        data = _vendor(7)
        assert calculate_vendor_status(data) == calculate_vendor_status(dict(data))
