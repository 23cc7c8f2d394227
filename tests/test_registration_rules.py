"""Tests for registration wizard step rules and submission normalization."""
import pytest

from vendor_portal.core.exceptions import ValidationError
from vendor_portal.services.registration import (
    REGISTRATION_REQUIRED_FIELDS,
    normalize_registration,
    validate_step,
)

COMPLETE = {
    "legal_entity_name": "Acme LLC",
    "vendor_type": "Supplier",
    "contact_name": "Jordan Lee",
    "email": "jordan@example.com",
    "street_address": "1 Main St",
    "city": "Springfield",
    "state": "IL",
    "postal_code": "62701",
    "country": "US",
}


class TestValidateStep:
    def test_step_one(self):
        assert validate_step(1, {}) == ["legal_entity_name", "vendor_type"]
        assert validate_step(1, {"legal_entity_name": "Acme", "vendor_type": "Supplier"}) == []

    def test_step_two(self):
        assert validate_step(2, {"contact_name": "Jordan"}) == ["email"]

    def test_step_three_blank_values(self):
        data = {"street_address": " ", "city": "X", "state": "", "postal_code": "1", "country": "US"}
        assert validate_step(3, data) == ["street_address", "state"]

    @pytest.mark.parametrize("step", [4, 5, 9])
    def test_optional_and_unknown_steps(self, step):
        assert validate_step(step, {}) == []


class TestNormalizeRegistration:
    def test_nine_required_fields(self):
        assert len(REGISTRATION_REQUIRED_FIELDS) == 9

    def test_missing_fields_reported_together(self):
        with pytest.raises(ValidationError) as exc:
            normalize_registration({"legal_entity_name": "Acme"})
        assert exc.value.status_code == 422
        assert "vendor_type" in exc.value.fields
        assert "legal_entity_name" not in exc.value.fields

    def test_valid_submission(self):
        values = normalize_registration({**COMPLETE, "legal_entity_name": "  Acme LLC  "})
        assert values["legal_entity_name"] == "Acme LLC"
        assert values["registration_status"] == "pending"
        assert values["currency"] == "USD"

    def test_other_country_requires_custom_country(self):
        with pytest.raises(ValidationError) as exc:
            normalize_registration({**COMPLETE, "country": "Other"})
        assert exc.value.fields == ["custom_country"]

    def test_custom_country_replaces_other(self):
        values = normalize_registration({**COMPLETE, "country": "Other", "custom_country": "Lesotho"})
        assert values["country"] == "Lesotho"
        assert "custom_country" not in values

    @pytest.mark.parametrize("email", ["not-an-email", "a@", "@example.com"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError) as exc:
            normalize_registration({**COMPLETE, "email": email})
        assert exc.value.fields == ["email"]
