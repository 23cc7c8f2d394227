"""Tests for alerts derived from vendor data."""
from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace

from vendor_portal.services.notification import generate_vendor_alerts

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def _vendor(**overrides):
    data = dict(
        vendor_id="VENAAAA111",
        legal_entity_name="Acme",
        registration_status="approved",
        created_at=NOW - timedelta(days=30),
        contract_expiration_date=None,
        w9_status="received",
        tax_id="12-3456789",
        bank_account_details="Bank of Test",
    )
    data.update(overrides)
    return SimpleNamespace(**data)


class TestGenerateVendorAlerts:
    def test_healthy_vendor_has_no_alerts(self):
        assert generate_vendor_alerts([_vendor()], NOW) == []

    def test_recent_pending_registration(self):
        alerts = generate_vendor_alerts(
            [_vendor(registration_status="pending", created_at=NOW - timedelta(days=3))], NOW
        )
        assert [a["type"] for a in alerts] == ["vendor_registration"]
        assert alerts[0]["priority"] == "medium"

    def test_old_pending_registration_is_ignored(self):
        alerts = generate_vendor_alerts(
            [_vendor(registration_status="pending", created_at=NOW - timedelta(days=8))], NOW
        )
        assert alerts == []

    def test_recent_approval(self):
        alerts = generate_vendor_alerts([_vendor(created_at=NOW - timedelta(hours=5))], NOW)
        assert [a["type"] for a in alerts] == ["status_update"]

    def test_contract_expiry_window(self):
        today = NOW.date()
        soon = _vendor(vendor_id="VENSOON001", contract_expiration_date=today + timedelta(days=30))
        later = _vendor(vendor_id="VENLATE001", contract_expiration_date=today + timedelta(days=31))
        past = _vendor(vendor_id="VENPAST001", contract_expiration_date=today)
        alerts = generate_vendor_alerts([soon, later, past], NOW)
        assert [(a["type"], a["vendor_id"]) for a in alerts] == [("contract_expiry", "VENSOON001")]
        assert alerts[0]["priority"] == "high"
        assert "30 days" in alerts[0]["message"]

    def test_w9_and_missing_information(self):
        alerts = generate_vendor_alerts([_vendor(w9_status=None, bank_account_details="")], NOW)
        assert [(a["title"], a["priority"]) for a in alerts] == [
            ("Compliance Alert", "high"),
            ("Incomplete Vendor Information", "medium"),
        ]

    def test_sorted_by_priority_then_newest(self):
        older = _vendor(
            vendor_id="VENOLD0001", registration_status="pending", created_at=NOW - timedelta(days=5)
        )
        newer = _vendor(
            vendor_id="VENNEW0001", registration_status="pending", created_at=NOW - timedelta(days=1),
            w9_status="expired",
        )
        alerts = generate_vendor_alerts([older, newer], NOW)
        assert alerts[0]["priority"] == "high"
        registrations = [a["vendor_id"] for a in alerts if a["type"] == "vendor_registration"]
        assert registrations == ["VENNEW0001", "VENOLD0001"]

    def test_naive_timestamps_are_treated_as_utc(self):
        vendor = _vendor(
            registration_status="pending",
            created_at=(NOW - timedelta(days=2)).replace(tzinfo=None),
        )
        assert generate_vendor_alerts([vendor], NOW)[0]["type"] == "vendor_registration"
