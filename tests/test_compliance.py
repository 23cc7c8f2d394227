"""Tests for compliance tracking endpoints."""
from datetime import date, timedelta

from payloads import API


def _create(client, vid, headers, **overrides):
    payload = {"complianceType": "ISO 9001", "certificationName": "Quality management", **overrides}
    return client.post(f"{API}/vendors/{vid}/compliance", json=payload, headers=headers)


class TestComplianceCrud:
    def test_create_update_delete(self, client, vendor, vendor_headers):
        vid = vendor["vendorId"]
        created = _create(client, vid, vendor_headers, complianceScore=88)
        assert created.status_code == 201
        record = created.json()["data"]
        assert record["status"] == "active"
        assert record["complianceScore"] == 88

        updated = client.put(
            f"{API}/vendors/{vid}/compliance/{record['id']}",
            json={"status": "expired"},
            headers=vendor_headers,
        )
        assert updated.json()["data"]["status"] == "expired"

        listed = client.get(f"{API}/vendors/{vid}/compliance?status=expired", headers=vendor_headers)
        assert listed.json()["meta"]["total"] == 1

        url = f"{API}/vendors/{vid}/compliance/{record['id']}"
        assert client.delete(url, headers=vendor_headers).status_code == 204
        assert client.get(url, headers=vendor_headers).status_code == 404

    def test_score_out_of_range(self, client, vendor, vendor_headers):
        assert _create(client, vendor["vendorId"], vendor_headers, complianceScore=101).status_code == 422

    def test_expiry_before_issue(self, client, vendor, vendor_headers):
        response = _create(
            client, vendor["vendorId"], vendor_headers, issueDate="2024-05-01", expiryDate="2024-01-01"
        )
        assert response.status_code == 422

    def test_update_cannot_move_expiry_before_issue(self, client, vendor, vendor_headers):
        vid = vendor["vendorId"]
        record = _create(client, vid, vendor_headers, issueDate="2024-05-01").json()["data"]
        response = client.put(
            f"{API}/vendors/{vid}/compliance/{record['id']}",
            json={"expiryDate": "2024-04-01"},
            headers=vendor_headers,
        )
        assert response.status_code == 422

    def test_required_columns_cannot_be_nulled(self, client, vendor, vendor_headers):
        vid = vendor["vendorId"]
        record = _create(client, vid, vendor_headers).json()["data"]
        url = f"{API}/vendors/{vid}/compliance/{record['id']}"

        response = client.put(url, json={"status": None, "complianceType": None}, headers=vendor_headers)
        assert response.status_code == 422
        assert set(response.json()["error"]["fields"]) == {"status", "compliance_type"}

        cleared = client.put(url, json={"notes": None}, headers=vendor_headers)
        assert cleared.status_code == 200
        assert cleared.json()["data"]["status"] == "active"

    def test_unknown_vendor(self, client, admin_headers):
        assert _create(client, "VENNONE000", admin_headers).status_code == 404


class TestExpiring:
    def test_expiring_within_window(self, client, vendor, admin_headers):
        vid = vendor["vendorId"]
        today = date.today()
        _create(client, vid, admin_headers, complianceType="Insurance", expiryDate=str(today + timedelta(days=20)))
        _create(client, vid, admin_headers, complianceType="License", expiryDate=str(today + timedelta(days=5)))
        _create(client, vid, admin_headers, complianceType="Far", expiryDate=str(today + timedelta(days=90)))
        _create(client, vid, admin_headers, complianceType="Past", expiryDate=str(today - timedelta(days=1)))

        rows = client.get(f"{API}/compliance/expiring", headers=admin_headers).json()["data"]
        assert [(r["complianceType"], r["daysUntilExpiry"]) for r in rows] == [
            ("License", 5),
            ("Insurance", 20),
        ]

        wider = client.get(f"{API}/compliance/expiring?days=120", headers=admin_headers).json()["data"]
        assert len(wider) == 3
