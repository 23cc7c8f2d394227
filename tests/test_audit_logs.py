"""Tests for audit log endpoints."""
from payloads import API


class TestAuditLogs:
    def test_list_most_recent_first(self, client, admin_headers, vendor):
        vid = vendor["vendorId"]
        client.post(f"{API}/vendors/{vid}/approve", headers=admin_headers)

        response = client.get(f"{API}/audit-logs", headers=admin_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["meta"]["limit"] == 50
        assert [log["action"] for log in body["data"]] == ["STATUS_UPDATE", "REGISTER"]
        assert body["data"][0]["ipAddress"] == "testclient"

    def test_filters(self, client, admin_headers, make_vendor):
        first = make_vendor(email="a@example.com")
        make_vendor(email="b@example.com")
        client.post(f"{API}/vendors/{first['vendorId']}/approve", headers=admin_headers)

        by_vendor = client.get(f"{API}/audit-logs?vendorId={first['vendorId']}", headers=admin_headers).json()
        assert by_vendor["meta"]["total"] == 2

        by_action = client.get(f"{API}/audit-logs?action=REGISTER", headers=admin_headers).json()
        assert by_action["meta"]["total"] == 2

        by_entity = client.get(f"{API}/audit-logs?entityType=document", headers=admin_headers).json()
        assert by_entity["data"] == []

    def test_stats(self, client, admin_headers, vendor):
        client.post(f"{API}/vendors/{vendor['vendorId']}/reject", headers=admin_headers)
        stats = client.get(f"{API}/audit-logs/stats", headers=admin_headers).json()["data"]
        assert stats == {"total": 2, "byAction": {"REGISTER": 1, "STATUS_UPDATE": 1}}

    def test_admin_only(self, client, vendor_headers):
        assert client.get(f"{API}/audit-logs", headers=vendor_headers).status_code == 403
