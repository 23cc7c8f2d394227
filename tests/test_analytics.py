"""Tests for dashboard statistics, analytics and reports."""
from datetime import date, datetime

from vendor_portal.services.analytics import daily_counts, status_breakdown

from payloads import API


class TestHelpers:
    def test_status_breakdown_percentages(self):
        buckets = status_breakdown({"approved": 2, "pending": 1, None: 1})
        assert buckets == [
            {"status": "approved", "count": 2, "percentage": 50},
            {"status": "pending", "count": 1, "percentage": 25},
            {"status": "unknown", "count": 1, "percentage": 25},
        ]

    def test_status_breakdown_empty(self):
        assert status_breakdown({}) == []

    def test_daily_counts_zero_filled(self):
        created = [datetime(2024, 1, 10, 9), datetime(2024, 1, 10, 17), datetime(2024, 1, 8, 1)]
        counts = daily_counts(created, 3, date(2024, 1, 10))
        assert counts == [
            {"date": date(2024, 1, 8), "count": 1},
            {"date": date(2024, 1, 9), "count": 0},
            {"date": date(2024, 1, 10), "count": 2},
        ]


class TestDashboard:
    def test_dashboard_stats(self, client, admin_headers, make_vendor):
        a = make_vendor(email="a@example.com")
        b = make_vendor(email="b@example.com")
        make_vendor(email="c@example.com")
        client.post(f"{API}/vendors/{a['vendorId']}/approve", headers=admin_headers)
        client.post(f"{API}/vendors/{b['vendorId']}/reject", headers=admin_headers)

        stats = client.get(f"{API}/analytics/dashboard", headers=admin_headers).json()["data"]
        assert stats == {
            "totalVendors": 3,
            "pendingApprovals": 1,
            "activeVendors": 1,
            "rejectedVendors": 1,
            "totalDocuments": 0,
            "refreshIntervalSeconds": 30,
        }

    def test_analytics_breakdowns(self, client, admin_headers, make_vendor):
        make_vendor(email="a@example.com", vendorType="Supplier")
        make_vendor(email="b@example.com", vendorType="Contractor")
        make_vendor(email="c@example.com", vendorType="Supplier")

        data = client.get(f"{API}/analytics?days=7", headers=admin_headers).json()["data"]
        assert data["totalVendors"] == 3
        assert data["vendorsByStatus"] == [{"status": "pending", "count": 3, "percentage": 100}]
        assert data["vendorsByType"][0] == {"type": "Supplier", "count": 2}
        assert len(data["recentRegistrations"]) == 7
        assert sum(d["count"] for d in data["recentRegistrations"]) == 3

    def test_admin_only(self, client, vendor_headers):
        assert client.get(f"{API}/analytics/dashboard", headers=vendor_headers).status_code == 403


class TestReports:
    def test_generate_and_list(self, client, admin_headers, vendor):
        created = client.post(f"{API}/analytics/reports", json={"reportType": "summary"}, headers=admin_headers)
        assert created.status_code == 201
        report = created.json()["data"]
        assert report["reportType"] == "summary"
        assert report["reportData"]["total_vendors"] == 1
        assert report["complianceRate"] is None

        client.post(
            f"{API}/vendors/{vendor['vendorId']}/compliance",
            json={"complianceType": "ISO 9001"},
            headers=admin_headers,
        )
        compliance = client.post(
            f"{API}/analytics/reports", json={"reportType": "compliance", "days": 60}, headers=admin_headers
        ).json()["data"]
        assert compliance["complianceRate"] == 100.0
        assert compliance["reportData"]["records"] == 1

        listed = client.get(f"{API}/analytics/reports", headers=admin_headers).json()
        assert listed["meta"]["total"] == 2
        filtered = client.get(f"{API}/analytics/reports?reportType=compliance", headers=admin_headers).json()
        assert filtered["meta"]["total"] == 1

    def test_csv_export(self, client, admin_headers, vendor):
        response = client.get(f"{API}/analytics/export", headers=admin_headers)
        assert response.status_code == 200
        lines = response.text.strip().splitlines()
        assert lines[0] == "Metric,Value"
        assert "Total Vendors,1" in lines
        assert "Status: pending,1" in lines
