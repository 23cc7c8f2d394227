"""Tests for vendor management and self-service profile endpoints."""
from vendor_portal.domain.account import User
from vendor_portal.domain.audit import AuditLog
from vendor_portal.domain.document import Document
from vendor_portal.domain.vendor import ArchivedVendor, Vendor, VendorProfile

from payloads import API


class TestListVendors:
    def test_list_newest_first(self, client, admin_headers, make_vendor):
        first = make_vendor(email="one@example.com", legalEntityName="First Co")
        second = make_vendor(email="two@example.com", legalEntityName="Second Co")
        response = client.get(f"{API}/vendors", headers=admin_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["meta"] == {"total": 2, "page": 1, "limit": 20, "pages": 1}
        assert [v["vendorId"] for v in body["data"]] == [second["vendorId"], first["vendorId"]]

    def test_search_and_status_filter(self, client, admin_headers, make_vendor):
        make_vendor(email="one@example.com", legalEntityName="Northwind Traders")
        other = make_vendor(email="two@example.com", legalEntityName="Contoso", city="Chicago")
        client.post(f"{API}/vendors/{other['vendorId']}/approve", headers=admin_headers)

        by_name = client.get(f"{API}/vendors?search=northWIND", headers=admin_headers).json()
        assert [v["legalEntityName"] for v in by_name["data"]] == ["Northwind Traders"]

        by_city = client.get(f"{API}/vendors?search=chicago", headers=admin_headers).json()
        assert by_city["meta"]["total"] == 1

        approved = client.get(f"{API}/vendors?status=approved", headers=admin_headers).json()
        assert [v["vendorId"] for v in approved["data"]] == [other["vendorId"]]

    def test_unknown_sort_key_falls_back_to_default(self, client, admin_headers, make_vendor):
        first = make_vendor(email="one@example.com")
        second = make_vendor(email="two@example.com")
        for key in ("metadata", "profile", "nonexistent"):
            response = client.get(f"{API}/vendors?sort={key}", headers=admin_headers)
            assert response.status_code == 200
            assert [v["vendorId"] for v in response.json()["data"]] == [
                second["vendorId"], first["vendorId"],
            ]

    def test_sort_by_column(self, client, admin_headers, make_vendor):
        make_vendor(email="one@example.com", legalEntityName="Beta Works")
        make_vendor(email="two@example.com", legalEntityName="Alpha Works")
        response = client.get(f"{API}/vendors?sort=legal_entity_name&order=asc", headers=admin_headers)
        assert [v["legalEntityName"] for v in response.json()["data"]] == ["Alpha Works", "Beta Works"]

    def test_search_wildcards_match_literally(self, client, admin_headers, make_vendor):
        make_vendor(email="one@example.com", legalEntityName="Pure 100% Cotton")
        make_vendor(email="two@example.com", legalEntityName="Pure 1000 Threads")

        percent = client.get(f"{API}/vendors?search=100%25", headers=admin_headers).json()
        assert [v["legalEntityName"] for v in percent["data"]] == ["Pure 100% Cotton"]

        underscore = client.get(f"{API}/vendors?search=pure_1", headers=admin_headers).json()
        assert underscore["meta"]["total"] == 0

    def test_vendor_token_cannot_list(self, client, vendor_headers):
        assert client.get(f"{API}/vendors", headers=vendor_headers).status_code == 403

    def test_invalid_token(self, client):
        response = client.get(f"{API}/vendors", headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 401


class TestVendorDetail:
    def test_detail_includes_completion(self, client, admin_headers, vendor):
        response = client.get(f"{API}/vendors/{vendor['vendorId']}", headers=admin_headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["profile"] is None
        assert data["completion"]["percentage"] == 100
        assert data["completion"]["label"] == "pending_approval"

    def test_vendor_sees_own_profile_only(self, client, vendor, vendor_headers, make_vendor):
        other = make_vendor(email="other@example.com")
        assert client.get(f"{API}/vendors/{vendor['vendorId']}", headers=vendor_headers).status_code == 200
        assert client.get(f"{API}/vendors/{other['vendorId']}", headers=vendor_headers).status_code == 403

    def test_unknown_vendor(self, client, admin_headers):
        assert client.get(f"{API}/vendors/VENNONE000", headers=admin_headers).status_code == 404


class TestSectionUpdates:
    def test_financial_section_splits_vendor_and_profile(self, client, vendor, vendor_headers, db_session):
        vid = vendor["vendorId"]
        response = client.put(
            f"{API}/vendors/{vid}/financial",
            json={"vatId": "GB123", "currency": "EUR", "bankName": "First Bank", "swiftCode": "FBKUS33"},
            headers=vendor_headers,
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["section"] == "financial"
        assert data["vendor"]["vatId"] == "GB123"
        assert data["vendor"]["currency"] == "EUR"
        assert data["vendor"]["profile"]["bankName"] == "First Bank"

        profile = db_session.query(VendorProfile).filter_by(vendor_id=vid).one()
        assert profile.swift_code == "FBKUS33"
        audit = db_session.query(AuditLog).filter_by(action="UPDATE").one()
        assert audit.new_values["section"] == "financial"
        assert audit.old_values["currency"] == "USD"

    def test_second_update_reuses_profile(self, client, vendor, admin_headers, db_session):
        vid = vendor["vendorId"]
        client.put(f"{API}/vendors/{vid}/compliance", json={"complianceOfficer": "Sam"}, headers=admin_headers)
        response = client.put(
            f"{API}/vendors/{vid}/compliance",
            json={"w9Status": "received", "certifications": "ISO 9001"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        profile = response.json()["data"]["vendor"]["profile"]
        assert profile["complianceOfficer"] == "Sam"
        assert profile["certifications"] == "ISO 9001"
        assert db_session.query(VendorProfile).count() == 1

    def test_procurement_dates(self, client, vendor, admin_headers):
        response = client.put(
            f"{API}/vendors/{vendor['vendorId']}/procurement",
            json={"contractEffectiveDate": "2024-01-01", "contractExpirationDate": "2025-01-01"},
            headers=admin_headers,
        )
        assert response.json()["data"]["vendor"]["contractExpirationDate"] == "2025-01-01"

    def test_invalid_tax_form_status(self, client, vendor, admin_headers):
        response = client.put(
            f"{API}/vendors/{vendor['vendorId']}/compliance",
            json={"w9Status": "lost"},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_general_email_conflict(self, client, vendor, admin_headers, make_vendor):
        make_vendor(email="taken@example.com")
        response = client.put(
            f"{API}/vendors/{vendor['vendorId']}/general",
            json={"email": "TAKEN@example.com"},
            headers=admin_headers,
        )
        assert response.status_code == 409

    def test_required_field_cannot_be_cleared(self, client, vendor, admin_headers, db_session):
        vid = vendor["vendorId"]
        response = client.put(
            f"{API}/vendors/{vid}/general",
            json={"legalEntityName": None, "city": None, "tradeName": "Acme"},
            headers=admin_headers,
        )
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert set(error["fields"]) == {"legal_entity_name", "city"}

        stored = db_session.query(Vendor).filter_by(vendor_id=vid).one()
        assert stored.legal_entity_name == vendor["legalEntityName"]
        assert db_session.query(AuditLog).filter_by(action="UPDATE").count() == 0

    def test_update_email_respects_preference(self, client, vendor, vendor_headers, caplog):
        vid = vendor["vendorId"]
        url = f"{API}/vendors/{vid}/general"
        with caplog.at_level("INFO", logger="vendor_portal.services.email"):
            caplog.clear()
            client.put(url, json={"tradeName": "Acme"}, headers=vendor_headers)
            assert "Email would be sent" in caplog.text

            client.put(
                f"{API}/vendors/{vid}/notification-preferences",
                json={"emailNotifications": False},
                headers=vendor_headers,
            )
            caplog.clear()
            response = client.put(url, json={"tradeName": "Acme Two"}, headers=vendor_headers)
        assert response.status_code == 200
        assert "Email would be sent" not in caplog.text

    def test_general_update_changes_completion(self, client, vendor, admin_headers):
        response = client.put(
            f"{API}/vendors/{vendor['vendorId']}/general",
            json={"businessDescription": None, "industry": "Manufacturing"},
            headers=admin_headers,
        )
        data = response.json()["data"]["vendor"]
        assert data["completion"]["missingFields"] == ["business_description"]
        assert data["profile"]["industry"] == "Manufacturing"


class TestShareSection:
    def test_share_logs_email_and_audits(self, client, vendor, vendor_headers, db_session):
        response = client.post(
            f"{API}/vendors/{vendor['vendorId']}/share",
            json={"section": "financial", "recipientEmail": "buyer@example.com", "message": "For review"},
            headers=vendor_headers,
        )
        assert response.status_code == 200
        email = response.json()["data"]
        assert email["to"] == "buyer@example.com"
        assert "12-3456789" in email["html"]
        assert db_session.query(AuditLog).filter_by(action="section_shared").count() == 1

    def test_unknown_section(self, client, vendor, vendor_headers):
        response = client.post(
            f"{API}/vendors/{vendor['vendorId']}/share",
            json={"section": "secrets", "recipientEmail": "buyer@example.com"},
            headers=vendor_headers,
        )
        assert response.status_code == 422


class TestExport:
    def test_csv_export(self, client, admin_headers, vendor):
        response = client.get(f"{API}/vendors/export", headers=admin_headers)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "attachment" in response.headers["content-disposition"]
        lines = response.text.strip().splitlines()
        assert lines[0] == "Vendor ID,Company Name,Email,Status,Type,Location,Registration Date"
        assert lines[1].startswith(f"{vendor['vendorId']},Acme Industrial Supply LLC,")
        assert '"Springfield, IL"' in lines[1]


class TestDeleteVendor:
    def test_delete_archives_and_removes_everything(
        self, client, admin_headers, vendor, vendor_headers, db_session
    ):
        vid = vendor["vendorId"]
        client.put(f"{API}/vendors/{vid}/general", json={"industry": "Tools"}, headers=vendor_headers)
        client.post(
            f"{API}/vendors/{vid}/documents",
            files={"file": ("w9.pdf", b"%PDF-1.4 test", "application/pdf")},
            data={"documentType": "w9_form"},
            headers=vendor_headers,
        )

        response = client.delete(
            f"{API}/vendors/{vid}?reason=duplicate&notes=merged", headers=admin_headers
        )
        assert response.status_code == 200
        archived = response.json()["data"]
        assert archived["originalVendorId"] == vid
        assert archived["archiveReason"] == "duplicate"
        assert archived["vendorData"]["email"] == vendor["email"]

        assert db_session.query(Vendor).filter_by(vendor_id=vid).count() == 0
        assert db_session.query(VendorProfile).count() == 0
        assert db_session.query(Document).count() == 0
        assert db_session.query(User).count() == 0
        assert db_session.query(ArchivedVendor).count() == 1
        # audit history is kept
        assert db_session.query(AuditLog).filter_by(vendor_id=vid, action="REGISTER").count() == 1

        listed = client.get(f"{API}/vendors/archived", headers=admin_headers).json()
        assert listed["meta"]["total"] == 1

    def test_delete_requires_admin(self, client, vendor, vendor_headers):
        assert client.delete(f"{API}/vendors/{vendor['vendorId']}", headers=vendor_headers).status_code == 403

    def test_delete_unknown_vendor(self, client, admin_headers):
        assert client.delete(f"{API}/vendors/VENNONE000", headers=admin_headers).status_code == 404
