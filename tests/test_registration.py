"""Tests for public registration endpoints."""
import re

from vendor_portal.domain.audit import AuditLog
from vendor_portal.domain.notification import Notification
from vendor_portal.domain.vendor import VendorDraft

from payloads import API, VENDOR_PAYLOAD


class TestValidateStep:
    def test_reports_missing_fields(self, client):
        response = client.post(
            f"{API}/registrations/validate-step",
            json={"step": 1, "data": {"legalEntityName": "Acme"}},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["valid"] is False
        assert data["missingFields"] == ["vendor_type"]

    def test_optional_step_is_valid(self, client):
        response = client.post(f"{API}/registrations/validate-step", json={"step": 4, "data": {}})
        assert response.json()["data"]["valid"] is True


class TestRegisterVendor:
    def test_register_creates_pending_vendor(self, client, db_session):
        response = client.post(f"{API}/registrations", json=VENDOR_PAYLOAD)
        assert response.status_code == 201
        data = response.json()["data"]
        vendor = data["vendor"]
        assert re.fullmatch(r"VEN[A-Z]{4}\d{3}", vendor["vendorId"])
        assert vendor["registrationStatus"] == "pending"
        assert vendor["currency"] == "USD"
        assert data["emailSentTo"] == VENDOR_PAYLOAD["email"]

        audit = db_session.query(AuditLog).filter_by(action="REGISTER").one()
        assert audit.vendor_id == vendor["vendorId"]
        note = db_session.query(Notification).one()
        assert note.notification_type == "vendor_registration"
        assert note.vendor_id is None

    def test_missing_required_fields(self, client):
        response = client.post(f"{API}/registrations", json={"legalEntityName": "Acme"})
        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "contact_name" in error["fields"]

    def test_invalid_email(self, client):
        response = client.post(f"{API}/registrations", json={**VENDOR_PAYLOAD, "email": "nope"})
        assert response.status_code == 422
        assert response.json()["error"]["fields"] == ["email"]

    def test_duplicate_email_case_insensitive(self, client, make_vendor):
        make_vendor()
        response = client.post(
            f"{API}/registrations",
            json={**VENDOR_PAYLOAD, "email": VENDOR_PAYLOAD["email"].upper()},
        )
        assert response.status_code == 409

    def test_custom_country(self, client):
        response = client.post(
            f"{API}/registrations",
            json={**VENDOR_PAYLOAD, "country": "Other", "customCountry": "Lesotho"},
        )
        assert response.status_code == 201
        assert response.json()["data"]["vendor"]["country"] == "Lesotho"

    def test_other_country_without_custom_country(self, client):
        response = client.post(f"{API}/registrations", json={**VENDOR_PAYLOAD, "country": "Other"})
        assert response.status_code == 422


class TestDrafts:
    def test_draft_lifecycle(self, client):
        created = client.post(f"{API}/registrations/drafts", json={"legalEntityName": "Draft Co"})
        assert created.status_code == 201
        draft = created.json()["data"]
        assert draft["registrationStatus"] == "draft"

        updated = client.put(
            f"{API}/registrations/drafts/{draft['id']}",
            json={"legalEntityName": "Draft Co", "city": "Springfield"},
        )
        assert updated.status_code == 200
        assert updated.json()["data"]["city"] == "Springfield"

        fetched = client.get(f"{API}/registrations/drafts/{draft['id']}")
        assert fetched.json()["data"]["legalEntityName"] == "Draft Co"

        assert client.delete(f"{API}/registrations/drafts/{draft['id']}").status_code == 204
        assert client.get(f"{API}/registrations/drafts/{draft['id']}").status_code == 404

    def test_register_from_draft_removes_draft(self, client, db_session):
        draft = client.post(f"{API}/registrations/drafts", json={"legalEntityName": "Acme"}).json()["data"]
        response = client.post(f"{API}/registrations", json={**VENDOR_PAYLOAD, "draftId": draft["id"]})
        assert response.status_code == 201
        assert db_session.query(VendorDraft).count() == 0

    def test_register_with_unknown_draft(self, client, db_session):
        response = client.post(f"{API}/registrations", json={**VENDOR_PAYLOAD, "draftId": "missing"})
        assert response.status_code == 404
        assert db_session.query(AuditLog).count() == 0
