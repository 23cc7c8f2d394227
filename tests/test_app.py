"""Tests for app-level endpoints: health, confirmation emails, error envelopes."""
from payloads import API


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "app": "Vendor Portal API", "env": "test"}

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get(f"{API}/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"error": {"code": "NOT_FOUND", "message": "Resource not found"}}


class TestConfirmationEmail:
    def test_update_email(self, client):
        response = client.post(
            f"{API}/emails/confirmation",
            json={"email": "v@example.com", "vendorId": "VENABCD123", "section": "financial", "action": "update"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["emailContent"]["subject"] == "Vendor Profile Update Confirmation - financial"
        assert body["timestamp"]

    def test_invalid_email(self, client):
        response = client.post(f"{API}/emails/confirmation", json={"email": "nope", "action": "signup"})
        assert response.status_code == 422


class TestAccessLog:
    def test_write_requests_are_logged(self, client, caplog):
        with caplog.at_level("INFO", logger="vendor_portal.access"):
            client.post(f"{API}/registrations/validate-step", json={"step": 1, "data": {}})
        assert "POST /api/v1/registrations/validate-step -> 200" in caplog.text
