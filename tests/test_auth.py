"""Tests for authentication and admin management."""
import re

from vendor_portal.domain.audit import AuditLog

from payloads import API


class TestAdminAuth:
    def test_signup_returns_token_and_admin_id(self, client, make_admin):
        admin, headers = make_admin(role="reviewer")
        assert re.fullmatch(r"ADM[A-Z]{4}\d{3}", admin["adminId"])
        assert admin["role"] == "reviewer"
        me = client.get(f"{API}/auth/me", headers=headers).json()["data"]
        assert me["role"] == "admin"
        assert me["adminId"] == admin["adminId"]

    def test_signup_validation(self, client):
        base = {"name": "A", "email": "a@example.com", "role": "admin"}
        short = client.post(f"{API}/auth/admin/signup", json={**base, "password": "abc", "confirmPassword": "abc"})
        assert short.status_code == 422
        mismatch = client.post(
            f"{API}/auth/admin/signup", json={**base, "password": "abcdef", "confirmPassword": "abcdeg"}
        )
        assert mismatch.status_code == 422
        bad_role = client.post(
            f"{API}/auth/admin/signup",
            json={**base, "role": "owner", "password": "abcdef", "confirmPassword": "abcdef"},
        )
        assert bad_role.status_code == 422

    def test_duplicate_email(self, make_admin, client):
        make_admin()
        response = client.post(
            f"{API}/auth/admin/signup",
            json={"name": "B", "email": "ADMIN@example.com", "password": "secret123",
                  "confirmPassword": "secret123", "role": "admin"},
        )
        assert response.status_code == 409

    def test_login(self, client, make_admin):
        make_admin()
        ok = client.post(f"{API}/auth/admin/login", json={"email": "admin@example.com", "password": "secret123"})
        assert ok.status_code == 200
        assert ok.json()["data"]["tokenType"] == "bearer"

        bad = client.post(f"{API}/auth/admin/login", json={"email": "admin@example.com", "password": "wrong"})
        assert bad.status_code == 401
        assert bad.json()["error"]["message"] == "Invalid email or password"

        unknown = client.post(f"{API}/auth/admin/login", json={"email": "who@example.com", "password": "x"})
        assert unknown.status_code == 401


class TestVendorAuth:
    def test_signup_and_login(self, client, vendor, vendor_headers):
        login = client.post(
            f"{API}/auth/vendor/login", json={"email": vendor["email"], "password": "vendorpass1"}
        )
        assert login.status_code == 200
        data = login.json()["data"]
        assert data["role"] == "vendor"
        assert data["account"]["vendorId"] == vendor["vendorId"]

    def test_signup_requires_matching_vendor(self, client, vendor):
        response = client.post(
            f"{API}/auth/vendor/signup",
            json={"vendorId": vendor["vendorId"], "email": "someone@example.com",
                  "password": "vendorpass1", "confirmPassword": "vendorpass1"},
        )
        assert response.status_code == 400

    def test_one_account_per_email(self, client, vendor, vendor_headers):
        response = client.post(
            f"{API}/auth/vendor/signup",
            json={"vendorId": vendor["vendorId"], "email": vendor["email"],
                  "password": "vendorpass2", "confirmPassword": "vendorpass2"},
        )
        assert response.status_code == 409

    def test_password_too_short(self, client, vendor):
        response = client.post(
            f"{API}/auth/vendor/signup",
            json={"vendorId": vendor["vendorId"], "email": vendor["email"],
                  "password": "short", "confirmPassword": "short"},
        )
        assert response.status_code == 422


class TestAdminManagement:
    def test_list_and_search(self, client, make_admin):
        _, headers = make_admin()
        make_admin(email="reviewer@example.com", name="Rita Reviewer", role="reviewer")
        listed = client.get(f"{API}/admins", headers=headers).json()
        assert listed["meta"]["total"] == 2
        found = client.get(f"{API}/admins?search=rita", headers=headers).json()
        assert [a["email"] for a in found["data"]] == ["reviewer@example.com"]

    def test_toggle_active_blocks_login_and_token(self, client, make_admin):
        _, headers = make_admin()
        other, other_headers = make_admin(email="other@example.com")

        toggled = client.patch(f"{API}/admins/{other['id']}/toggle-active", headers=headers)
        assert toggled.json()["data"]["isActive"] is False

        login = client.post(f"{API}/auth/admin/login", json={"email": "other@example.com", "password": "secret123"})
        assert login.status_code == 401
        assert client.get(f"{API}/admins", headers=other_headers).status_code == 403

    def test_cannot_deactivate_or_delete_self(self, client, make_admin):
        me, headers = make_admin()
        assert client.patch(f"{API}/admins/{me['id']}/toggle-active", headers=headers).status_code == 400
        assert client.delete(f"{API}/admins/{me['id']}", headers=headers).status_code == 400

    def test_delete_admin_is_audited(self, client, make_admin, db_session):
        _, headers = make_admin()
        other, _ = make_admin(email="other@example.com")
        assert client.delete(f"{API}/admins/{other['id']}", headers=headers).status_code == 204
        assert client.get(f"{API}/admins", headers=headers).json()["meta"]["total"] == 1
        audit = db_session.query(AuditLog).filter_by(action="ADMIN_DELETED").one()
        assert audit.old_values["email"] == "other@example.com"

    def test_vendor_token_rejected(self, client, vendor_headers):
        assert client.get(f"{API}/admins", headers=vendor_headers).status_code == 403
