"""Pytest fixtures for API testing."""
import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="vendor-portal-tests-"))
_DB_FILE = _TMP / "test.db"

# Settings are read at import time, so point them at the scratch area first
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_FILE}"
os.environ["UPLOAD_DIR"] = str(_TMP / "uploads")
os.environ["APP_ENV"] = "test"
os.environ["AUTO_CREATE_SCHEMA"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

import vendor_portal.domain  # noqa: E402,F401
from vendor_portal.db.base import Base  # noqa: E402
from vendor_portal.main import app  # noqa: E402

from payloads import API, VENDOR_PAYLOAD  # noqa: E402

sync_engine = create_engine(f"sqlite:///{_DB_FILE}", connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=sync_engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=sync_engine)
    db = TestingSessionLocal()
    yield db
    db.close()
    Base.metadata.drop_all(bind=sync_engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Test client over the freshly created database."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_vendor(client):
    """Register a vendor through the public endpoint; returns the vendor JSON."""

    def _make(**overrides):
        payload = {**VENDOR_PAYLOAD, **overrides}
        response = client.post(f"{API}/registrations", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]["vendor"]

    return _make


@pytest.fixture
def make_admin(client):
    """Sign up an admin; returns (admin JSON, auth headers)."""

    def _make(email="admin@example.com", name="Pat Admin", role="admin", password="secret123"):
        response = client.post(
            f"{API}/auth/admin/signup",
            json={
                "name": name,
                "email": email,
                "password": password,
                "confirmPassword": password,
                "role": role,
            },
        )
        assert response.status_code == 201, response.text
        data = response.json()["data"]
        return data["admin"], {"Authorization": f"Bearer {data['accessToken']}"}

    return _make


@pytest.fixture
def admin_headers(make_admin):
    _, headers = make_admin()
    return headers


@pytest.fixture
def vendor(make_vendor):
    return make_vendor()


@pytest.fixture
def vendor_headers(client, vendor):
    """Bearer headers for a portal account bound to ``vendor``."""
    response = client.post(
        f"{API}/auth/vendor/signup",
        json={
            "vendorId": vendor["vendorId"],
            "email": vendor["email"],
            "password": "vendorpass1",
            "confirmPassword": "vendorpass1",
        },
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['data']['accessToken']}"}
