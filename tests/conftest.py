import pytest
from fastapi.testclient import TestClient

from portfolio_site.app.core.config import settings
from portfolio_site.app.main import create_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret"


@pytest.fixture(autouse=True)
def store_dir(tmp_path, monkeypatch):
    """Point every file the site touches at a fresh temporary directory."""
    monkeypatch.setattr(settings, "data_dir", str(tmp_path / "data"))
    monkeypatch.setattr(settings, "cards_file", "cards.json")
    monkeypatch.setattr(settings, "settings_file", "settings.json")
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path / "uploads"))
    monkeypatch.setattr(settings, "admin_username", ADMIN_USERNAME)
    monkeypatch.setattr(settings, "admin_password", ADMIN_PASSWORD)
    monkeypatch.setattr(settings, "admin_auth_required", True)
    monkeypatch.setattr(settings, "secret_key", "test-secret")
    return tmp_path


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def admin_headers(client):
    resp = client.post("/api/auth", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


