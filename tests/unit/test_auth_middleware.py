"""Unit tests for bearer-token authentication

Tests cover:
- Missing and malformed Authorization headers
- Incorrect API keys
- Correct API key authentication
- Unconfigured server key
"""

from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from claimso.api.middleware.auth import require_service_auth


def create_test_app() -> TestClient:
    """Create test FastAPI app with protected endpoint"""
    test_app = FastAPI()

    @test_app.post("/protected")
    async def protected(_authenticated: bool = Depends(require_service_auth)):
        return {"status": "ok"}

    return TestClient(test_app)


def test_auth_rejects_missing_header(services_api_key):
    response = create_test_app().post("/protected")

    assert response.status_code == 401
    assert response.json()["detail"] == "Missing Authorization header"
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_auth_rejects_non_bearer_scheme(services_api_key):
    response = create_test_app().post(
        "/protected", headers={"Authorization": f"Basic {services_api_key}"}
    )

    assert response.status_code == 401


def test_auth_rejects_wrong_key(services_api_key):
    response = create_test_app().post("/protected", headers={"Authorization": "Bearer wrong-key"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid API key"


def test_auth_accepts_correct_key(auth_headers):
    response = create_test_app().post("/protected", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_auth_reads_key_per_request(monkeypatch):
    client = create_test_app()
    monkeypatch.setenv("SERVICES_API_KEY", "rotated")

    assert client.post("/protected", headers={"Authorization": "Bearer rotated"}).status_code == 200


def test_unconfigured_key_is_server_error(monkeypatch):
    monkeypatch.delenv("SERVICES_API_KEY", raising=False)

    response = create_test_app().post("/protected", headers={"Authorization": "Bearer anything"})

    assert response.status_code == 500
