"""Unit tests for the security headers middleware"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from claimso.api.middleware import security_headers
from claimso.api.middleware.security_headers import SecurityHeadersMiddleware
from claimso.infrastructure import settings


def create_test_app() -> TestClient:
    """Create test FastAPI app wrapped in the middleware"""
    test_app = FastAPI()
    test_app.add_middleware(SecurityHeadersMiddleware)

    @test_app.get("/ping")
    async def ping():
        return {"status": "ok"}

    return TestClient(test_app)


@pytest.mark.parametrize(("production", "expected"), [(True, True), (False, False)])
def test_hsts_only_in_production(monkeypatch, production, expected):
    monkeypatch.setattr(security_headers, "is_production", lambda: production)

    response = create_test_app().get("/ping")

    assert ("Strict-Transport-Security" in response.headers) is expected
    assert response.headers["Cache-Control"] == "no-store"


def test_production_flag_follows_environment(monkeypatch):
    monkeypatch.setattr(settings, "ENV", "production")
    assert settings.is_production() is True

    monkeypatch.setattr(settings, "ENV", "development")
    assert settings.is_production() is False
