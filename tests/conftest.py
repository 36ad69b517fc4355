"""
Pytest configuration for CLAIMSO services tests

Provides a scripted stand-in for the LLM call and shared request payloads.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from claimso.observability.telemetry import reset_telemetry

TEST_API_KEY = "test-services-key"


class FakeLLM:
    """
    Scripted replacement for ``claimso.llm.retry.call_llm``.

    Responses are keyed by the ``counter_prefix`` each stage passes
    ("classifier", "receipt", "status"). A value may be a string, a dict
    (serialized to JSON) or an exception instance to raise.
    """

    def __init__(self, **responses: Any):
        self.responses = responses
        self.calls: list[dict[str, Any]] = []

    def __call__(self, prompt: str, counter_prefix: str = "llm", **kwargs: Any) -> str:
        self.calls.append({"prompt": prompt, "counter_prefix": counter_prefix, **kwargs})
        response = self.responses[counter_prefix]
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, dict):
            return json.dumps(response)
        return response

    @property
    def stages(self) -> list[str]:
        return [call["counter_prefix"] for call in self.calls]


@pytest.fixture
def fake_llm() -> Callable[..., FakeLLM]:
    return FakeLLM


@pytest.fixture(autouse=True)
def _reset_telemetry():
    reset_telemetry()
    yield
    reset_telemetry()


@pytest.fixture
def services_api_key(monkeypatch) -> str:
    monkeypatch.setenv("SERVICES_API_KEY", TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def auth_headers(services_api_key) -> dict[str, str]:
    return {"Authorization": f"Bearer {services_api_key}"}


@pytest.fixture
def claim_payload() -> dict[str, Any]:
    return {
        "product": {
            "id": "prod-123",
            "name": "Sony WH-1000XM5 Headphones",
            "brand": "Sony",
            "serial_number": "SN-998877",
            "purchase_date": "2024-03-02",
            "order_number": "112-5551234",
            "retailer": "Best Buy",
            "price": 399,
            "currency": "$",
            "category": "Electronics",
        },
        "problemDescription": "The left ear cup stopped producing sound after two months of normal use.",
        "user": {"name": "Jordan Lee", "email": "jordan@example.com"},
    }
