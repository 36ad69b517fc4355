"""Health check endpoint for CLAIMSO services.

Liveness probe; does not call any upstream service.
"""

from __future__ import annotations

import os
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter

from claimso.config import APP_VERSION, SERVICE_NAME
from claimso.observability.telemetry import counters_with_prefix

router = APIRouter(tags=["health"])

FEATURES = ["email-parser", "pdf-generator", "pass-generator", "calendar-generator"]


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint.

    Reports presence of the LLM project and pass signing credentials
    (values are never echoed) and the in-process API counters.
    """
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": APP_VERSION,
        "timestamp": datetime.now(UTC).isoformat(),
        "features": FEATURES,
        "llm": {"google_cloud_project": bool(os.getenv("GOOGLE_CLOUD_PROJECT"))},
        "pass_signing": {
            "configured": bool(os.getenv("PASSKIT_CERT")) and bool(os.getenv("PASSKIT_KEY")),
        },
        "api_counters": counters_with_prefix("api."),
    }
