"""Bearer-token authentication for CLAIMSO services"""

from __future__ import annotations

import os
import secrets

from fastapi import Header, HTTPException, status

from claimso.observability.logging import get_logger
from claimso.observability.telemetry import counter

logger = get_logger(__name__)

API_KEY_ENV = "SERVICES_API_KEY"


class APIKeyAuth:
    """
    Shared-secret authentication for the generation endpoints.

    The key is read from SERVICES_API_KEY on every request. Unlike a dev
    convenience mode, an unset key is a server misconfiguration and rejects
    the request with 500 rather than opening the endpoints.
    """

    def __init__(self, env_var: str = API_KEY_ENV):
        self.env_var = env_var

    @property
    def api_key(self) -> str | None:
        return os.getenv(self.env_var) or None

    def verify_api_key(self, authorization: str | None) -> bool:
        """
        Verify API key from Authorization header.

        Expected format: "Bearer {api_key}"
        """
        expected = self.api_key
        if not expected:
            logger.error("%s is not configured", self.env_var)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Server authentication is not configured",
            )

        if not authorization or not authorization.startswith("Bearer "):
            counter("api.auth.missing")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Missing Authorization header",
                headers={"WWW-Authenticate": "Bearer"},
            )

        # Timing-safe comparison
        token = authorization[len("Bearer ") :]
        if not secrets.compare_digest(token.encode("utf-8"), expected.encode("utf-8")):
            counter("api.auth.invalid")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid API key",
                headers={"WWW-Authenticate": "Bearer"},
            )

        return True


# Global auth instance
auth = APIKeyAuth()


def require_service_auth(authorization: str | None = Header(None)) -> bool:
    """
    Dependency for the generation endpoints.

    Usage:
        router = APIRouter(dependencies=[Depends(require_service_auth)])
    """
    return auth.verify_api_key(authorization)
