"""Wallet pass endpoint for CLAIMSO services."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from claimso.api.middleware.auth import require_service_auth
from claimso.observability.logging import get_logger
from claimso.passes import PassComposer, SigningConfigurationError, SubjectProfile

router = APIRouter(tags=["passes"], dependencies=[Depends(require_service_auth)])
logger = get_logger(__name__)

PKPASS_MEDIA_TYPE = "application/vnd.apple.pkpass"

_composer = PassComposer()


def get_composer() -> PassComposer:
    return _composer


@router.post("/pass-generator", response_class=Response)
def generate_pass(
    profile: SubjectProfile,
    composer: PassComposer = Depends(get_composer),
) -> Response:
    """Compose and sign a Smart Pass for the given account."""
    try:
        pass_bytes = composer.generate(profile)
    except SigningConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Pass signing is not configured",
        ) from e
    except Exception as e:
        logger.error("Pass generation failed for %s: %s", profile.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate pass",
        ) from e

    return Response(
        content=pass_bytes,
        media_type=PKPASS_MEDIA_TYPE,
        headers={"Content-Length": str(len(pass_bytes))},
    )
