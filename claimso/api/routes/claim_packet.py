"""Claim packet endpoint for CLAIMSO services."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from claimso.api.middleware.auth import require_service_auth
from claimso.claims import ClaimPacketRenderer, ClaimPacketRequest
from claimso.observability.logging import get_logger

router = APIRouter(tags=["claims"], dependencies=[Depends(require_service_auth)])
logger = get_logger(__name__)

PDF_MEDIA_TYPE = "application/pdf"

_renderer = ClaimPacketRenderer()


def get_renderer() -> ClaimPacketRenderer:
    return _renderer


@router.post("/pdf-generator", response_class=Response)
def generate_claim_packet(
    request: ClaimPacketRequest,
    renderer: ClaimPacketRenderer = Depends(get_renderer),
) -> Response:
    """Render a single-page warranty claim packet PDF."""
    try:
        pdf_bytes = renderer.render(request)
    except Exception as e:
        logger.error("PDF generation failed for product %s: %s", request.product.id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate PDF",
        ) from e

    return Response(
        content=pdf_bytes,
        media_type=PDF_MEDIA_TYPE,
        headers={"Content-Length": str(len(pdf_bytes))},
    )
