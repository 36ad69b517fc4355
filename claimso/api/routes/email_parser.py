"""Email parsing endpoint for CLAIMSO services.

Classifies a forwarded retailer email and returns the extracted purchase or
order-status record. Stateless: nothing is stored.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from claimso.api.middleware.auth import require_service_auth
from claimso.email_parser import (
    EmailInterpretationPipeline,
    EmailMessage,
    ExtractionOutcome,
    IntentUnavailableError,
)
from claimso.observability.logging import get_logger
from claimso.observability.telemetry import counter
from claimso.utils.redaction import redact_subject
from claimso.utils.validators import NonEmptyStr

router = APIRouter(tags=["email-parser"], dependencies=[Depends(require_service_auth)])
logger = get_logger(__name__)


class EmailParseRequest(BaseModel):
    """Inbound email as posted by the mail webhook."""

    model_config = ConfigDict(populate_by_name=True)

    to: NonEmptyStr
    from_address: NonEmptyStr = Field(..., alias="from")
    subject: NonEmptyStr
    text: NonEmptyStr
    html: str | None = None

    def to_message(self) -> EmailMessage:
        return EmailMessage(
            sender=self.from_address,
            recipient=self.to,
            subject=self.subject,
            text=self.text,
            html=self.html,
        )


@lru_cache(maxsize=1)
def get_pipeline() -> EmailInterpretationPipeline:
    return EmailInterpretationPipeline()


@router.post("/email-parser")
def parse_email(
    request: EmailParseRequest,
    pipeline: EmailInterpretationPipeline = Depends(get_pipeline),
) -> dict[str, Any]:
    """
    Classify the email and extract its record.

    Returns ``{"intent": ..., "data": ...}``. Receipt extraction failures
    still return 200 with a degraded product record.
    """
    try:
        result = pipeline.interpret(request.to_message())
    except IntentUnavailableError as e:
        counter("api.email_parser.intent_unavailable")
        logger.warning(
            "Intent unavailable for %s: %s", redact_subject(request.subject), e
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to classify email intent",
        ) from e

    if result.outcome is ExtractionOutcome.ABSENT:
        counter("api.email_parser.extraction_absent")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Failed to extract data from email",
        )

    counter(f"api.email_parser.{result.outcome.value.lower()}")
    return result.to_response()
