"""
Receipt Extractor - extract a product record from PURCHASE emails.

Stage 2 for purchases. This stage degrades rather than fails: downstream
bookkeeping needs an entry for every purchase email, so when the model call
or its validation fails a low-confidence record is built from the raw email
and flagged as DEGRADED.
"""

from __future__ import annotations

from collections.abc import Callable

from claimso.config import DEGRADED_NOTES_BODY_CHARS, RECEIPT_MAX_TOKENS
from claimso.email_parser.models import ExtractedProduct
from claimso.email_parser.prompts import RECEIPT_SYSTEM_INSTRUCTION, build_email_prompt
from claimso.email_parser.types import ExtractionResult
from claimso.llm.parsing import load_json_object
from claimso.observability.logging import get_logger
from claimso.observability.telemetry import counter, log_event
from claimso.utils.redaction import redact_subject

logger = get_logger(__name__)

DEGRADED_NAME_PREFIX = "Email Purchase: "
DEGRADED_NOTES_PREFIX = "Automated extraction failed. Original content: "


def build_degraded_product(subject: str, body: str) -> ExtractedProduct:
    """Fallback record: subject-based name, truncated body in the notes."""
    return ExtractedProduct(
        product_name=f"{DEGRADED_NAME_PREFIX}{subject}",
        notes=f"{DEGRADED_NOTES_PREFIX}{body[:DEGRADED_NOTES_BODY_CHARS]}...",
    )


class ReceiptExtractor:
    """Extract an ExtractedProduct from a purchase confirmation email."""

    def __init__(self, llm_call: Callable[..., str] | None = None):
        if llm_call is None:
            from claimso.llm.retry import call_llm

            llm_call = call_llm
        self._llm_call = llm_call

    def extract(self, subject: str, body: str) -> ExtractionResult[ExtractedProduct]:
        """
        Extract product fields from a purchase email.

        Returns:
            SUCCEEDED result with the validated record, or DEGRADED result with
            the fallback record. Never ABSENT.

        Side Effects:
            - Calls Gemini API
            - Logs extraction events
        """
        try:
            logger.info("RECEIPT EXTRACTOR: extracting subject='%s'", redact_subject(subject))
            response_text = self._llm_call(
                build_email_prompt(subject, body),
                counter_prefix="receipt",
                system_instruction=RECEIPT_SYSTEM_INSTRUCTION,
                max_output_tokens=RECEIPT_MAX_TOKENS,
            )
            data = load_json_object(response_text, counter_prefix="receipt")
            product = ExtractedProduct.model_validate(data)
        except Exception as e:
            counter("email_parser.receipt.degraded")
            logger.warning("Receipt extraction failed, using degraded record: %s", e)
            log_event("email_parser.receipt.degraded", error=str(e)[:200])
            return ExtractionResult.degraded(
                build_degraded_product(subject, body),
                reason=f"extraction_failed: {str(e)[:50]}",
            )

        counter("email_parser.receipt.success")
        log_event(
            "email_parser.receipt.complete",
            fields=sorted(product.to_response().keys()),
        )
        return ExtractionResult.succeeded(product)
