"""
Status Extractor - extract an order status update from RETURN and
SHIPMENT_UPDATE emails.

Stage 2 for status emails. This stage fails closed: a guessed order id or
status could attach a status change to the wrong order, so any failure yields
an ABSENT result with no record.
"""

from __future__ import annotations

from collections.abc import Callable

from claimso.config import STATUS_MAX_TOKENS
from claimso.email_parser.models import OrderStatusUpdate
from claimso.email_parser.prompts import STATUS_SYSTEM_INSTRUCTION, build_email_prompt
from claimso.email_parser.types import ExtractionResult
from claimso.llm.parsing import load_json_object
from claimso.observability.logging import get_logger
from claimso.observability.telemetry import counter, log_event
from claimso.utils.redaction import redact_subject

logger = get_logger(__name__)


class StatusExtractor:
    """Extract an OrderStatusUpdate from a shipping or return email."""

    def __init__(self, llm_call: Callable[..., str] | None = None):
        if llm_call is None:
            from claimso.llm.retry import call_llm

            llm_call = call_llm
        self._llm_call = llm_call

    def extract(self, subject: str, body: str) -> ExtractionResult[OrderStatusUpdate]:
        """
        Extract order id and status from a status email.

        Returns:
            SUCCEEDED result with both required fields present, or ABSENT.
        """
        try:
            logger.info("STATUS EXTRACTOR: extracting subject='%s'", redact_subject(subject))
            response_text = self._llm_call(
                build_email_prompt(subject, body),
                counter_prefix="status",
                system_instruction=STATUS_SYSTEM_INSTRUCTION,
                max_output_tokens=STATUS_MAX_TOKENS,
            )
            data = load_json_object(response_text, counter_prefix="status")
            update = OrderStatusUpdate.model_validate(data)
        except Exception as e:
            counter("email_parser.status.absent")
            logger.warning("Status extraction failed, no record produced: %s", e)
            log_event("email_parser.status.absent", error=str(e)[:200])
            return ExtractionResult.absent(reason=f"extraction_failed: {str(e)[:50]}")

        if update.known_status is None:
            counter("email_parser.status.unlisted_status")
            logger.info("Status '%s' is outside the recommended vocabulary", update.status)

        counter("email_parser.status.success")
        log_event("email_parser.status.complete", status=update.status)
        return ExtractionResult.succeeded(update)
