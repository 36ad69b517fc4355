"""
Intent Classifier - LLM-based classification of retailer emails.

Stage 1 of the email pipeline. A single low-temperature Gemini call maps the
email to PURCHASE, RETURN or SHIPMENT_UPDATE. This stage is fail-soft: any
upstream error or unusable output yields an explicit "unavailable" result
instead of an exception, so one bad completion never crashes the request.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from claimso.config import CLASSIFIER_MAX_TOKENS
from claimso.email_parser.models import IntentLabel
from claimso.email_parser.prompts import CLASSIFIER_SYSTEM_INSTRUCTION, build_email_prompt
from claimso.email_parser.types import ClassificationResult
from claimso.llm.parsing import load_json_object
from claimso.observability.logging import get_logger
from claimso.observability.telemetry import counter, log_event
from claimso.utils.redaction import redact_subject

logger = get_logger(__name__)


class IntentSchema(BaseModel):
    """Schema for LLM response validation."""

    model_config = ConfigDict(extra="ignore")

    intent: IntentLabel


class IntentClassifier:
    """
    Classify a retailer email into one of the three intent labels.

    Args:
        llm_call: Callable with the signature of ``claimso.llm.retry.call_llm``.
            Defaults to the shared Gemini call; tests inject a fake.
    """

    def __init__(self, llm_call: Callable[..., str] | None = None):
        if llm_call is None:
            from claimso.llm.retry import call_llm

            llm_call = call_llm
        self._llm_call = llm_call

    def classify(self, subject: str, body: str) -> ClassificationResult:
        """
        Classify the intent of an email.

        Returns:
            ClassificationResult with a label, or ``unavailable`` on any failure

        Side Effects:
            - Calls Gemini API
            - Logs classification events
            - Increments telemetry counters
        """
        if not subject or not body:
            counter("email_parser.classifier.empty_input")
            return ClassificationResult.unavailable("empty_input")

        prompt = build_email_prompt(subject, body)

        try:
            logger.info("INTENT CLASSIFIER: classifying subject='%s'", redact_subject(subject))
            response_text = self._llm_call(
                prompt,
                counter_prefix="classifier",
                system_instruction=CLASSIFIER_SYSTEM_INSTRUCTION,
                max_output_tokens=CLASSIFIER_MAX_TOKENS,
            )
            label = self._parse_response(response_text)
        except Exception as e:
            counter("email_parser.classifier.error")
            logger.error("INTENT CLASSIFIER ERROR: %s", e)
            log_event("email_parser.classifier.error", error=str(e)[:200])
            return ClassificationResult.unavailable(f"classification_failed: {str(e)[:50]}")

        counter("email_parser.classifier.success")
        log_event("email_parser.classifier.result", intent=label.value)
        return ClassificationResult.classified(label)

    def _parse_response(self, response_text: str | None) -> IntentLabel:
        """Parse LLM response into an IntentLabel.

        Raises:
            ValueError: On empty output, invalid JSON, or an unrecognized label
                (pydantic.ValidationError is a ValueError subclass).
        """
        data = load_json_object(response_text, counter_prefix="classifier")
        return IntentSchema.model_validate(data).intent
