"""
Email interpretation pipeline.

Runs classification then exactly one extractor, strictly in sequence:
PURCHASE goes to the ReceiptExtractor, RETURN and SHIPMENT_UPDATE go to the
StatusExtractor. The API shares one pipeline instance across requests, so
the pipeline and its stages keep no per-request state: every call works only
on its own message and returns a fresh result.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, assert_never

from claimso.email_parser.intent_classifier import IntentClassifier
from claimso.email_parser.models import EmailMessage, ExtractedProduct, IntentLabel, OrderStatusUpdate
from claimso.email_parser.receipt_extractor import ReceiptExtractor
from claimso.email_parser.status_extractor import StatusExtractor
from claimso.email_parser.types import ExtractionOutcome, ExtractionResult
from claimso.observability.logging import get_logger
from claimso.observability.telemetry import log_event, time_block

logger = get_logger(__name__)


class IntentUnavailableError(RuntimeError):
    """Raised when the email intent could not be classified."""


@dataclass(frozen=True)
class InterpretationResult:
    """Classified intent plus the extraction it selected."""

    intent: IntentLabel
    extraction: ExtractionResult[ExtractedProduct] | ExtractionResult[OrderStatusUpdate]

    @property
    def outcome(self) -> ExtractionOutcome:
        return self.extraction.outcome

    def to_response(self) -> dict[str, Any]:
        """API payload ``{intent, data}``. Only valid when a record is present."""
        if self.extraction.record is None:
            raise ValueError("No extracted record to serialize")
        return {
            "intent": self.intent.value,
            "data": self.extraction.record.to_response(),
        }


class EmailInterpretationPipeline:
    """Two-stage classify-then-extract pipeline for retailer emails."""

    def __init__(
        self,
        classifier: IntentClassifier | None = None,
        receipt_extractor: ReceiptExtractor | None = None,
        status_extractor: StatusExtractor | None = None,
        llm_call: Callable[..., str] | None = None,
    ):
        self.classifier = classifier or IntentClassifier(llm_call)
        self.receipt_extractor = receipt_extractor or ReceiptExtractor(llm_call)
        self.status_extractor = status_extractor or StatusExtractor(llm_call)

    def interpret(self, message: EmailMessage) -> InterpretationResult:
        """
        Classify an email and extract the record its intent calls for.

        Raises:
            IntentUnavailableError: If classification is unavailable. No
                extraction is attempted in that case.
        """
        with time_block("email_parser.interpret.latency"):
            classification = self.classifier.classify(message.subject, message.text)
            if classification.label is None:
                raise IntentUnavailableError(classification.reason)

            label = classification.label
            extraction: ExtractionResult[ExtractedProduct] | ExtractionResult[OrderStatusUpdate]
            if label is IntentLabel.PURCHASE:
                extraction = self.receipt_extractor.extract(message.subject, message.text)
            elif label is IntentLabel.RETURN or label is IntentLabel.SHIPMENT_UPDATE:
                extraction = self.status_extractor.extract(message.subject, message.text)
            else:
                assert_never(label)

        log_event(
            "email_parser.interpreted",
            intent=label.value,
            outcome=extraction.outcome.value,
        )
        return InterpretationResult(intent=label, extraction=extraction)
