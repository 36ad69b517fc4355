"""
Module: types
Purpose: Shared result types for the email interpretation pipeline.
Dependencies: claimso.email_parser.models (IntentLabel only)

Stable import boundary: the classifier, both extractors, the pipeline and the
API route all exchange these types. Keeping them in a leaf module prevents
circular imports between the stages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from claimso.email_parser.models import IntentLabel

RecordT = TypeVar("RecordT")


# ---------------------------------------------------------------------------
# Stage 1 result (from intent_classifier.py)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClassificationResult:
    """Result of intent classification: a label, or an explicit unavailable signal."""

    label: IntentLabel | None
    reason: str

    @property
    def is_available(self) -> bool:
        return self.label is not None

    @classmethod
    def classified(cls, label: IntentLabel) -> ClassificationResult:
        return cls(label=label, reason="classified")

    @classmethod
    def unavailable(cls, reason: str) -> ClassificationResult:
        return cls(label=None, reason=reason)


# ---------------------------------------------------------------------------
# Stage 2 result (from receipt_extractor.py / status_extractor.py)
# ---------------------------------------------------------------------------


class ExtractionOutcome(str, Enum):
    """How confident an extraction is.

    Extends str so JSON serialization produces raw strings (e.g. "degraded").
    """

    SUCCEEDED = "succeeded"  # Model output passed schema validation
    DEGRADED = "degraded"  # Fallback record built from the raw email
    ABSENT = "absent"  # No record; caller must treat as a failure to extract


@dataclass(frozen=True)
class ExtractionResult(Generic[RecordT]):
    """Result of a single extraction stage."""

    outcome: ExtractionOutcome
    record: RecordT | None = None
    reason: str | None = None

    @property
    def is_present(self) -> bool:
        return self.record is not None

    @classmethod
    def succeeded(cls, record: RecordT) -> ExtractionResult[RecordT]:
        return cls(outcome=ExtractionOutcome.SUCCEEDED, record=record)

    @classmethod
    def degraded(cls, record: RecordT, reason: str) -> ExtractionResult[RecordT]:
        return cls(outcome=ExtractionOutcome.DEGRADED, record=record, reason=reason)

    @classmethod
    def absent(cls, reason: str) -> ExtractionResult[RecordT]:
        return cls(outcome=ExtractionOutcome.ABSENT, reason=reason)
