"""
CLAIMSO email parser - classify retailer emails and extract structured records.
"""

from claimso.email_parser.intent_classifier import IntentClassifier
from claimso.email_parser.models import (
    EmailMessage,
    ExtractedProduct,
    IntentLabel,
    OrderStatus,
    OrderStatusUpdate,
    ProductCondition,
)
from claimso.email_parser.pipeline import (
    EmailInterpretationPipeline,
    IntentUnavailableError,
    InterpretationResult,
)
from claimso.email_parser.receipt_extractor import ReceiptExtractor, build_degraded_product
from claimso.email_parser.status_extractor import StatusExtractor
from claimso.email_parser.types import ClassificationResult, ExtractionOutcome, ExtractionResult

__all__ = [
    # Models
    "EmailMessage",
    "ExtractedProduct",
    "IntentLabel",
    "OrderStatus",
    "OrderStatusUpdate",
    "ProductCondition",
    # Result types
    "ClassificationResult",
    "ExtractionOutcome",
    "ExtractionResult",
    # Stages
    "IntentClassifier",
    "ReceiptExtractor",
    "StatusExtractor",
    "build_degraded_product",
    # Pipeline
    "EmailInterpretationPipeline",
    "IntentUnavailableError",
    "InterpretationResult",
]
