"""
CLAIMSO claim packets - sanitized, single-page warranty claim PDFs.
"""

from claimso.claims.layout import FontMetrics, LayoutContext, wrap_words
from claimso.claims.models import ClaimPacketRequest, ClaimProduct, Requester
from claimso.claims.renderer import ClaimPacketRenderer, build_document_id, format_price
from claimso.claims.sanitizer import sanitize_text

__all__ = [
    "ClaimPacketRenderer",
    "ClaimPacketRequest",
    "ClaimProduct",
    "FontMetrics",
    "LayoutContext",
    "Requester",
    "build_document_id",
    "format_price",
    "sanitize_text",
    "wrap_words",
]
