"""Unit tests for ReceiptExtractor

The receipt stage never fails: bad model output produces a DEGRADED record
built from the raw email.
"""

from __future__ import annotations

from claimso.email_parser import ExtractionOutcome, ReceiptExtractor, build_degraded_product
from claimso.email_parser.receipt_extractor import DEGRADED_NAME_PREFIX, DEGRADED_NOTES_PREFIX


def test_successful_extraction(fake_llm):
    extractor = ReceiptExtractor(
        fake_llm(
            receipt={
                "product_name": "iPhone 15 Pro",
                "brand": "Apple",
                "purchase_price": 999.0,
                "currency": "USD",
                "purchase_date": "2024-01-15",
                "purchase_location": "Apple Store",
                "condition": "new",
            }
        )
    )

    result = extractor.extract("Your Apple receipt", "iPhone 15 Pro $999.00")

    assert result.outcome is ExtractionOutcome.SUCCEEDED
    assert result.record.product_name == "iPhone 15 Pro"
    assert result.record.purchase_price == 999.0
    assert result.record.to_response() == {
        "product_name": "iPhone 15 Pro",
        "brand": "Apple",
        "purchase_price": 999.0,
        "currency": "USD",
        "purchase_date": "2024-01-15",
        "purchase_location": "Apple Store",
        "condition": "new",
    }


def test_unknown_keys_are_dropped(fake_llm):
    extractor = ReceiptExtractor(
        fake_llm(receipt={"product_name": "Desk Lamp", "confidence": 0.4, "warranty": "1y"})
    )

    result = extractor.extract("Receipt", "Desk Lamp")

    assert result.record.to_response() == {"product_name": "Desk Lamp"}


def test_missing_product_name_degrades(fake_llm):
    extractor = ReceiptExtractor(fake_llm(receipt={"brand": "Apple"}))

    result = extractor.extract("Your Apple receipt", "Thanks for your purchase")

    assert result.outcome is ExtractionOutcome.DEGRADED
    assert result.record.product_name == "Email Purchase: Your Apple receipt"
    assert result.reason.startswith("extraction_failed")


def test_model_error_degrades(fake_llm):
    extractor = ReceiptExtractor(fake_llm(receipt=ConnectionError("unavailable")))

    result = extractor.extract("Order confirmed", "Total $12")

    assert result.outcome is ExtractionOutcome.DEGRADED
    assert result.is_present


def test_degraded_notes_truncate_body_to_500_chars():
    body = "x" * 800

    product = build_degraded_product("Order", body)

    assert product.product_name == f"{DEGRADED_NAME_PREFIX}Order"
    assert product.notes == f"{DEGRADED_NOTES_PREFIX}{'x' * 500}..."


def test_degraded_notes_keep_short_body():
    product = build_degraded_product("Order", "Short body")

    assert product.notes == f"{DEGRADED_NOTES_PREFIX}Short body..."
    assert product.to_response().keys() == {"product_name", "notes"}
