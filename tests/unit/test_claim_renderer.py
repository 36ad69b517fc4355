"""Unit tests for ClaimPacketRenderer

Most tests swap the reportlab canvas for a mock so the drawn strings can be
inspected directly.
"""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from claimso.claims import (
    ClaimPacketRenderer,
    ClaimPacketRequest,
    LayoutContext,
    build_document_id,
    format_price,
)
from claimso.claims.renderer import format_generated_date

NOW = datetime(2024, 1, 1, tzinfo=UTC)


def drawn_strings(canvas_mock) -> list[str]:
    return [c.args[2] for c in canvas_mock.return_value.drawString.call_args_list]


@pytest.fixture
def request_model(claim_payload):
    return ClaimPacketRequest.model_validate(claim_payload)


class TestFormatting:
    @pytest.mark.parametrize(
        ("price", "currency", "expected"),
        [
            (399, "$", "$399"),
            (399.0, None, "$399"),
            (19.99, None, "$19.99"),
            (1200.5, "EUR", "EUR1200.5"),
            (None, "$", "N/A"),
            (0, "$", "N/A"),
        ],
    )
    def test_format_price(self, price, currency, expected):
        assert format_price(price, currency) == expected

    def test_document_id_uses_epoch_milliseconds(self):
        assert build_document_id("prod-123", NOW) == "prod-123-1704067200000"

    def test_generated_date(self):
        assert format_generated_date(datetime(2024, 3, 5)) == "March 5, 2024"


class TestRender:
    def test_produces_pdf_bytes(self, request_model):
        pdf = ClaimPacketRenderer().render(request_model, now=NOW)
        assert pdf.startswith(b"%PDF")

    def test_draws_all_sections(self, request_model):
        with patch("claimso.claims.renderer.Canvas") as canvas:
            ClaimPacketRenderer().render(request_model, now=NOW)

        strings = drawn_strings(canvas)
        for expected in [
            "WARRANTY CLAIM PACKET",
            "CLAIMSO",
            "Generated: January 1, 2024",
            "PREPARED FOR:",
            "Jordan Lee",
            "jordan@example.com",
            "PRODUCT DETAILS:",
            "Sony WH-1000XM5 Headphones",
            "SN-998877",
            "PURCHASE INFORMATION:",
            "Best Buy",
            "$399",
            "PROBLEM DESCRIPTION:",
            "SUPPORTING EVIDENCE:",
            "Photos/videos available upon request.",
            "Generated by CLAIMSO",
            "Document ID: prod-123-1704067200000",
        ]:
            assert expected in strings

    def test_missing_optional_fields_show_na(self, claim_payload):
        claim_payload["product"] = {"id": "p1", "name": "Toaster"}
        request = ClaimPacketRequest.model_validate(claim_payload)

        with patch("claimso.claims.renderer.Canvas") as canvas:
            ClaimPacketRenderer().render(request, now=NOW)

        assert drawn_strings(canvas).count("N/A") == 7

    def test_caller_fields_are_sanitized(self, claim_payload):
        claim_payload["user"]["name"] = "<script>Jordan</script>\x00"
        request = ClaimPacketRequest.model_validate(claim_payload)

        with patch("claimso.claims.renderer.Canvas") as canvas:
            ClaimPacketRenderer().render(request, now=NOW)

        strings = drawn_strings(canvas)
        assert "scriptJordan/script" in strings
        assert not any("<" in s or "{" in s for s in strings)

    def test_problem_description_is_wrapped_and_quoted(self):
        with patch("claimso.claims.renderer.Canvas") as canvas:
            renderer = ClaimPacketRenderer()
            ctx = LayoutContext.for_page()
            text = "word " * 200
            end = renderer._draw_problem_description(canvas.return_value, ctx, text)

        lines = drawn_strings(canvas)[1:]
        assert len(lines) > 1
        assert all(line.startswith('"') and line.endswith('"') for line in lines)
        assert " ".join(line.strip('"') for line in lines) == text.strip()
        for line in lines:
            assert ctx.metrics.text_width(line.strip('"'), 11) <= ctx.usable_text_width
        assert end.y < ctx.y


class TestClaimPacketRequest:
    def test_missing_requester_email_is_rejected(self, claim_payload):
        del claim_payload["user"]["email"]
        with pytest.raises(ValidationError):
            ClaimPacketRequest.model_validate(claim_payload)

    def test_blank_problem_description_is_rejected(self, claim_payload):
        claim_payload["problemDescription"] = "   "
        with pytest.raises(ValidationError):
            ClaimPacketRequest.model_validate(claim_payload)

    def test_numeric_ids_and_prices_are_coerced(self, claim_payload):
        claim_payload["product"]["id"] = 123
        claim_payload["product"]["price"] = "49.5"
        request = ClaimPacketRequest.model_validate(claim_payload)
        assert request.product.id == "123"
        assert request.product.price == 49.5
