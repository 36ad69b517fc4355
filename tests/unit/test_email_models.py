"""Unit tests for extracted record models"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from claimso.email_parser import ExtractedProduct, OrderStatus, OrderStatusUpdate


class TestExtractedProduct:
    def test_product_name_is_required(self):
        with pytest.raises(ValidationError):
            ExtractedProduct.model_validate({"brand": "Apple"})

    def test_blank_product_name_is_rejected(self):
        with pytest.raises(ValidationError):
            ExtractedProduct(product_name="   ")

    def test_product_name_is_trimmed(self):
        assert ExtractedProduct(product_name="  Lamp ").product_name == "Lamp"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(129, 129.0), ("129.99", 129.99), ("$1,299.00", 1299.0), ("free", None), (True, None)],
    )
    def test_price_normalization(self, raw, expected):
        assert ExtractedProduct(product_name="X", purchase_price=raw).purchase_price == expected

    @pytest.mark.parametrize("raw", [float("nan"), float("inf"), float("-inf"), 10**400, "9" * 400])
    def test_non_finite_price_is_dropped(self, raw):
        product = ExtractedProduct(product_name="TV", purchase_price=raw)
        assert product.purchase_price is None
        assert product.to_response() == {"product_name": "TV"}

    def test_non_iso_purchase_date_is_dropped(self):
        product = ExtractedProduct(product_name="X", purchase_date="January 5th")
        assert product.purchase_date is None

    def test_timestamp_purchase_date_keeps_date(self):
        product = ExtractedProduct(product_name="X", purchase_date="2024-01-15T10:00:00Z")
        assert product.purchase_date == "2024-01-15"

    def test_condition_is_case_insensitive(self):
        assert ExtractedProduct(product_name="X", condition="Refurbished").condition == "refurbished"

    def test_unknown_condition_is_dropped(self):
        assert ExtractedProduct(product_name="X", condition="like new").condition is None

    def test_response_omits_missing_fields(self):
        product = ExtractedProduct(product_name="X", brand="", currency="USD")
        assert product.to_response() == {"product_name": "X", "currency": "USD"}


class TestOrderStatusUpdate:
    def test_status_is_normalized(self):
        update = OrderStatusUpdate(order_id="1", status="Out For-Delivery")
        assert update.status == "out_for_delivery"
        assert update.known_status is OrderStatus.OUT_FOR_DELIVERY

    def test_numeric_order_id_becomes_string(self):
        assert OrderStatusUpdate(order_id=987, status="delivered").order_id == "987"

    def test_missing_status_is_rejected(self):
        with pytest.raises(ValidationError):
            OrderStatusUpdate.model_validate({"order_id": "1"})

    def test_invalid_delivery_date_is_dropped(self):
        update = OrderStatusUpdate(order_id="1", status="shipped", estimated_delivery="soon")
        assert update.estimated_delivery is None
