"""
Email interpretation domain models.

Input email, the closed intent/status vocabularies, and the two structured
records the extractors produce. Optional fields are validated leniently: a
value the model got wrong is dropped rather than failing the whole record,
while the required fields are strict.
"""

from __future__ import annotations

import math
import re
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IntentLabel(str, Enum):
    """Purpose of a retailer email."""

    PURCHASE = "PURCHASE"  # Order confirmations, receipts for new purchases
    RETURN = "RETURN"  # Return confirmations, refunds, return labels
    SHIPMENT_UPDATE = "SHIPMENT_UPDATE"  # Shipped, out for delivery, delivered


class ProductCondition(str, Enum):
    NEW = "new"
    USED = "used"
    REFURBISHED = "refurbished"


class OrderStatus(str, Enum):
    """Recommended status vocabulary for order updates."""

    PROCESSING = "processing"
    SHIPPED = "shipped"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    RETURNED = "returned"
    REFUNDED = "refunded"


class EmailMessage(BaseModel):
    """An inbound email. Immutable; never persisted."""

    model_config = ConfigDict(frozen=True)

    sender: str
    recipient: str
    subject: str
    text: str
    html: str | None = None


_PRICE_NOISE = re.compile(r"[^0-9.\-]")


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _iso_date_or_none(value: Any) -> str | None:
    """Keep only YYYY-MM-DD dates; anything else is treated as not extracted."""
    value = _blank_to_none(value)
    if value is None:
        return None
    try:
        return date.fromisoformat(str(value).strip()[:10]).isoformat()
    except ValueError:
        return None


class ExtractedProduct(BaseModel):
    """Product purchase record extracted from a PURCHASE email."""

    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    product_name: str
    brand: str | None = None
    model: str | None = None
    category: str | None = None
    purchase_date: str | None = Field(default=None, description="YYYY-MM-DD")
    purchase_price: float | None = Field(default=None, description="Plain number, no symbol")
    currency: str | None = None
    purchase_location: str | None = None
    serial_number: str | None = None
    condition: ProductCondition | None = None
    notes: str | None = None

    @field_validator("product_name", mode="before")
    @classmethod
    def product_name_not_empty(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("product_name cannot be empty")
        return v.strip()

    @field_validator(
        "brand",
        "model",
        "category",
        "currency",
        "purchase_location",
        "serial_number",
        "notes",
        mode="before",
    )
    @classmethod
    def optional_text(cls, v: Any) -> str | None:
        v = _blank_to_none(v)
        if v is None:
            return None
        return str(v).strip()

    @field_validator("purchase_date", mode="before")
    @classmethod
    def normalize_purchase_date(cls, v: Any) -> str | None:
        return _iso_date_or_none(v)

    @field_validator("purchase_price", mode="before")
    @classmethod
    def normalize_price(cls, v: Any) -> float | None:
        v = _blank_to_none(v)
        if v is None or isinstance(v, bool):
            return None
        try:
            price = float(v) if isinstance(v, int | float) else float(_PRICE_NOISE.sub("", str(v)))
        except (ValueError, OverflowError):
            return None
        # NaN and infinities are not prices
        return price if math.isfinite(price) else None

    @field_validator("condition", mode="before")
    @classmethod
    def normalize_condition(cls, v: Any) -> str | None:
        v = _blank_to_none(v)
        if v is None:
            return None
        candidate = str(v).strip().lower()
        if candidate in {c.value for c in ProductCondition}:
            return candidate
        return None

    def to_response(self) -> dict[str, Any]:
        """Serialize without the fields the model did not provide."""
        return self.model_dump(exclude_none=True)


class OrderStatusUpdate(BaseModel):
    """Order status record extracted from a RETURN or SHIPMENT_UPDATE email."""

    model_config = ConfigDict(extra="ignore")

    order_id: str
    status: str
    tracking_number: str | None = None
    estimated_delivery: str | None = Field(default=None, description="YYYY-MM-DD")
    notes: str | None = None

    @field_validator("order_id", mode="before")
    @classmethod
    def order_id_not_empty(cls, v: Any) -> str:
        if isinstance(v, int) and not isinstance(v, bool):
            v = str(v)
        if not isinstance(v, str) or not v.strip():
            raise ValueError("order_id cannot be empty")
        return v.strip()

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("status cannot be empty")
        return re.sub(r"[\s\-]+", "_", v.strip().lower())

    @field_validator("tracking_number", "notes", mode="before")
    @classmethod
    def optional_text(cls, v: Any) -> str | None:
        v = _blank_to_none(v)
        if v is None:
            return None
        return str(v).strip()

    @field_validator("estimated_delivery", mode="before")
    @classmethod
    def normalize_delivery_date(cls, v: Any) -> str | None:
        return _iso_date_or_none(v)

    @property
    def known_status(self) -> OrderStatus | None:
        """The status as a vocabulary member, or None if the model used another term."""
        try:
            return OrderStatus(self.status)
        except ValueError:
            return None

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
