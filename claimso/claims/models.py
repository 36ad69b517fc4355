"""
Claim packet request models.

The JSON body uses camelCase for the problem description
(``problemDescription``); both spellings are accepted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from claimso.utils.validators import NonEmptyStr


class ClaimProduct(BaseModel):
    """Product the warranty claim is about."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: NonEmptyStr
    name: NonEmptyStr
    brand: str | None = None
    serial_number: str | None = None
    purchase_date: str | None = None
    order_number: str | None = None
    retailer: str | None = None
    price: float | None = None
    currency: str | None = None
    category: str | None = None


class Requester(BaseModel):
    """Person the packet is prepared for."""

    name: NonEmptyStr
    email: NonEmptyStr


class ClaimPacketRequest(BaseModel):
    """Everything needed to render one claim packet."""

    model_config = ConfigDict(populate_by_name=True)

    product: ClaimProduct
    problem_description: NonEmptyStr = Field(..., alias="problemDescription")
    user: Requester
