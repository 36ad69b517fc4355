"""
Wallet pass data model.

Templates and fields are frozen values. Customizing a pass produces a new
PassTemplate via ``dataclasses.replace``; the shared template is never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from claimso.utils.validators import NonEmptyStr

QR_FORMAT = "PKBarcodeFormatQR"
BARCODE_ENCODING = "iso-8859-1"


@dataclass(frozen=True)
class PassField:
    """One key/label/value entry on the front or back of a pass."""

    key: str
    label: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "label": self.label, "value": self.value}


@dataclass(frozen=True)
class PassBarcode:
    message: str
    format: str = QR_FORMAT
    message_encoding: str = BARCODE_ENCODING

    def to_dict(self) -> dict[str, str]:
        return {
            "message": self.message,
            "format": self.format,
            "messageEncoding": self.message_encoding,
        }


def replace_field(fields: tuple[PassField, ...], updated: PassField) -> tuple[PassField, ...]:
    """Drop any field sharing ``updated.key``, then append ``updated``."""
    return tuple(f for f in fields if f.key != updated.key) + (updated,)


def _iso_timestamp(value: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class PassTemplate:
    """Complete pass.json content for a generic-style pass."""

    pass_type_identifier: str
    team_identifier: str
    organization_name: str
    description: str
    logo_text: str
    foreground_color: str
    background_color: str
    label_color: str
    primary_fields: tuple[PassField, ...]
    secondary_fields: tuple[PassField, ...]
    auxiliary_fields: tuple[PassField, ...]
    back_fields: tuple[PassField, ...]
    barcodes: tuple[PassBarcode, ...]
    relevant_date: datetime
    expiration_date: datetime
    max_distance: int = 1000
    format_version: int = 1
    serial_number: str | None = None

    def field_by_key(self, key: str) -> PassField | None:
        for fields in (
            self.primary_fields,
            self.secondary_fields,
            self.auxiliary_fields,
            self.back_fields,
        ):
            for pass_field in fields:
                if pass_field.key == key:
                    return pass_field
        return None

    def to_pass_json(self) -> dict[str, Any]:
        """Serialize using the camelCase keys of the pass.json format."""
        payload: dict[str, Any] = {
            "formatVersion": self.format_version,
            "passTypeIdentifier": self.pass_type_identifier,
            "teamIdentifier": self.team_identifier,
            "organizationName": self.organization_name,
            "description": self.description,
            "logoText": self.logo_text,
            "foregroundColor": self.foreground_color,
            "backgroundColor": self.background_color,
            "labelColor": self.label_color,
            "generic": {
                "primaryFields": [f.to_dict() for f in self.primary_fields],
                "secondaryFields": [f.to_dict() for f in self.secondary_fields],
                "auxiliaryFields": [f.to_dict() for f in self.auxiliary_fields],
                "backFields": [f.to_dict() for f in self.back_fields],
            },
            "barcodes": [b.to_dict() for b in self.barcodes],
            "locations": [],
            "maxDistance": self.max_distance,
            "relevantDate": _iso_timestamp(self.relevant_date),
            "expirationDate": _iso_timestamp(self.expiration_date),
        }
        if self.serial_number is not None:
            payload["serialNumber"] = self.serial_number
        return payload


class SubjectProfile(BaseModel):
    """Account summary a pass is issued for."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: NonEmptyStr
    full_name: str | None = None
    email: NonEmptyStr
    product_count: int = Field(default=0, ge=0, alias="productCount")
