"""
Warranty reminder models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from claimso.utils.validators import NonEmptyStr


class WarrantyCalendarInput(BaseModel):
    """Product and warranty length a reminder is generated for."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: NonEmptyStr
    product_name: NonEmptyStr
    purchase_date: date
    warranty_length_months: int = Field(..., gt=0)

    @field_validator("purchase_date", mode="before")
    @classmethod
    def date_part_only(cls, v):
        """Accept full ISO timestamps by keeping the calendar date."""
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        return v


@dataclass(frozen=True)
class ReminderAlarm:
    description: str
    trigger: timedelta = timedelta(weeks=-1)


@dataclass(frozen=True)
class ExpirationEvent:
    """All-day-dated event marking the last day of warranty coverage."""

    uid: str
    start: date
    summary: str
    description: str
    alarm: ReminderAlarm
    duration: timedelta = timedelta(hours=1)
