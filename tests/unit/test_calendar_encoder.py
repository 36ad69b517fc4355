"""Unit tests for warranty expiration calendar events"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from unittest.mock import patch

import pytest
from icalendar import Calendar
from pydantic import ValidationError

from claimso.reminders import (
    CalendarEncodingError,
    CalendarEventEncoder,
    WarrantyCalendarInput,
    build_expiration_event,
    compute_expiration_date,
)

STAMP = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def product():
    return WarrantyCalendarInput(
        id="p1",
        product_name="MacBook Pro",
        purchase_date="2024-01-15",
        warranty_length_months=12,
    )


class TestExpirationDate:
    @pytest.mark.parametrize(
        ("purchased", "months", "expected"),
        [
            (date(2024, 1, 15), 12, date(2025, 1, 15)),
            (date(2024, 1, 31), 1, date(2024, 2, 29)),
            (date(2023, 1, 31), 1, date(2023, 2, 28)),
            (date(2024, 2, 29), 12, date(2025, 2, 28)),
            (date(2024, 8, 31), 1, date(2024, 9, 30)),
            (date(2024, 11, 10), 3, date(2025, 2, 10)),
        ],
    )
    def test_month_arithmetic(self, purchased, months, expected):
        assert compute_expiration_date(purchased, months) == expected

    def test_event_texts(self, product):
        event = build_expiration_event(product)

        assert event.start == date(2025, 1, 15)
        assert event.uid == "warranty-p1@claimso.com"
        assert event.summary == "Warranty Expiration: MacBook Pro"
        assert event.description == "Your warranty for MacBook Pro expires today."
        assert event.alarm.description == "Reminder: Warranty expires in 1 week for MacBook Pro"
        assert event.duration == timedelta(hours=1)


class TestEncode:
    def test_round_trips_through_icalendar(self, product):
        content = CalendarEventEncoder().encode(product, now=STAMP)

        calendar = Calendar.from_ical(content)
        assert str(calendar["prodid"]) == "-//CLAIMSO//Warranty Reminders//EN"
        assert str(calendar["version"]) == "2.0"

        events = list(calendar.walk("VEVENT"))
        assert len(events) == 1
        event = events[0]
        assert event.decoded("dtstart") == date(2025, 1, 15)
        assert event.decoded("duration") == timedelta(hours=1)
        assert str(event["summary"]) == "Warranty Expiration: MacBook Pro"
        assert str(event["uid"]) == "warranty-p1@claimso.com"

        alarms = list(event.walk("VALARM"))
        assert len(alarms) == 1
        assert str(alarms[0]["action"]) == "DISPLAY"
        assert alarms[0].decoded("trigger") == timedelta(weeks=-1)

    def test_output_is_text_calendar(self, product):
        content = CalendarEventEncoder().encode(product, now=STAMP)
        assert content.startswith("BEGIN:VCALENDAR")
        assert "DTSTART;VALUE=DATE:20250115" in content

    def test_serializer_error_is_wrapped(self, product):
        with patch.object(CalendarEventEncoder, "serialize", side_effect=ValueError("bad")):
            with pytest.raises(CalendarEncodingError):
                CalendarEventEncoder().encode(product)

    def test_empty_output_is_an_error(self, product):
        with patch.object(CalendarEventEncoder, "serialize", return_value=""):
            with pytest.raises(CalendarEncodingError):
                CalendarEventEncoder().encode(product)


class TestWarrantyCalendarInput:
    def test_timestamp_keeps_date_part(self):
        model = WarrantyCalendarInput(
            id=7, product_name="TV", purchase_date="2024-01-15T08:00:00.000Z", warranty_length_months=24
        )
        assert model.purchase_date == date(2024, 1, 15)
        assert model.id == "7"

    @pytest.mark.parametrize("months", [0, -3])
    def test_non_positive_months_are_rejected(self, months):
        with pytest.raises(ValidationError):
            WarrantyCalendarInput(
                id="p", product_name="TV", purchase_date="2024-01-15", warranty_length_months=months
            )

    def test_invalid_date_is_rejected(self):
        with pytest.raises(ValidationError):
            WarrantyCalendarInput(
                id="p", product_name="TV", purchase_date="next tuesday", warranty_length_months=12
            )
