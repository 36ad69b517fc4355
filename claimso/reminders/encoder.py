"""
Calendar Event Encoder - warranty expiration reminders as iCalendar.

Expiration is purchase date plus N calendar months. The day of month is kept
and clamped to the end of shorter months (2024-01-31 + 1 month = 2024-02-29).
"""

from __future__ import annotations

from datetime import UTC, date, datetime

from dateutil.relativedelta import relativedelta
from icalendar import Alarm, Calendar, Event

from claimso.config import CALENDAR_PRODUCT_ID, CALENDAR_UID_DOMAIN
from claimso.observability.logging import get_logger
from claimso.observability.telemetry import counter, log_event
from claimso.reminders.models import ExpirationEvent, ReminderAlarm, WarrantyCalendarInput

logger = get_logger(__name__)


class CalendarEncodingError(RuntimeError):
    """Raised when a reminder cannot be serialized to iCalendar."""


def compute_expiration_date(purchase_date: date, months: int) -> date:
    return purchase_date + relativedelta(months=months)


def build_expiration_event(product: WarrantyCalendarInput) -> ExpirationEvent:
    name = product.product_name
    return ExpirationEvent(
        uid=f"warranty-{product.id}@{CALENDAR_UID_DOMAIN}",
        start=compute_expiration_date(product.purchase_date, product.warranty_length_months),
        summary=f"Warranty Expiration: {name}",
        description=f"Your warranty for {name} expires today.",
        alarm=ReminderAlarm(description=f"Reminder: Warranty expires in 1 week for {name}"),
    )


class CalendarEventEncoder:
    """Serialize ExpirationEvents to ``text/calendar`` content."""

    def encode(self, product: WarrantyCalendarInput, now: datetime | None = None) -> str:
        """
        Build the reminder event and serialize it.

        Args:
            product: Validated calendar input
            now: DTSTAMP value (defaults to the current UTC time)

        Returns:
            iCalendar document as text

        Raises:
            CalendarEncodingError: If serialization fails or yields nothing
        """
        try:
            expiration = build_expiration_event(product)
            content = self.serialize(expiration, now or datetime.now(UTC))
        except (ValueError, TypeError, OverflowError) as e:
            counter("reminders.encode_failed")
            logger.error("Calendar encoding failed for %s: %s", product.id, e)
            raise CalendarEncodingError("Failed to generate calendar event") from e

        if not content.strip():
            counter("reminders.encode_failed")
            raise CalendarEncodingError("Calendar encoder produced no output")

        counter("reminders.encoded")
        log_event("reminders.encoded", expires=expiration.start.isoformat())
        return content

    @staticmethod
    def serialize(expiration: ExpirationEvent, stamp: datetime) -> str:
        calendar = Calendar()
        calendar.add("prodid", CALENDAR_PRODUCT_ID)
        calendar.add("version", "2.0")

        event = Event()
        event.add("uid", expiration.uid)
        event.add("dtstamp", stamp)
        event.add("dtstart", expiration.start)
        event.add("duration", expiration.duration)
        event.add("summary", expiration.summary)
        event.add("description", expiration.description)

        alarm = Alarm()
        alarm.add("action", "DISPLAY")
        alarm.add("description", expiration.alarm.description)
        alarm.add("trigger", expiration.alarm.trigger)
        event.add_component(alarm)

        calendar.add_component(event)
        return calendar.to_ical().decode("utf-8")
