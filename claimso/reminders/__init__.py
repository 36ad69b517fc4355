"""
CLAIMSO reminders - warranty expiration calendar events.
"""

from claimso.reminders.encoder import (
    CalendarEncodingError,
    CalendarEventEncoder,
    build_expiration_event,
    compute_expiration_date,
)
from claimso.reminders.models import ExpirationEvent, ReminderAlarm, WarrantyCalendarInput

__all__ = [
    "CalendarEncodingError",
    "CalendarEventEncoder",
    "ExpirationEvent",
    "ReminderAlarm",
    "WarrantyCalendarInput",
    "build_expiration_event",
    "compute_expiration_date",
]
