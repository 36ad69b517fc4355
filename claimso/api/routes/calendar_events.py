"""Warranty reminder calendar endpoint for CLAIMSO services."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from claimso.api.middleware.auth import require_service_auth
from claimso.reminders import CalendarEncodingError, CalendarEventEncoder, WarrantyCalendarInput

router = APIRouter(tags=["calendar"], dependencies=[Depends(require_service_auth)])

CALENDAR_MEDIA_TYPE = "text/calendar"

_encoder = CalendarEventEncoder()


def get_encoder() -> CalendarEventEncoder:
    return _encoder


@router.post("/calendar-generator", response_class=Response)
def generate_calendar_event(
    product: WarrantyCalendarInput,
    encoder: CalendarEventEncoder = Depends(get_encoder),
) -> Response:
    """Return an iCalendar event on the warranty expiration date."""
    try:
        content = encoder.encode(product).encode("utf-8")
    except CalendarEncodingError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate calendar event",
        ) from e

    return Response(
        content=content,
        media_type=CALENDAR_MEDIA_TYPE,
        headers={"Content-Length": str(len(content))},
    )
