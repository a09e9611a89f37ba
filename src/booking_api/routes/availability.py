"""Availability calendar endpoints.

Provides REST endpoints for:
- Rendering a 42-cell month with blocked/past/selection flags
- Month navigation
- Applying a calendar click to the current selection
- Checking whether a selection can be submitted

All dates are in YYYY-MM-DD format. The client owns the selection and
sends it with every call.
"""

import re

from fastapi import APIRouter, Depends, Query

from booking_api.dependencies import get_availability_calendar
from booking_api.models.availability import (
    CalendarRequest,
    CheckRequest,
    NavigateResponse,
    SelectRequest,
    SelectResponse,
)
from booking_engine.models import BookingError, ErrorCode, MonthView, SelectionCheck
from booking_engine.services.booking import check_selection
from booking_engine.services.calendar import AvailabilityCalendar, month_label
from booking_engine.services.dates import MAX_GRID_YEAR, MIN_GRID_YEAR

router = APIRouter(tags=["availability"])

MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def parse_month(month: str) -> tuple[int, int]:
    """Parse ``YYYY-MM`` within the renderable year range.

    Raises:
        BookingError: INVALID_MONTH for anything else
    """
    match = MONTH_PATTERN.match(month)
    if (
        not match
        or not MIN_GRID_YEAR <= int(match.group(1)) <= MAX_GRID_YEAR
        or not 1 <= int(match.group(2)) <= 12
    ):
        raise BookingError(ErrorCode.INVALID_MONTH, details={"month": month})
    return int(match.group(1)), int(match.group(2))


@router.post(
    "/availability/calendar",
    summary="Render a calendar month",
    description="""
Build the 6-week grid for a month with per-day flags.

Each month is exactly 42 days, Sunday first, padded with days from the
previous and next month (`is_current_month=false`).

**Flags:**
- `is_past`: before the guest's `today`
- `is_blocked`: listed in `blocked_dates`
- `disabled`: past or blocked
- `is_check_in` / `is_check_out`: selection endpoints
- `in_range`: strictly between check-in and check-out
""",
    response_description="Decorated month view",
    response_model=MonthView,
)
async def get_month_view(
    request: CalendarRequest,
    calendar: AvailabilityCalendar = Depends(get_availability_calendar),
) -> MonthView:
    return calendar.month_view(
        request.year,
        request.month,
        request.blocked_dates,
        request.selection,
        request.today,
    )


@router.get(
    "/availability/calendar/{month}/navigate",
    summary="Move to the previous or next month",
    description="""
Shift a `YYYY-MM` month by one step. The selection is not affected.

**Notes:**
- `direction=-1` goes back, `direction=1` goes forward
- Year boundaries wrap (2026-12 + 1 = 2027-01)
- Navigation stops at 0002-01 and 9998-12
""",
    response_model=NavigateResponse,
    responses={
        400: {"description": "Invalid month format (expected YYYY-MM, years 0002-9998)"},
    },
)
async def navigate_month(
    month: str,
    direction: int = Query(..., ge=-1, le=1, description="-1 for previous, 1 for next"),
    calendar: AvailabilityCalendar = Depends(get_availability_calendar),
) -> NavigateResponse:
    year, month_number = parse_month(month)
    year, month_number = calendar.navigate_month(year, month_number, direction)
    return NavigateResponse(
        month=f"{year:04d}-{month_number:02d}",
        year=year,
        month_number=month_number,
        label=month_label(year, month_number),
    )


@router.post(
    "/availability/select",
    summary="Apply a calendar click",
    description="""
Run a click on a day through the two-click selection protocol.

- Past or blocked days are ignored
- With no check-in, or a day on/before check-in, the click starts a new selection
- With a full range selected, any valid click starts a new selection
- Otherwise the day becomes check-out, unless a blocked night lies between
  check-in and the clicked day, in which case the click is ignored

Ignored clicks return the selection unchanged with `accepted=false`.
""",
    response_model=SelectResponse,
)
async def select_date(
    request: SelectRequest,
    calendar: AvailabilityCalendar = Depends(get_availability_calendar),
) -> SelectResponse:
    outcome = calendar.click(
        request.selection,
        request.date,
        request.blocked_dates,
        request.today,
    )
    return SelectResponse(
        selection=outcome.selection,
        state=outcome.state,
        accepted=outcome.accepted,
        reason=outcome.reason,
    )


@router.post(
    "/availability/check",
    summary="Check a selection",
    description="""
Evaluate the submission gate for a selection.

A selection is submittable when both dates are set, there is at least one
night, and no blocked night lies in `[check_in, check_out)`. Dates typed
directly by the guest go through the same check.
""",
    response_model=SelectionCheck,
)
async def check_dates(request: CheckRequest) -> SelectionCheck:
    return check_selection(request.selection, request.blocked_dates)
